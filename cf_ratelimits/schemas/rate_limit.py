"""Pydantic schemas for zone rate-limiting rules.

Field names (or their aliases) are the JSON names used by the API and must
round-trip exactly. Unknown fields sent by the server are ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Literal sentinel for "every method" / "every scheme". Sent as-is on the wire.
MATCH_ALL = "_ALL_"

ACTION_MODE_BAN = "ban"
ACTION_MODE_SIMULATE = "simulate"
ACTION_MODE_CHALLENGE = "challenge"
ACTION_MODE_JS_CHALLENGE = "js_challenge"


class _RuleModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RateLimitRequestMatcher(_RuleModel):
    """Which requests count toward the threshold."""

    methods: list[str] | None = Field(
        default=None,
        description="HTTP methods to match, or [MATCH_ALL].",
    )
    schemes: list[str] | None = Field(
        default=None,
        description="URL schemes to match (HTTP, HTTPS), or [MATCH_ALL].",
    )
    url_pattern: str = Field(
        default="",
        alias="url",
        description="URL pattern; '*' wildcards are interpreted by the API.",
    )


class RateLimitResponseMatcher(_RuleModel):
    origin_traffic: bool | None = Field(
        default=None,
        description="Count responses served by the origin rather than from cache.",
    )


class RateLimitTrafficMatcher(_RuleModel):
    request: RateLimitRequestMatcher = Field(default_factory=RateLimitRequestMatcher)
    response: RateLimitResponseMatcher = Field(default_factory=RateLimitResponseMatcher)


class RateLimitActionResponse(_RuleModel):
    """Custom body returned to clients while a simulate/ban action is active.

    The API accepts only ``content_type`` and ``body`` here; the status code
    served is fixed by the action mode, so there is no status field.
    """

    content_type: str | None = None
    body: str | None = None


class RateLimitAction(_RuleModel):
    """What happens once the threshold is exceeded."""

    mode: str = Field(
        default="",
        description="Action mode: ban, simulate, challenge or js_challenge.",
    )
    timeout: int = Field(
        default=0,
        description="Seconds the action stays in effect after triggering.",
    )
    response: RateLimitActionResponse | None = None


class RateLimitKeyValue(_RuleModel):
    """A bypass entry, e.g. ``{"name": "url", "value": "example.com/health"}``."""

    name: str
    value: str


class RateLimit(_RuleModel):
    """A zone rate-limiting rule.

    ``id`` is assigned by the API; it is None on values built for a create
    call. ``threshold`` and ``period`` are not validated locally, the API
    rejects degenerate values itself.
    """

    id: str | None = None
    disabled: bool = False
    description: str = ""
    match: RateLimitTrafficMatcher = Field(default_factory=RateLimitTrafficMatcher)
    bypass: list[RateLimitKeyValue] | None = None
    threshold: int = 0
    period: int = 0
    action: RateLimitAction = Field(default_factory=RateLimitAction)

    def to_payload(self, *, include_id: bool = True) -> dict[str, Any]:
        """Encode the rule as the JSON request body.

        Args:
            include_id: Whether to keep ``id`` in the body (it is dropped on create).

        Returns:
            JSON-ready dict using wire field names; unset optional fields are omitted.
        """
        exclude = None if include_id else {"id"}
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude=exclude,
        )
