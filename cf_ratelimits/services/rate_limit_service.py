"""Zone rate-limiting rules resource.

Each operation builds a zone-scoped path, delegates the HTTP exchange to the
injected transport and decodes the envelope's ``result`` into typed records.
Nothing is cached and no input is validated locally; the API is the sole
authority on rule validity.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from cf_ratelimits.adapters.http.base import AbstractAPITransport
from cf_ratelimits.core.errors import TransportError
from cf_ratelimits.schemas.envelope import APIEnvelope
from cf_ratelimits.schemas.rate_limit import RateLimit

logger = logging.getLogger(__name__)

_RATE_LIMIT_LIST = TypeAdapter(list[RateLimit])


def _collection_path(zone_id: str) -> str:
    return f"/zones/{zone_id}/rate_limits"


def _item_path(zone_id: str, rate_limit_id: str) -> str:
    return f"/zones/{zone_id}/rate_limits/{rate_limit_id}"


def _decode_rule(envelope: APIEnvelope, path: str) -> RateLimit:
    """Decode a single rule from a successful envelope.

    Raises:
        TransportError: If ``result`` is missing or not a rule object.
    """
    if envelope.result is None:
        raise TransportError(
            code="malformed_result",
            message=f"Response for {path} has no result",
            details={"path": path},
        )
    try:
        return RateLimit.model_validate(envelope.result)
    except ValidationError as exc:
        raise TransportError(
            code="malformed_result",
            message=f"Response for {path} is not a rate limit: {exc.error_count()} error(s)",
            details={"path": path},
        ) from exc


def _decode_rules(envelope: APIEnvelope, path: str) -> list[RateLimit]:
    if envelope.result is None:
        return []
    try:
        return _RATE_LIMIT_LIST.validate_python(envelope.result)
    except ValidationError as exc:
        raise TransportError(
            code="malformed_result",
            message=f"Response for {path} is not a list of rate limits: {exc.error_count()} error(s)",
            details={"path": path},
        ) from exc


class RateLimitResource:
    """CRUD operations over a zone's rate-limiting rules.

    Failures propagate as TransportError or APIError; an operation either
    returns a fully decoded value or raises.

    Attributes:
        transport: Collaborator performing the raw API calls.
    """

    def __init__(self, transport: AbstractAPITransport) -> None:
        self.transport = transport

    async def list(
        self,
        zone_id: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[RateLimit]:
        """List the rules of a zone.

        Returns a single page, the first one unless ``page`` is given, in the
        order the API returns them.

        Args:
            zone_id: Zone identifier.
            page: Optional 1-based page number.
            per_page: Optional page size.

        Returns:
            list[RateLimit]: Rules on the requested page.
        """
        rules, _ = await self._list_page(zone_id, page=page, per_page=per_page)
        return rules

    async def list_all(self, zone_id: str, *, per_page: int | None = None) -> list[RateLimit]:
        """List every rule of a zone, following pagination metadata.

        Args:
            zone_id: Zone identifier.
            per_page: Optional page size for each request.

        Returns:
            list[RateLimit]: Rules from all pages, in page order.
        """
        rules: list[RateLimit] = []
        page = 1
        while True:
            page_rules, envelope = await self._list_page(zone_id, page=page, per_page=per_page)
            info = envelope.result_info
            # A server that ignores the page parameter would repeat forever
            if info is not None and info.page is not None and info.page != page:
                logger.warning(
                    "rate_limits.list_all_page_mismatch",
                    extra={"zone_id": zone_id, "requested_page": page, "returned_page": info.page},
                )
                break
            rules.extend(page_rules)
            if not page_rules or info is None or not info.has_more():
                break
            page += 1

        logger.info(
            "rate_limits.list_all",
            extra={"zone_id": zone_id, "count": len(rules), "pages": page},
        )
        return rules

    async def _list_page(
        self,
        zone_id: str,
        *,
        page: int | None,
        per_page: int | None,
    ) -> tuple[list[RateLimit], APIEnvelope]:
        path = _collection_path(zone_id)
        params: dict[str, Any] = {}
        if page is not None:
            params["page"] = page
        if per_page is not None:
            params["per_page"] = per_page

        envelope = await self.transport.call("GET", path, params=params or None)
        rules = _decode_rules(envelope, path)
        logger.info(
            "rate_limits.list",
            extra={"zone_id": zone_id, "count": len(rules), "page": page},
        )
        return rules, envelope

    async def get(self, zone_id: str, rate_limit_id: str) -> RateLimit:
        """Fetch a single rule."""
        path = _item_path(zone_id, rate_limit_id)
        envelope = await self.transport.call("GET", path)
        return _decode_rule(envelope, path)

    async def create(self, zone_id: str, rate_limit: RateLimit) -> RateLimit:
        """Create a rule in the zone.

        Any ``id`` on the input is not sent; the API assigns one.

        Args:
            zone_id: Zone identifier.
            rate_limit: Rule to create.

        Returns:
            RateLimit: The stored rule, including its server-assigned id.
        """
        path = _collection_path(zone_id)
        envelope = await self.transport.call(
            "POST",
            path,
            payload=rate_limit.to_payload(include_id=False),
        )
        created = _decode_rule(envelope, path)
        logger.info(
            "rate_limits.created",
            extra={"zone_id": zone_id, "rate_limit_id": created.id},
        )
        return created

    async def update(self, zone_id: str, rate_limit_id: str, rate_limit: RateLimit) -> RateLimit:
        """Replace a rule with ``rate_limit`` (full replace, not a patch).

        Returns:
            RateLimit: The rule as stored after the update.
        """
        path = _item_path(zone_id, rate_limit_id)
        envelope = await self.transport.call("PUT", path, payload=rate_limit.to_payload())
        updated = _decode_rule(envelope, path)
        logger.info(
            "rate_limits.updated",
            extra={"zone_id": zone_id, "rate_limit_id": rate_limit_id},
        )
        return updated

    async def delete(self, zone_id: str, rate_limit_id: str) -> None:
        """Delete a rule. Returns nothing; failures raise."""
        await self.transport.call("DELETE", _item_path(zone_id, rate_limit_id))
        logger.info(
            "rate_limits.deleted",
            extra={"zone_id": zone_id, "rate_limit_id": rate_limit_id},
        )
