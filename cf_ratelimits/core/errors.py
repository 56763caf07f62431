"""Client exception types.

Every failure raised by the transport or the resource layer derives from
AppError, so callers can catch one base class or discriminate by subclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NotRequired, TypedDict

if TYPE_CHECKING:
    from cf_ratelimits.schemas.envelope import ResponseInfo


class ErrorDetails(TypedDict, total=False):
    """Structured error context for observability and callers."""

    http_status: int
    method: str
    path: str
    cf_ray: str
    request_id: str
    context: NotRequired[dict[str, Any]]


@dataclass
class AppError(Exception):
    """Base error for client failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message.
        details: Optional structured details for debugging/observability.
    """

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        # Populate Exception args so str(error) is useful in logs/tracebacks.
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Raised when client configuration is invalid."""


class TransportError(AppError):
    """Raised when the HTTP exchange fails or the response body is unusable."""


@dataclass
class APIError(AppError):
    """Raised when the API answers with ``success: false``.

    The server's messages are kept verbatim; ``message`` joins them.
    """

    errors: list[ResponseInfo] = field(default_factory=list)

    @property
    def status_code(self) -> int | None:
        if self.details is None:
            return None
        return self.details.get("http_status")
