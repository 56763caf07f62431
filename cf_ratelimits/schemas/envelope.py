"""Pydantic schemas for the response envelope shared by every API call."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ResponseInfo(BaseModel):
    """A single entry of the envelope's ``errors`` or ``messages`` arrays."""

    code: int | None = Field(
        default=None,
        description="Numeric error code reported by the API, when present.",
    )
    message: str = Field(
        default="",
        description="Server-provided message text, kept verbatim; empty when only a code is sent.",
    )


class ResultInfo(BaseModel):
    """Pagination metadata returned alongside list results."""

    page: int | None = None
    per_page: int | None = None
    count: int | None = None
    total_count: int | None = None
    total_pages: int | None = None

    def has_more(self) -> bool:
        """Return True when pages beyond the current one are known to exist."""
        if self.page is None:
            return False
        if self.total_pages is not None:
            return self.page < self.total_pages
        if self.total_count is not None and self.per_page:
            return self.page * self.per_page < self.total_count
        return False


class APIEnvelope(BaseModel):
    """Outer JSON wrapper common to all API responses."""

    success: bool = Field(
        ...,
        description="Whether the API considered the call successful.",
    )
    result: Any = Field(
        default=None,
        description="Operation payload; decoded into a typed record by the caller.",
    )
    errors: list[ResponseInfo] = Field(default_factory=list)
    messages: list[ResponseInfo] = Field(default_factory=list)
    result_info: ResultInfo | None = None

    @field_validator("errors", "messages", mode="before")
    @classmethod
    def _coerce_info_list(cls, value: Any) -> Any:
        # The API sends null for empty arrays and occasionally bare strings
        if value is None:
            return []
        if isinstance(value, list):
            return [{"message": item} if isinstance(item, str) else item for item in value]
        return value

    def error_text(self) -> str:
        """Join the reported error messages for display."""
        return "; ".join(info.message for info in self.errors if info.message)

    def error_codes(self) -> list[int]:
        return [info.code for info in self.errors if info.code is not None]
