"""Typed async client for Cloudflare zone rate-limiting rules."""

from cf_ratelimits.adapters.http import AbstractAPITransport, HttpxTransport, create_transport
from cf_ratelimits.core.errors import APIError, AppError, TransportError, ValidationAppError
from cf_ratelimits.schemas.rate_limit import (
    MATCH_ALL,
    RateLimit,
    RateLimitAction,
    RateLimitActionResponse,
    RateLimitKeyValue,
    RateLimitRequestMatcher,
    RateLimitResponseMatcher,
    RateLimitTrafficMatcher,
)
from cf_ratelimits.services.rate_limit_service import RateLimitResource

__all__ = [
    "APIError",
    "AbstractAPITransport",
    "AppError",
    "HttpxTransport",
    "MATCH_ALL",
    "RateLimit",
    "RateLimitAction",
    "RateLimitActionResponse",
    "RateLimitKeyValue",
    "RateLimitRequestMatcher",
    "RateLimitResource",
    "RateLimitResponseMatcher",
    "RateLimitTrafficMatcher",
    "TransportError",
    "ValidationAppError",
    "create_transport",
]
