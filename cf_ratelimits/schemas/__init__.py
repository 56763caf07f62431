"""Typed request/response schemas."""

from cf_ratelimits.schemas.envelope import APIEnvelope, ResponseInfo, ResultInfo
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

__all__ = [
    "APIEnvelope",
    "MATCH_ALL",
    "RateLimit",
    "RateLimitAction",
    "RateLimitActionResponse",
    "RateLimitKeyValue",
    "RateLimitRequestMatcher",
    "RateLimitResponseMatcher",
    "RateLimitTrafficMatcher",
    "ResponseInfo",
    "ResultInfo",
]
