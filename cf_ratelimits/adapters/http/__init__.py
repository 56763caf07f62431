"""HTTP transport layer - performs raw API calls and parses envelopes."""

from cf_ratelimits.adapters.http.base import AbstractAPITransport
from cf_ratelimits.adapters.http.factory import create_transport
from cf_ratelimits.adapters.http.httpx_client import HttpxTransport

__all__ = [
    "AbstractAPITransport",
    "HttpxTransport",
    "create_transport",
]
