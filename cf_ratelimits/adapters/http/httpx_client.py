"""httpx-based API transport."""

import logging
import time
from typing import Any

import httpx
from pydantic import ValidationError

from cf_ratelimits.adapters.http.base import AbstractAPITransport
from cf_ratelimits.core.config import DEFAULT_BASE_URL
from cf_ratelimits.core.errors import APIError, ErrorDetails, TransportError
from cf_ratelimits.core.logging import resolve_request_id
from cf_ratelimits.schemas.envelope import APIEnvelope

logger = logging.getLogger(__name__)


class HttpxTransport(AbstractAPITransport):
    """Transport that calls the API over an ``httpx.AsyncClient``.

    Authenticates with a scoped API token when one is given, otherwise with the
    legacy email + global API key pair. Every call sends an ``X-Request-ID``
    header, taken from the logging context or minted per call.
    """

    def __init__(
        self,
        *,
        api_token: str | None = None,
        api_key: str | None = None,
        api_email: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 30.0,
        user_agent: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            api_token: Scoped API token (Bearer auth).
            api_key: Legacy global API key, used together with api_email.
            api_email: Account email for legacy auth.
            base_url: Versioned API base URL; call paths are appended to it.
            timeout_seconds: Timeout for requests in seconds.
            user_agent: Optional User-Agent header value.
            client: Pre-built AsyncClient (e.g. with a mock transport). The
                transport does not close a client it did not create.
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout_seconds)
        self._auth_headers = self._build_auth_headers(api_token, api_key, api_email)
        self._user_agent = user_agent

    @staticmethod
    def _build_auth_headers(
        api_token: str | None,
        api_key: str | None,
        api_email: str | None,
    ) -> dict[str, str]:
        if api_token:
            return {"Authorization": f"Bearer {api_token}"}
        headers: dict[str, str] = {}
        if api_key:
            headers["X-Auth-Key"] = api_key
        if api_email:
            headers["X-Auth-Email"] = api_email
        return headers

    def _build_headers(self, has_body: bool, request_id: str) -> dict[str, str]:
        headers = {"Accept": "application/json", "X-Request-ID": request_id, **self._auth_headers}
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def call(
        self,
        method: str,
        path: str,
        *,
        payload: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> APIEnvelope:
        """Send one request and parse the response envelope.

        Raises:
            TransportError: On network failure or a body that is not a JSON envelope.
            APIError: When the envelope reports failure.
        """
        request_id = resolve_request_id()
        details: ErrorDetails = {"method": method, "path": path, "request_id": request_id}
        started = time.perf_counter()

        try:
            response = await self.client.request(
                method,
                f"{self.base_url}{path}",
                json=payload,
                params=params,
                headers=self._build_headers(payload is not None, request_id),
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "transport.request_failed",
                extra={"method": method, "path": path, "request_id": request_id, "error": str(exc)},
            )
            raise TransportError(
                code="transport_error",
                message=f"{method} {path} failed: {exc}",
                details=details,
            ) from exc

        details["http_status"] = response.status_code
        cf_ray = response.headers.get("cf-ray")
        if cf_ray:
            details["cf_ray"] = cf_ray

        logger.debug(
            "transport.response",
            extra={
                "method": method,
                "path": path,
                "request_id": request_id,
                "status_code": response.status_code,
                "cf_ray": cf_ray,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )

        envelope = self._parse_envelope(response, details)

        if not envelope.success:
            message = envelope.error_text()
            if not message:
                message = f"API request failed with HTTP {response.status_code}"
                codes = envelope.error_codes()
                if codes:
                    message += f" (error codes: {', '.join(str(c) for c in codes)})"
            logger.warning(
                "transport.api_error",
                extra={
                    "method": method,
                    "path": path,
                    "request_id": request_id,
                    "status_code": response.status_code,
                },
            )
            raise APIError(
                code="api_error",
                message=message,
                details=details,
                errors=envelope.errors,
            )

        if response.is_error:
            raise APIError(
                code="unexpected_status",
                message=f"API reported success with HTTP {response.status_code}",
                details=details,
                errors=envelope.errors,
            )

        return envelope

    @staticmethod
    def _parse_envelope(response: httpx.Response, details: ErrorDetails) -> APIEnvelope:
        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError(
                code="malformed_response",
                message=f"Response body is not valid JSON (HTTP {response.status_code})",
                details=details,
            ) from exc

        try:
            return APIEnvelope.model_validate(body)
        except ValidationError as exc:
            raise TransportError(
                code="malformed_response",
                message=f"Response body is not an API envelope (HTTP {response.status_code})",
                details=details,
            ) from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
