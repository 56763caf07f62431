"""Factory for building the API transport from settings."""

import httpx

from cf_ratelimits.adapters.http.base import AbstractAPITransport
from cf_ratelimits.adapters.http.httpx_client import HttpxTransport
from cf_ratelimits.core.config import CloudflareSettings, settings
from cf_ratelimits.core.errors import ValidationAppError


def create_transport(
    cloudflare_settings: CloudflareSettings | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> AbstractAPITransport:
    """Instantiate the transport from configuration.

    Args:
        cloudflare_settings: Settings to use; defaults to the global settings.
        client: Optional pre-built AsyncClient passed through to the transport.

    Returns:
        AbstractAPITransport: Configured transport instance.

    Raises:
        ValidationAppError: If no usable credentials are configured.
    """
    cfg = cloudflare_settings or settings.cloudflare

    if not cfg.api_token:
        if not cfg.api_key and not cfg.api_email:
            raise ValidationAppError(
                code="cloudflare_missing_credentials",
                message=(
                    "Set CLOUDFLARE_API_TOKEN, or CLOUDFLARE_API_KEY together "
                    "with CLOUDFLARE_API_EMAIL"
                ),
            )
        if not (cfg.api_key and cfg.api_email):
            raise ValidationAppError(
                code="cloudflare_incomplete_credentials",
                message="CLOUDFLARE_API_KEY and CLOUDFLARE_API_EMAIL must be set together",
            )

    return HttpxTransport(
        api_token=cfg.api_token,
        api_key=cfg.api_key,
        api_email=cfg.api_email,
        base_url=cfg.base_url,
        timeout_seconds=cfg.timeout_seconds,
        user_agent=cfg.user_agent,
        client=client,
    )
