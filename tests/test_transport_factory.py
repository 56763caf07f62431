"""Tests for transport construction from settings."""

import pytest

from cf_ratelimits.adapters.http import HttpxTransport, create_transport
from cf_ratelimits.core.config import DEFAULT_BASE_URL, CloudflareSettings, Settings, settings
from cf_ratelimits.core.errors import ValidationAppError


class TestCreateTransport:
    @pytest.mark.asyncio
    async def test_uses_global_settings(self) -> None:
        transport = create_transport()

        assert isinstance(transport, HttpxTransport)
        assert transport.base_url == settings.cloudflare.base_url.rstrip("/")
        await transport.aclose()

    @pytest.mark.asyncio
    async def test_accepts_key_and_email(self) -> None:
        cfg = CloudflareSettings(
            api_token=None,
            api_key="key",
            api_email="user@example.com",
            base_url="https://example.test/v4",
        )

        transport = create_transport(cfg)

        assert isinstance(transport, HttpxTransport)
        assert transport.base_url == "https://example.test/v4"
        await transport.aclose()

    def test_missing_credentials_raise(self) -> None:
        cfg = CloudflareSettings(api_token=None, api_key=None, api_email=None)

        with pytest.raises(ValidationAppError) as exc_info:
            create_transport(cfg)

        assert exc_info.value.code == "cloudflare_missing_credentials"

    def test_key_without_email_raises(self) -> None:
        cfg = CloudflareSettings(api_token=None, api_key="key", api_email=None)

        with pytest.raises(ValidationAppError) as exc_info:
            create_transport(cfg)

        assert exc_info.value.code == "cloudflare_incomplete_credentials"


class TestSettings:
    def test_reads_token_from_environment(self) -> None:
        assert settings.cloudflare.api_token == "test-token-123"

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CLOUDFLARE_BASE_URL", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        fresh = Settings()

        assert fresh.cloudflare.base_url == DEFAULT_BASE_URL
        assert fresh.cloudflare.timeout_seconds == 30.0
        assert fresh.log.level == "INFO"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOUDFLARE_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("LOG_FORMAT", "plain")

        fresh = Settings()

        assert fresh.cloudflare.timeout_seconds == 5.0
        assert fresh.log.format == "plain"
