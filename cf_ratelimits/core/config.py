"""Client configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Determine which environment to load (default: development)
APP_ENV = os.getenv("APP_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Map environments to their respective .env files (relative to PROJECT_ROOT)
ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"

_env_filename = ENV_FILE_MAP.get(APP_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Only load from file if it exists (CI might inject via env vars only)
_env_file = str(_env_path) if _env_path.is_file() else None


# Load .env file early to populate os.environ before creating nested settings
# This is necessary because Pydantic nested BaseSettings don't inherit env_file
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


def _build_cloudflare_settings() -> "CloudflareSettings":
    """Build API settings from environment."""

    return CloudflareSettings()


def _build_log_settings() -> "LogSettings":
    return LogSettings()


class CloudflareSettings(BaseSettings):
    """Cloudflare API connection configuration.

    Either an API token or the legacy email + global API key pair must be
    provided. Validation of that requirement happens in the transport factory.
    """

    api_token: str | None = Field(
        None,
        description="Scoped API token sent as a Bearer Authorization header",
    )
    api_key: str | None = Field(
        None,
        description="Legacy global API key (X-Auth-Key), used with api_email",
    )
    api_email: str | None = Field(
        None,
        description="Account email (X-Auth-Email), used with api_key",
    )
    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Base URL of the versioned API; endpoint paths are relative to it",
    )
    timeout_seconds: float = Field(
        30.0,
        description="Request timeout in seconds",
        gt=0,
    )
    user_agent: str = Field(
        "cf-ratelimits/0.1.0",
        description="User-Agent header sent with every request",
    )

    model_config = SettingsConfigDict(
        env_prefix="CLOUDFLARE_",
        case_sensitive=False,
    )


class LogSettings(BaseSettings):
    """Logging output configuration."""

    level: str = Field("INFO", description="Root log level name")
    format: str = Field(
        "json",
        description="Log format: 'json' for structured logs or 'plain'",
    )
    output: str = Field(
        "stdout",
        description="Log destination: 'stdout' or 'file'",
    )
    file_path: str | None = Field(
        None,
        description="Log file path when output is 'file'",
    )
    max_bytes: int = Field(
        0,
        description="Rotate the log file at this size; 0 disables rotation",
        ge=0,
    )
    backup_count: int = Field(
        3,
        description="Number of rotated log files to keep",
        ge=0,
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Main settings container.

    Automatically loads from the appropriate .env.{APP_ENV} file.
    """

    app_env: str = APP_ENV
    cloudflare: CloudflareSettings = Field(default_factory=_build_cloudflare_settings)
    log: LogSettings = Field(default_factory=_build_log_settings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


# Global settings instance - composed from domain-specific settings
settings = Settings()
