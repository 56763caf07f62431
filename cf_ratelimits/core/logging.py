"""Structured logging for the client.

API calls are correlated through a context-local request id: the transport
reuses the caller's id when one is set with ``set_request_id`` and otherwise
mints one per call. The id travels in the ``X-Request-ID`` header, on every
transport log record and in the ``details`` of raised errors.

Credentials (tokens, keys, auth headers) are redacted from log extras before
formatting, at any nesting depth.
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from logging import LogRecord
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterable, Mapping

from cf_ratelimits.core.config import LogSettings, settings

REDACTED = "[REDACTED]"

SENSITIVE_KEYS_DEFAULT: frozenset[str] = frozenset(
    {
        "api_token",
        "api_key",
        "api_email",
        "x-auth-key",
        "x-auth-email",
        "authorization",
        "token",
        "secret",
        "password",
        "cookie",
        "set-cookie",
    }
)

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_request_id_var: ContextVar[str | None] = ContextVar("cf_request_id", default=None)


def set_request_id(request_id: str | None) -> None:
    """Use ``request_id`` for the API calls and logs of the current context."""
    _request_id_var.set(request_id)


def get_request_id() -> str | None:
    return _request_id_var.get()


def clear_request_id() -> None:
    _request_id_var.set(None)


def resolve_request_id() -> str:
    """Return the context's request id, or a fresh one when none is set."""
    return get_request_id() or uuid.uuid4().hex


def redact(value: Any, sensitive_keys: frozenset[str] = SENSITIVE_KEYS_DEFAULT) -> Any:
    """Replace values stored under sensitive keys in nested mappings/sequences."""
    if isinstance(value, Mapping):
        return {
            key: REDACTED if str(key).lower() in sensitive_keys else redact(item, sensitive_keys)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(redact(item, sensitive_keys) for item in value)
    return value


def _extras(record: LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class RequestIdFilter(logging.Filter):
    """Stamp records with the context's request id unless one was passed."""

    def filter(self, record: LogRecord) -> bool:  # noqa: D401
        if getattr(record, "request_id", None) is None:
            request_id = get_request_id()
            if request_id:
                record.request_id = request_id
        return True


class SensitiveDataFilter(logging.Filter):
    """Redact credential-bearing extras in place."""

    def __init__(self, sensitive_keys: Iterable[str] | None = None) -> None:
        super().__init__()
        self.sensitive_keys = frozenset(k.lower() for k in (sensitive_keys or SENSITIVE_KEYS_DEFAULT))

    def filter(self, record: LogRecord) -> bool:  # noqa: D401
        redacted = redact(_extras(record), self.sensitive_keys)
        for key, value in redacted.items():
            setattr(record, key, value)
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message, then the extras."""

    def __init__(
        self,
        *,
        sensitive_keys: Iterable[str] | None = None,
        ensure_ascii: bool = True,
    ) -> None:
        super().__init__()
        self.sensitive_keys = frozenset(k.lower() for k in (sensitive_keys or SENSITIVE_KEYS_DEFAULT))
        self.ensure_ascii = ensure_ascii

    def format(self, record: LogRecord) -> str:  # noqa: D401
        data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = getattr(record, "request_id", None) or get_request_id()
        if request_id:
            data["request_id"] = request_id
        data.update(redact(_extras(record), self.sensitive_keys))
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str, ensure_ascii=self.ensure_ascii)


def _build_handler(log_settings: LogSettings) -> logging.Handler:
    if log_settings.output.lower() != "file":
        return logging.StreamHandler(sys.stdout)

    file_path = Path(log_settings.file_path or "logs/cf_ratelimits.log")
    file_path.parent.mkdir(parents=True, exist_ok=True)
    if log_settings.max_bytes:
        return RotatingFileHandler(
            file_path,
            maxBytes=log_settings.max_bytes,
            backupCount=log_settings.backup_count,
            encoding="utf-8",
        )
    return logging.FileHandler(file_path, encoding="utf-8")


def configure_logging(log_settings: LogSettings | None = None) -> None:
    """Install a single redacting handler on the root logger.

    The library never calls this itself; applications embedding the client opt in.

    Args:
        log_settings: Logging settings; defaults to the global settings.
    """
    cfg = log_settings or settings.log
    level = getattr(logging, cfg.level.upper(), logging.INFO)

    handler = _build_handler(cfg)
    handler.addFilter(RequestIdFilter())
    handler.addFilter(SensitiveDataFilter())
    if cfg.format.lower() == "plain":
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    else:
        handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # httpx logs every request at INFO; keep it quiet unless debugging
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
