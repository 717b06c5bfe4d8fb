"""Logging setup and request correlation.

Every log record carries the id of the request being served, so the
lines of one request can be grouped. The id lives in a ContextVar and
is therefore isolated per asyncio task and per thread.
"""

from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import ObservabilityConfig

NO_REQUEST_ID = "-"

_request_id: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)

# Attributes every LogRecord has; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "request_id"}


def get_request_id() -> str:
    """Return the id of the request being served, or '-' outside requests."""
    return _request_id.get()


def set_request_id(request_id: str) -> Token[str]:
    """Bind a request id to the current context.

    Returns:
        Token to pass to ``reset_request_id`` when the request ends.
    """
    return _request_id.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id.reset(token)


class RequestIdFilter(logging.Filter):
    """Attach the current request id to each record as ``request_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


class JsonFormatter(logging.Formatter):
    """Format records as single-line JSON objects.

    Fields: timestamp (ISO-8601, UTC), level, logger, message,
    request_id, every ``extra`` field, and ``exc_info`` when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", get_request_id()),
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(
    config: ObservabilityConfig,
    stream: Optional[Any] = None,
) -> logging.Handler:
    """Install a single stream handler on the root logger.

    Calling this again replaces the handler installed by the previous
    call, so it is safe to use from tests.

    Args:
        config: Level, format and JSON switch.
        stream: Output stream (defaults to stderr).

    Returns:
        The installed handler.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_itinerary_handler", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler._itinerary_handler = True  # type: ignore[attr-defined]
    handler.addFilter(RequestIdFilter())
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    root.addHandler(handler)
    root.setLevel(config.level.upper())
    return handler
