"""Structured JSON logging for closet engine operations.

The engine only creates module loggers. Handlers are installed by
``configure_logging``, which a host application (or
``OutfitSearchEngine.from_settings``) calls explicitly.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import uuid
from typing import Any, Dict, Iterator, Optional

from pydantic import BaseModel

from models.outfit_item import OutfitItem

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}
# Photo links and care notes are owner data and never needed to debug a query.
_REDACTED_FIELDS = frozenset({"image_url", "imageUrl", "care_instructions", "careInstructions"})
_MAX_LIST_PREVIEW = 10


class JsonFormatter(logging.Formatter):
    """One JSON object per record with the operation and correlation id on top."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", message),
            "operation": getattr(record, "operation", None),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key in payload:
                continue
            payload[key] = summarize_for_log(value)
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Install the JSON handler on the root logger."""

    desired_level = level or os.getenv("LOG_LEVEL", "INFO")
    logging.root.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=desired_level, handlers=[handler])


def summarize_for_log(value: Any) -> Any:
    """Reduce engine values to small JSON-safe previews.

    Items are logged by id, query models by their set fields, long lists are
    truncated and owner fields such as photo links are masked.
    """

    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, OutfitItem):
        return value.item_id
    if isinstance(value, BaseModel):
        return summarize_for_log(value.model_dump(exclude_none=True))
    if isinstance(value, dict):
        return {
            key: "[redacted]" if key in _REDACTED_FIELDS else summarize_for_log(inner)
            for key, inner in value.items()
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        values = list(value)
        preview = [summarize_for_log(inner) for inner in values[:_MAX_LIST_PREVIEW]]
        if len(values) > _MAX_LIST_PREVIEW:
            preview.append(f"... {len(values) - _MAX_LIST_PREVIEW} more")
        return preview
    return str(value)


@contextlib.contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id for one operation and restore the previous one after.

    An explicit id wins; otherwise an id already bound by the caller is reused so
    nested operations share it, and a fresh id is minted at the outermost call.
    """

    scoped = correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex
    token = CORRELATION_ID.set(scoped)
    try:
        yield scoped
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit a structured record tagged with the current correlation id."""

    exc_info = fields.pop("exc_info", None)
    extra = {key: summarize_for_log(value) for key, value in fields.items()}
    logger.log(level, event, exc_info=exc_info, extra={"event": event, "correlation_id": CORRELATION_ID.get(), **extra})


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "correlation_scope",
    "log_event",
    "summarize_for_log",
]
