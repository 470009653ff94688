"""Logging setup for the ``verdict`` logger tree.

Library modules log through ``logging.getLogger("verdict.<area>")`` and never
configure handlers themselves. Applications that want verdict's diagnostics
call configure_logging() once at startup.

Example:
    >>> from verdict.log import configure_logging
    >>> configure_logging(level="DEBUG", format="json")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Literal

import orjson

from .config import get_settings

if TYPE_CHECKING:
    from typing import TextIO

ROOT_LOGGER = "verdict"
_HANDLER_NAME = "verdict-default"


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, event (+ exc_info)."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload).decode()


_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    *,
    level: str | None = None,
    format: Literal["json", "text"] | None = None,  # noqa: A002
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a stream handler to the ``verdict`` logger. Idempotent.

    Unset arguments fall back to LoggingSettings (``VERDICT_LOG_*``); debug
    mode in settings forces DEBUG.
    """
    settings = get_settings()
    level = level or ("DEBUG" if settings.debug else settings.logging.level)
    format = format or settings.logging.format

    root = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JsonFormatter() if format == "json" else logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return root
