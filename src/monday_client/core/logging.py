"""
logfmt output for monday_client loggers.

Records render as ``key=value`` pairs. The API call fields that log_event
passes through ``extra`` are appended when present.
"""

import logging
import sys
from typing import Any, Iterable, List, Optional, TextIO, Tuple

PACKAGE_LOGGER = "monday_client"

LOG_EXTRA_FIELDS = (
    "endpoint",
    "operation",
    "status",
    "duration_ms",
    "error_type",
    "complexity",
)

_NEEDS_QUOTES = frozenset(' ="\n\t')


def format_value(val: Any) -> str:
    if isinstance(val, bool):
        return "true" if val else "false"
    if isinstance(val, (int, float)):
        return str(val)
    text = str(val)
    if not text or any(ch in _NEEDS_QUOTES for ch in text):
        escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'
    return text


class LogfmtFormatter(logging.Formatter):
    """Render records as logfmt; extras that were not passed are left out."""

    def __init__(
        self, fields: Iterable[str] = LOG_EXTRA_FIELDS, *, timestamps: bool = False
    ):
        super().__init__()
        self.fields = tuple(fields)
        self.timestamps = timestamps

    def format(self, record: logging.LogRecord) -> str:
        pairs: List[Tuple[str, Any]] = []
        if self.timestamps:
            pairs.append(("ts", self.formatTime(record, "%Y-%m-%dT%H:%M:%S")))
        pairs.append(("level", record.levelname.lower()))
        pairs.append(("logger", record.name))

        message = record.getMessage()
        if message:
            pairs.append(("event", message))

        for key in self.fields:
            val = getattr(record, key, None)
            if val is not None:
                pairs.append((key, val))

        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(f"{key}={format_value(val)}" for key, val in pairs)


def setup_logging(
    level: str = "INFO",
    *,
    stream: Optional[TextIO] = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Send monday_client logs to ``stream`` (stderr by default) as logfmt.
    Calling it again replaces the handler installed by the previous call.
    """
    logger = logging.getLogger(logger_name)
    for h in list(logger.handlers):
        if isinstance(h.formatter, LogfmtFormatter):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(LogfmtFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


__all__ = [
    "PACKAGE_LOGGER",
    "LOG_EXTRA_FIELDS",
    "LogfmtFormatter",
    "format_value",
    "setup_logging",
]
