from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union

from .errors import MondayTransportError

# Attributes every LogRecord already has; extras must not overwrite them.
RESERVED_LOG_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """
    Log ``event`` as the message with ``fields`` attached as record attributes,
    so LogfmtFormatter (or any structured handler) can pick them up.
    """
    log = logger or logging.getLogger("monday_client.observability")
    extra = {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}
    log.log(level, event, extra={"event": event, **extra})


@dataclass
class ApiCall:
    """What is known about one HTTP exchange by the time it is logged."""

    endpoint: str
    operation: Optional[str] = None
    status: Union[int, str, None] = None
    complexity: Optional[int] = None
    error_type: Optional[str] = None
    ok: bool = False


@contextmanager
def track_api_call(
    logger: logging.Logger, endpoint: str, operation: Optional[str] = None
) -> Iterator[ApiCall]:
    """
    Time the enclosed exchange and emit one ``api_call`` event when it ends.
    Successful calls log at DEBUG, failed ones at INFO. A raised exception is
    recorded as status "exception"; for transport faults the error_type is
    the underlying httpx error.
    """
    call = ApiCall(endpoint=endpoint, operation=operation)
    start = time.perf_counter()
    try:
        yield call
    except Exception as exc:
        cause = exc.__cause__ if isinstance(exc, MondayTransportError) else None
        call.status = "exception"
        call.error_type = type(cause or exc).__name__
        call.ok = False
        raise
    finally:
        log_event(
            "api_call",
            logger,
            level=logging.DEBUG if call.ok else logging.INFO,
            endpoint=call.endpoint,
            operation=call.operation,
            status=call.status,
            duration_ms=int((time.perf_counter() - start) * 1000),
            complexity=call.complexity,
            error_type=call.error_type,
        )


__all__ = ["ApiCall", "RESERVED_LOG_KEYS", "log_event", "track_api_call"]
