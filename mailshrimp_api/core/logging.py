"""
Root logger setup. Every record carries the request's correlation id and the
account resolved from its token, taken from the context variables below.
"""
from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Optional

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
account_id_var: ContextVar[Optional[str]] = ContextVar("account_id", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s [cid=%(correlation_id)s account=%(account_id)s] %(message)s"


class LoggingContextFilter(logging.Filter):
    """Copy the request context onto the record; "-" outside a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get() or "-"
        record.account_id = account_id_var.get() or "-"
        return True


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


# PUBLIC_INTERFACE
def configure_logging(level: int | str = logging.INFO) -> None:
    """Replace root handlers with one stdout handler using LOG_FORMAT.

    Unknown level names fall back to INFO.
    """
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(LoggingContextFilter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(_resolve_level(level))
