r"""Structured logging for retry events.

The executor attaches machine-readable fields (``attempt``, ``delay``,
``remaining``, ``error_type``) to its log records. With the default
formatters these fields are simply ignored; with ``StructuredFormatter``
each record is rendered as one JSON object, which suits log aggregation
systems.

Nothing here is enabled by default: the library never installs handlers.

Example:
    Render aretry logs as JSON and tag them with a correlation id:

    ```python
    import logging

    from aretry import execute_with_retry
    from aretry.utils.structured_logging import StructuredFormatter, correlation_scope

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    with correlation_scope("job-42"):
        result = await execute_with_retry(fetch_report)
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

# Each asyncio task runs in a copy of the current context, so concurrent
# retry sequences keep their own id.
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def get_correlation_id() -> str | None:
    """Get the correlation id of the current context.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import get_correlation_id, set_correlation_id
        >>> set_correlation_id("job-1")
        >>> get_correlation_id()
        'job-1'

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation id for the current context.

    Args:
        correlation_id: Identifier shared by related log records.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation id of the current context."""
    _correlation_id.set(None)


@contextmanager
def correlation_scope(correlation_id: str) -> Generator[None, None, None]:
    """Set a correlation id for the duration of a ``with`` block.

    The previous value is restored on exit, even when the block raises.

    Args:
        correlation_id: Identifier shared by related log records.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import correlation_scope, get_correlation_id
        >>> with correlation_scope("job-7"):
        ...     get_correlation_id()
        ...
        'job-7'

        ```
    """
    token = _correlation_id.set(correlation_id)
    try:
        yield
    finally:
        _correlation_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Output fields: ``timestamp`` (ISO 8601, UTC), ``level``, ``logger``,
    ``message``, ``module``, ``function``, ``line``, plus
    ``correlation_id`` when set, ``exception`` when the record carries
    exception info, and every field passed through ``extra``.
    Values that JSON cannot encode are rendered with ``str``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> record = logging.makeLogRecord({"msg": "retrying", "delay": 0.5})
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["message"], data["delay"]
        ('retrying', 0.5)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record time as ISO 8601 with millisecond precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **fields: Any) -> None:
    """Log ``message`` with ``fields`` attached to the record.

    Args:
        logger: Logger to use.
        level: Log level (e.g., ``logging.DEBUG``).
        message: Human readable message.
        **fields: Structured fields, rendered by ``StructuredFormatter``.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=fields)
