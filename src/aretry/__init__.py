r"""aretry - Retry wrapper for asynchronous operations.

This package re-executes a fallible async operation when it fails, up to
a bounded number of attempts, waiting between attempts according to a
backoff policy. The caller decides, per error, whether a retry is
warranted.

Key Features:
    - Immutable ``RetryPolicy`` values that are safe to share between tasks
    - Linear (constant) and exponential (doubling) backoff
    - Per-error retry filter
    - Observer callback invoked before each retry (logging, metrics)
    - The last error is re-raised unchanged, never wrapped
    - Non-blocking waits based on ``asyncio.sleep``

Example:
    ```pycon
    >>> from aretry import BackoffKind, RetryPolicy, execute_with_retry, log_on_retry
    >>> policy = RetryPolicy(
    ...     max_attempts=5,
    ...     initial_delay=0.5,
    ...     backoff=BackoffKind.EXPONENTIAL,
    ...     should_retry=lambda error: isinstance(error, ConnectionError),
    ... )
    >>> data = await execute_with_retry(fetch_data, policy, on_retry=log_on_retry)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "BackoffKind",
    "RetryExecutor",
    "RetryPolicy",
    "__version__",
    "always_retry",
    "execute_with_retry",
    "log_on_retry",
    "no_op_on_retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import BackoffKind
from aretry.callbacks import log_on_retry, no_op_on_retry
from aretry.config import DEFAULT_BACKOFF, DEFAULT_INITIAL_DELAY, DEFAULT_MAX_ATTEMPTS
from aretry.executor import RetryExecutor, execute_with_retry
from aretry.policy import RetryPolicy, always_retry

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
