r"""Retry observer callbacks.

An observer is invoked right before the executor waits for the next
retry. It receives the error that triggered the retry, the delay in
seconds about to be awaited, and the number of retries left after this
one. Its return value is ignored.

Example:
    ```pycon
    >>> from aretry import RetryPolicy, execute_with_retry
    >>> def print_retry(error, delay, remaining):
    ...     print(f"{type(error).__name__}: retrying in {delay}s ({remaining} left)")
    ...
    >>> await execute_with_retry(fetch, RetryPolicy(), on_retry=print_retry)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["OnRetryCallback", "log_on_retry", "no_op_on_retry"]

import logging
from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)

OnRetryCallback = Callable[[BaseException, float, int], object]


def no_op_on_retry(error: BaseException, delay: float, remaining: int) -> None:
    """Observer that does nothing."""


def log_on_retry(error: BaseException, delay: float, remaining: int) -> None:
    """Observer that logs each retry as a warning.

    Args:
        error: The error that triggered the retry.
        delay: Seconds to wait before the retry.
        remaining: Retries left after this one.
    """
    logger.warning(
        f"Operation failed with {type(error).__name__}: {error}. "
        f"Retrying in {delay:.2f}s ({remaining} retries left after this one)"
    )
