r"""Asynchronous retry executor.

This module provides the ``RetryExecutor`` class that runs an async
operation, and re-runs it after a delay when it fails and the retry
policy allows it.
"""

from __future__ import annotations

__all__ = ["RetryExecutor", "execute_with_retry"]

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.callbacks import no_op_on_retry
from aretry.policy import RetryPolicy
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.callbacks import OnRetryCallback

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes async operations with automatic retry logic.

    The executor keeps no state between calls: every call to ``execute``
    threads its own chain of immutable ``RetryPolicy`` values, so one
    executor can serve any number of concurrent calls.

    Args:
        on_retry: Default observer invoked before each retry. It can be
            overridden per call. ``None`` means no observer.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import BackoffKind, RetryExecutor, RetryPolicy
        >>> calls = []
        >>> async def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("connection reset")
        ...     return "ok"
        ...
        >>> policy = RetryPolicy(max_attempts=3, initial_delay=0.0, backoff=BackoffKind.EXPONENTIAL)
        >>> asyncio.run(RetryExecutor().execute(flaky, policy))
        'ok'
        >>> len(calls)
        3

        ```
    """

    def __init__(self, on_retry: OnRetryCallback | None = None) -> None:
        self.on_retry = on_retry if on_retry is not None else no_op_on_retry

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(on_retry={self.on_retry!r})"

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        policy: RetryPolicy,
        on_retry: OnRetryCallback | None = None,
    ) -> T:
        """Execute ``operation`` and retry it according to ``policy``.

        The operation is invoked anew on every attempt. When it raises, the
        error is offered to the policy filter. If the filter accepts it and
        attempts remain, ``on_retry`` is called with the error, the delay
        about to be awaited and the number of retries left after this one,
        then the executor sleeps and tries again under the next policy
        step. Otherwise the error is re-raised as is.

        Note:
            The delay uses ``asyncio.sleep()``, so other tasks keep running
            while a retry is pending. Only ``Exception`` subclasses are
            retried: cancellation and interpreter exits always propagate.

        Args:
            operation: Zero-argument callable returning an awaitable.
            policy: The retry policy.
            on_retry: Observer for this call. Defaults to the executor
                observer.

        Returns:
            The result of the first successful attempt.

        Raises:
            TypeError: If ``operation`` is not callable or ``policy`` is not
                a ``RetryPolicy``.
            Exception: The error of the last attempt, unchanged, once the
                attempts are exhausted or the filter rejects it.
        """
        if not callable(operation):
            msg = f"operation must be callable, got {type(operation).__name__}"
            raise TypeError(msg)
        if not isinstance(policy, RetryPolicy):
            msg = f"policy must be a RetryPolicy, got {type(policy).__name__}"
            raise TypeError(msg)
        observer = on_retry if on_retry is not None else self.on_retry

        attempt = 1
        while True:
            try:
                return await operation()
            except Exception as exc:
                if not policy.can_retry(exc):
                    log_structured(
                        logger,
                        logging.DEBUG,
                        f"Giving up after {attempt} attempt(s): {type(exc).__name__}",
                        attempt=attempt,
                        remaining=policy.max_attempts,
                        error_type=type(exc).__name__,
                    )
                    raise

                delay = policy.initial_delay
                remaining = policy.max_attempts - 1
                log_structured(
                    logger,
                    logging.DEBUG,
                    f"Attempt {attempt} failed with {type(exc).__name__}, "
                    f"retrying in {delay:.2f}s ({remaining} retries left)",
                    attempt=attempt,
                    delay=delay,
                    remaining=remaining,
                    error_type=type(exc).__name__,
                )
                observer(exc, delay, remaining)
                await asyncio.sleep(delay)
            policy = policy.next()
            attempt += 1


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    on_retry: OnRetryCallback | None = None,
) -> T:
    """Execute ``operation`` with automatic retry logic.

    Convenience wrapper around ``RetryExecutor.execute``.

    Args:
        operation: Zero-argument callable returning an awaitable.
        policy: The retry policy. Defaults to ``RetryPolicy()``:
            3 retries, 1 second apart.
        on_retry: Optional observer invoked before each retry.

    Returns:
        The result of the first successful attempt.

    Raises:
        Exception: The error of the last attempt, unchanged.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import RetryPolicy, execute_with_retry
        >>> async def answer():
        ...     return 42
        ...
        >>> asyncio.run(execute_with_retry(answer, RetryPolicy(max_attempts=0)))
        42

        ```
    """
    if policy is None:
        policy = RetryPolicy()
    return await RetryExecutor().execute(operation, policy, on_retry=on_retry)
