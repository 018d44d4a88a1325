r"""Immutable retry policy.

This module provides the ``RetryPolicy`` value object that describes how
many times an operation may be retried, how long to wait between
attempts, and which errors are eligible for a retry.
"""

from __future__ import annotations

__all__ = ["RetryPolicy", "always_retry"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from aretry.backoff import BackoffKind
from aretry.config import DEFAULT_BACKOFF, DEFAULT_INITIAL_DELAY, DEFAULT_MAX_ATTEMPTS
from aretry.utils.validation import validate_policy_params

if TYPE_CHECKING:
    from collections.abc import Callable


def always_retry(error: BaseException) -> bool:  # noqa: ARG001
    """Retry filter accepting every error.

    Args:
        error: The error raised by the operation.

    Returns:
        Always ``True``.
    """
    return True


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for retry behavior.

    A policy is never mutated. Each retry step derives a new policy with
    one attempt less and a delay scaled according to ``backoff``, so the
    same policy object can be shared by concurrent callers.

    Args:
        max_attempts: Number of retries after the first failure. Must be >= 0.
            A policy with ``max_attempts=0`` never retries.
        initial_delay: Seconds to wait before the first retry. Must be >= 0.
        backoff: How the delay evolves between retries.
        should_retry: Optional predicate over the caught error. ``None``
            means every error is retried.

    Raises:
        TypeError: If a parameter has the wrong type.
        ValueError: If max_attempts or initial_delay are negative.

    Example:
        ```pycon
        >>> from aretry import BackoffKind, RetryPolicy
        >>> policy = RetryPolicy(max_attempts=2, initial_delay=0.1, backoff=BackoffKind.EXPONENTIAL)
        >>> policy.next()
        RetryPolicy(max_attempts=1, initial_delay=0.2, backoff=<BackoffKind.EXPONENTIAL: 'exponential'>, should_retry=None)

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    initial_delay: float = DEFAULT_INITIAL_DELAY
    backoff: BackoffKind = DEFAULT_BACKOFF
    should_retry: Callable[[BaseException], bool] | None = None

    def __post_init__(self) -> None:
        validate_policy_params(
            max_attempts=self.max_attempts,
            initial_delay=self.initial_delay,
            backoff=self.backoff,
            should_retry=self.should_retry,
        )

    @property
    def retry_filter(self) -> Callable[[BaseException], bool]:
        """The effective retry filter, ``always_retry`` when unset."""
        if self.should_retry is None:
            return always_retry
        return self.should_retry

    def can_retry(self, error: BaseException) -> bool:
        """Indicate whether ``error`` should be retried under this policy.

        The filter is only consulted when attempts remain.

        Args:
            error: The error raised by the operation.

        Returns:
            ``True`` if at least one attempt remains and the filter accepts
            the error, otherwise ``False``.
        """
        return self.max_attempts > 0 and bool(self.retry_filter(error))

    def copy_with(
        self, max_attempts: int | None = None, initial_delay: float | None = None
    ) -> RetryPolicy:
        """Create a copy with updated attempts and/or delay.

        ``backoff`` and ``should_retry`` are always carried over.

        Args:
            max_attempts: New number of remaining retries, or ``None`` to keep
                the current value.
            initial_delay: New delay in seconds, or ``None`` to keep the
                current value.

        Returns:
            A new policy. ``self`` is left untouched.

        Example:
            ```pycon
            >>> from aretry import RetryPolicy
            >>> RetryPolicy().copy_with(max_attempts=5).max_attempts
            5

            ```
        """
        changes: dict[str, int | float] = {}
        if max_attempts is not None:
            changes["max_attempts"] = max_attempts
        if initial_delay is not None:
            changes["initial_delay"] = initial_delay
        return replace(self, **changes)

    def next(self) -> RetryPolicy:
        """Create the policy governing the step after the current retry.

        Returns:
            A new policy with one attempt less and the delay scaled by
            the backoff kind.

        Raises:
            ValueError: If no attempt remains.
        """
        return self.copy_with(
            max_attempts=self.max_attempts - 1,
            initial_delay=self.backoff.next_delay(self.initial_delay),
        )
