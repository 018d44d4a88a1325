r"""Backoff kinds for retry delays.

A backoff kind decides how the wait between two retries evolves from
one retry to the next.
"""

from __future__ import annotations

__all__ = ["BackoffKind"]

from enum import Enum


class BackoffKind(Enum):
    """Supported backoff curves.

    - ``LINEAR``: the delay stays the same for every retry.
    - ``EXPONENTIAL``: the delay doubles after every retry.

    Example:
        ```pycon
        >>> from aretry.backoff import BackoffKind
        >>> BackoffKind.LINEAR.next_delay(0.5)
        0.5
        >>> BackoffKind.EXPONENTIAL.next_delay(0.5)
        1.0

        ```
    """

    LINEAR = "linear"
    EXPONENTIAL = "exponential"

    def next_delay(self, delay: float) -> float:
        """Compute the delay to use for the retry after this one.

        Args:
            delay: The delay in seconds awaited before the current retry.

        Returns:
            The delay in seconds for the following retry.
        """
        if self is BackoffKind.EXPONENTIAL:
            return delay * 2
        return delay
