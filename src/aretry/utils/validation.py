r"""Parameter validation utilities for retry policies.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before a policy is used.
"""

from __future__ import annotations

__all__ = ["validate_policy_params"]

from typing import Any

from aretry.backoff import BackoffKind


def validate_policy_params(
    max_attempts: int,
    initial_delay: float,
    backoff: Any = BackoffKind.LINEAR,
    should_retry: Any = None,
) -> None:
    """Validate retry policy parameters.

    Args:
        max_attempts: Number of retries after the first failure.
            Must be >= 0. A value of 0 means no retries (only the initial attempt).
        initial_delay: Seconds to wait before the first retry. Must be >= 0.
        backoff: The backoff kind. Must be a ``BackoffKind``.
        should_retry: Optional retry filter. Must be callable if provided.

    Raises:
        TypeError: If max_attempts is not an integer, backoff is not a
            ``BackoffKind``, or should_retry is not callable.
        ValueError: If max_attempts or initial_delay are negative.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_policy_params
        >>> validate_policy_params(max_attempts=3, initial_delay=0.5)
        >>> validate_policy_params(max_attempts=0, initial_delay=0.0)
        >>> validate_policy_params(max_attempts=-1, initial_delay=0.5)  # doctest: +SKIP

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an int, got {type(max_attempts).__name__}"
        raise TypeError(msg)
    if max_attempts < 0:
        msg = f"max_attempts must be >= 0, got {max_attempts}"
        raise ValueError(msg)
    if initial_delay < 0:
        msg = f"initial_delay must be >= 0, got {initial_delay}"
        raise ValueError(msg)
    if not isinstance(backoff, BackoffKind):
        msg = f"backoff must be a BackoffKind, got {backoff!r}"
        raise TypeError(msg)
    if should_retry is not None and not callable(should_retry):
        msg = f"should_retry must be callable, got {type(should_retry).__name__}"
        raise TypeError(msg)
