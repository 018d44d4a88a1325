r"""Default configuration for retrying asynchronous operations.

These constants are the defaults of ``RetryPolicy``. They are exposed so
that callers can build policies relative to the library defaults.
"""

from __future__ import annotations

__all__ = ["DEFAULT_BACKOFF", "DEFAULT_INITIAL_DELAY", "DEFAULT_MAX_ATTEMPTS"]

from aretry.backoff import BackoffKind

# Number of retries after the first failure
# Total attempts = max_attempts + 1 (initial attempt)
DEFAULT_MAX_ATTEMPTS = 3

# Seconds to wait before the first retry
DEFAULT_INITIAL_DELAY = 1.0

# Linear keeps the delay constant between retries
DEFAULT_BACKOFF = BackoffKind.LINEAR
