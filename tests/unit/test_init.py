r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import aretry


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(aretry.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in aretry.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in aretry.__all__:
        assert hasattr(aretry, name), f"{name} is in __all__ but not defined in module"


def test_all_exports() -> None:
    """Test the exact public API."""
    assert sorted(aretry.__all__) == sorted(
        [
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
    )


def test_defaults_are_immutable_types() -> None:
    assert isinstance(aretry.DEFAULT_MAX_ATTEMPTS, int)
    assert isinstance(aretry.DEFAULT_INITIAL_DELAY, float)
    assert isinstance(aretry.DEFAULT_BACKOFF, aretry.BackoffKind)
