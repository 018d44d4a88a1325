r"""Utility functions for policy validation and structured logging."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "correlation_scope",
    "log_structured",
    "validate_policy_params",
]

from aretry.utils.structured_logging import StructuredFormatter, correlation_scope, log_structured
from aretry.utils.validation import validate_policy_params
