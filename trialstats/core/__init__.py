"""
Core infrastructure for trialstats.

This module provides shared abstractions used by all domain-specific
submodules (descriptive, hypothesis, survival, diagnostic).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    constants: Fixed statistical constants (z quantile, p-value buckets)
    compute: Timing and tolerance utilities
"""

from trialstats.core.result import Result
from trialstats.core.exceptions import (
    TrialStatsError,
    ValidationError,
    DimensionError,
    NumericalError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "TrialStatsError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
]
