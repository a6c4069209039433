"""
Exception hierarchy for trialstats.

All exceptions inherit from TrialStatsError to allow catching any
library-specific error.

Exceptions are reserved for programming-contract violations: non-numeric
input, mismatched array lengths, negative survival times, event flags that
are not binary, scores or thresholds outside [0, 1]. Statistical edge cases
(empty samples, ties, zero events, undefined rates) are never raised; they
are represented in the returned values as zeros or NaN sentinels.

Design principles:
    - Error messages are actionable with actual vs expected values
    - Parameter names appear in every validation message
    - Never catch and re-raise with less information
"""


class TrialStatsError(Exception):
    """Base exception for all trialstats errors."""
    pass


class ValidationError(TrialStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input is not one-dimensional or when parallel arrays
    (time/event, label/score, values/groups) differ in length.
    """
    pass


class NumericalError(TrialStatsError):
    """
    Numerical computation failed.

    Raised when an internal invariant of a computed quantity is broken
    (e.g. a survival estimate outside [0, 1]). Indicates a bug rather than
    a property of the data.
    """

    def __init__(self, message: str, quantity: str | None = None):
        super().__init__(message)
        self.quantity = quantity
