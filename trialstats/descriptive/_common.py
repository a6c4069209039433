"""
Parameter payloads for descriptive statistics.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CIResult:
    """95% confidence interval around a point estimate.

    Invariant: lower <= estimate <= upper. An empty sample gives all zeros.

    Attributes
    ----------
    estimate : float
        Point estimate (a mean, or a difference of means).
    lower, upper : float
        Interval bounds, estimate -/+ 1.96 * se.
    se : float
        Standard error of the estimate.
    """

    estimate: float
    lower: float
    upper: float
    se: float

    @property
    def margin(self) -> float:
        """Half-width of the interval."""
        return self.upper - self.estimate

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class GroupSummary:
    """Per-group descriptive summary.

    ``n`` counts every record in the group; ``n_valid`` counts those with a
    non-missing value. Location/spread fields are 0 when ``n_valid`` is 0.
    """

    n: int
    n_valid: int
    mean: float
    median: float
    sd: float
    se: float
    ci_lower: float
    ci_upper: float
    min: float
    max: float
