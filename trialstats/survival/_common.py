"""
Parameter payloads for survival analysis results.

Each dataclass is a frozen payload carried inside a Result[P] envelope,
or returned directly for the lightweight curve summaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from numpy.typing import NDArray


@dataclass(frozen=True)
class KMPoint:
    """One step of a Kaplan-Meier curve.

    ``at_risk`` counts records with time >= ``time``; ``events`` counts
    events observed exactly at ``time``.
    """

    time: float
    survival: float
    lower: float
    upper: float
    at_risk: int
    events: int


@dataclass(frozen=True)
class KMParams:
    """Kaplan-Meier survival curve parameters.

    Index 0 is the origin (time 0, S = 1). Every later index is a distinct
    observed time (event or censoring), strictly increasing.
    """

    time: NDArray                # (m,) - 0 followed by distinct observed times
    survival: NDArray            # (m,) - S(t)
    n_risk: NDArray              # (m,) - number with time >= t
    n_events: NDArray            # (m,) - events at t
    n_censored: NDArray          # (m,) - censored at t
    se: NDArray                  # (m,) - Greenwood standard error
    ci_lower: NDArray            # (m,) - S - 1.96 se, clamped to [0, 1]
    ci_upper: NDArray            # (m,) - S + 1.96 se, clamped to [0, 1]
    n_observations: int
    n_events_total: int


@dataclass(frozen=True)
class MedianSurvival:
    """Median survival read off a KM curve.

    When ``reached`` is False the curve never fell below 0.5 and ``time``
    is the last observed time (a lower bound, not a median).
    """

    time: float
    reached: bool


@dataclass(frozen=True)
class HazardRatioParams:
    """Event-rate ratio between two arms.

    This is (events_a / n_a) / (events_b / n_b), a crude proxy for a
    hazard ratio. It ignores follow-up time and censoring pattern and is
    not a proportional-hazards estimate.
    """

    estimate: float              # NaN when arm B's event rate is 0 or undefined
    ci_lower: float              # NaN unless estimable
    ci_upper: float              # NaN unless estimable
    se_log: float                # sqrt(1/events_a + 1/events_b); NaN unless estimable
    estimable: bool              # both arms have at least one event
    events_a: int
    events_b: int
    n_a: int
    n_b: int
    arms: tuple[Any, Any]


@dataclass(frozen=True)
class RMSTComparison:
    """Restricted mean survival time in two arms at a common horizon."""

    rmst_a: float
    rmst_b: float
    difference: float            # rmst_a - rmst_b
    restriction_time: float
    arms: tuple[Any, Any]


@dataclass(frozen=True)
class CumulativeEvents:
    """Step curve of cumulative event counts, starting at (0, 0)."""

    time: NDArray
    count: NDArray

    @property
    def total(self) -> int:
        return int(self.count[-1])
