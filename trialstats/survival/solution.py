"""
Solution wrappers for survival analysis results.

Each Solution wraps a Result[Params] and exposes user-friendly properties
with text summary() methods.
"""

from __future__ import annotations

import numpy as np

from trialstats.core.result import Result
from trialstats.survival._common import (
    HazardRatioParams,
    KMParams,
    KMPoint,
    MedianSurvival,
)
from trialstats.survival._curve import median_from_curve


class KMSolution:
    """Kaplan-Meier survival curve solution.

    Array properties are aligned; index 0 is the origin (0, 1.0).
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[KMParams]) -> None:
        self._result = _result

    # -- Properties delegating to KMParams --

    @property
    def time(self):
        """0 followed by the distinct observed times."""
        return self._result.params.time

    @property
    def survival(self):
        """S(t) at each time."""
        return self._result.params.survival

    @property
    def n_risk(self):
        """Number with time >= t."""
        return self._result.params.n_risk

    @property
    def n_events(self):
        """Number of events at each time."""
        return self._result.params.n_events

    @property
    def n_censored(self):
        """Number censored at each time."""
        return self._result.params.n_censored

    @property
    def se(self):
        """Greenwood standard error of S(t)."""
        return self._result.params.se

    @property
    def ci_lower(self):
        """Lower 95% bound for S(t)."""
        return self._result.params.ci_lower

    @property
    def ci_upper(self):
        """Upper 95% bound for S(t)."""
        return self._result.params.ci_upper

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def n_events_total(self) -> int:
        return self._result.params.n_events_total

    @property
    def points(self) -> tuple[KMPoint, ...]:
        """The curve as a sequence of KMPoint records."""
        p = self._result.params
        return tuple(
            KMPoint(
                time=float(p.time[i]),
                survival=float(p.survival[i]),
                lower=float(p.ci_lower[i]),
                upper=float(p.ci_upper[i]),
                at_risk=int(p.n_risk[i]),
                events=int(p.n_events[i]),
            )
            for i in range(len(p.time))
        )

    @property
    def median_survival(self) -> MedianSurvival:
        """Median survival (midpoint of the first crossing below 0.5)."""
        return median_from_curve(self.time, self.survival)

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self):
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Tabular summary of the Kaplan-Meier fit."""
        lines = []
        lines.append("Call: kaplan_meier()")
        lines.append("")
        lines.append(
            f"  n={self.n_observations}, "
            f"events={self.n_events_total}"
        )
        lines.append("")

        median = self.median_survival
        median_str = f"{median.time:.4g}" if median.reached else f">{median.time:.4g} (not reached)"
        lines.append(f"  median survival = {median_str}")
        lines.append("")

        lines.append(
            f"  {'time':>8s}  {'n.risk':>8s}  {'n.event':>8s}  "
            f"{'survival':>10s}  {'se':>10s}  "
            f"{'lower 95%':>10s}  {'upper 95%':>10s}"
        )

        m = len(self.time)
        show = min(m, 20)
        for i in range(show):
            lines.append(
                f"  {self.time[i]:8.4g}  {self.n_risk[i]:8d}  "
                f"{self.n_events[i]:8d}  "
                f"{self.survival[i]:10.6f}  {self.se[i]:10.6f}  "
                f"{self.ci_lower[i]:10.6f}  {self.ci_upper[i]:10.6f}"
            )
        if m > 20:
            lines.append(f"  ... ({m - 20} more rows)")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"KMSolution(n={self.n_observations}, "
            f"events={self.n_events_total}, "
            f"median={self.median_survival.time if self.median_survival.reached else None})"
        )


class HazardRatioSolution:
    """Event-rate ratio between two arms (approximate hazard ratio).

    Not a Cox model estimate; see ``method``.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[HazardRatioParams]) -> None:
        self._result = _result

    @property
    def estimate(self) -> float:
        return self._result.params.estimate

    @property
    def ci_lower(self) -> float:
        return self._result.params.ci_lower

    @property
    def ci_upper(self) -> float:
        return self._result.params.ci_upper

    @property
    def se_log(self) -> float:
        return self._result.params.se_log

    @property
    def estimable(self) -> bool:
        """False when either arm has no events; the CI is then NaN."""
        return self._result.params.estimable

    @property
    def events(self) -> tuple[int, int]:
        p = self._result.params
        return p.events_a, p.events_b

    @property
    def n(self) -> tuple[int, int]:
        p = self._result.params
        return p.n_a, p.n_b

    @property
    def arms(self):
        return self._result.params.arms

    @property
    def method(self) -> str:
        return self._result.info["method"]

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def timing(self):
        return self._result.timing

    def summary(self) -> str:
        p = self._result.params
        a, b = p.arms
        lines = [
            f"Call: hazard_ratio()  [{self.method}]",
            "",
            f"  {str(a):>14s}: events={p.events_a}, n={p.n_a}",
            f"  {str(b):>14s}: events={p.events_b}, n={p.n_b}",
            "",
        ]
        if p.estimable:
            lines.append(
                f"  HR = {p.estimate:.4g}  (95% CI {p.ci_lower:.4g} - {p.ci_upper:.4g})"
            )
        else:
            est = "NA" if np.isnan(p.estimate) else f"{p.estimate:.4g}"
            lines.append(f"  HR = {est}  (95% CI not estimable)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HazardRatioSolution(estimate={p.estimate:.4g}, "
            f"estimable={p.estimable})"
        )
