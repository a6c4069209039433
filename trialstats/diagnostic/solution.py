"""
Solution wrappers for diagnostic accuracy results.
"""

from __future__ import annotations

import math

from trialstats.core.result import Result
from trialstats.diagnostic._common import (
    CalibrationParams,
    ConfusionCounts,
    DecisionCurveParams,
    DiagnosticParams,
    PRParams,
    ROCParams,
)


def _pct(value: float) -> str:
    return "NA" if math.isnan(value) else f"{value:.1%}"


class DiagnosticSolution:
    """Accuracy metrics at one threshold.

    Undefined metrics (zero denominator) are NaN.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[DiagnosticParams]) -> None:
        self._result = _result

    @property
    def counts(self) -> ConfusionCounts:
        return self._result.params.counts

    @property
    def threshold(self) -> float:
        return self._result.params.threshold

    @property
    def sensitivity(self) -> float:
        return self._result.params.sensitivity

    @property
    def specificity(self) -> float:
        return self._result.params.specificity

    @property
    def ppv(self) -> float:
        return self._result.params.ppv

    @property
    def npv(self) -> float:
        return self._result.params.npv

    @property
    def accuracy(self) -> float:
        return self._result.params.accuracy

    @property
    def f1(self) -> float:
        return self._result.params.f1

    @property
    def youden_j(self) -> float:
        return self._result.params.youden_j

    @property
    def sensitivity_ci(self) -> tuple[float, float]:
        return self._result.params.sensitivity_ci

    @property
    def specificity_ci(self) -> tuple[float, float]:
        return self._result.params.specificity_ci

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        p = self._result.params
        c = p.counts
        lines = [
            f"Diagnostic accuracy at threshold {p.threshold:g}",
            "",
            f"  TP={c.tp}  FP={c.fp}  TN={c.tn}  FN={c.fn}  (n={c.n})",
            "",
            f"  sensitivity  {_pct(p.sensitivity):>7s}",
            f"  specificity  {_pct(p.specificity):>7s}",
            f"  PPV          {_pct(p.ppv):>7s}",
            f"  NPV          {_pct(p.npv):>7s}",
            f"  accuracy     {_pct(p.accuracy):>7s}",
            f"  F1           {_pct(p.f1):>7s}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DiagnosticSolution(threshold={p.threshold:g}, "
            f"sensitivity={p.sensitivity:.4g}, specificity={p.specificity:.4g})"
        )


class ROCSolution:
    """Empirical ROC curve solution."""

    __slots__ = ('_result',)

    def __init__(self, _result: Result[ROCParams]) -> None:
        self._result = _result

    @property
    def fpr(self):
        return self._result.params.fpr

    @property
    def tpr(self):
        return self._result.params.tpr

    @property
    def thresholds(self):
        return self._result.params.thresholds

    @property
    def auc(self) -> float:
        return self._result.params.auc

    @property
    def optimal_threshold(self) -> float:
        """Threshold maximising Youden's J (first maximum on ties)."""
        return self._result.params.optimal_threshold

    @property
    def optimal_j(self) -> float:
        return self._result.params.optimal_j

    @property
    def optimal_point(self) -> tuple[float, float] | None:
        """(FPR, TPR) at the optimal threshold."""
        p = self._result.params
        if p.optimal_index is None:
            return None
        return float(p.fpr[p.optimal_index]), float(p.tpr[p.optimal_index])

    @property
    def n_positive(self) -> int:
        return self._result.params.n_positive

    @property
    def n_negative(self) -> int:
        return self._result.params.n_negative

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def timing(self):
        return self._result.timing

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"ROCSolution(auc={p.auc:.4g}, points={len(p.fpr)}, "
            f"optimal_threshold={p.optimal_threshold:.4g})"
        )


class PRSolution:
    """Precision-recall curve solution."""

    __slots__ = ('_result',)

    def __init__(self, _result: Result[PRParams]) -> None:
        self._result = _result

    @property
    def precision(self):
        return self._result.params.precision

    @property
    def recall(self):
        return self._result.params.recall

    @property
    def thresholds(self):
        return self._result.params.thresholds

    @property
    def average_precision(self) -> float:
        return self._result.params.average_precision

    @property
    def prevalence(self) -> float:
        """Precision of a no-skill classifier."""
        return self._result.params.prevalence

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def timing(self):
        return self._result.timing

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"PRSolution(average_precision={p.average_precision:.4g}, "
            f"points={len(p.precision)})"
        )


class CalibrationSolution:
    """Calibration curve solution (non-empty bins only)."""

    __slots__ = ('_result',)

    def __init__(self, _result: Result[CalibrationParams]) -> None:
        self._result = _result

    @property
    def bin_lower(self):
        return self._result.params.bin_lower

    @property
    def bin_upper(self):
        return self._result.params.bin_upper

    @property
    def mean_predicted(self):
        return self._result.params.mean_predicted

    @property
    def observed_fraction(self):
        return self._result.params.observed_fraction

    @property
    def count(self):
        return self._result.params.count

    @property
    def n_bins(self) -> int:
        return self._result.params.n_bins

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        p = self._result.params
        return f"CalibrationSolution(occupied_bins={len(p.count)}/{p.n_bins})"


class DecisionCurveSolution:
    """Decision curve (net benefit) solution."""

    __slots__ = ('_result',)

    def __init__(self, _result: Result[DecisionCurveParams]) -> None:
        self._result = _result

    @property
    def thresholds(self):
        return self._result.params.thresholds

    @property
    def net_benefit_model(self):
        return self._result.params.net_benefit_model

    @property
    def net_benefit_treat_all(self):
        return self._result.params.net_benefit_treat_all

    @property
    def net_benefit_treat_none(self):
        return self._result.params.net_benefit_treat_none

    @property
    def prevalence(self) -> float:
        return self._result.params.prevalence

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def timing(self):
        return self._result.timing

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DecisionCurveSolution(points={len(p.thresholds)}, "
            f"prevalence={p.prevalence:.4g})"
        )
