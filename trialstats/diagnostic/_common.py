"""
Result payloads for diagnostic accuracy analysis.

Undefined ratios (zero denominators) are NaN, never 0: a sensitivity of
0 and "no diseased patients in the sample" are different facts.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class ConfusionCounts:
    """2x2 classification counts at one threshold."""

    tp: int
    fp: int
    tn: int
    fn: int

    @property
    def n(self) -> int:
        return self.tp + self.fp + self.tn + self.fn

    @property
    def positives(self) -> int:
        """Condition positives (tp + fn)."""
        return self.tp + self.fn

    @property
    def negatives(self) -> int:
        """Condition negatives (fp + tn)."""
        return self.fp + self.tn

    def as_matrix(self) -> list[list[int]]:
        """[[TN, FP], [FN, TP]]: rows actual (neg, pos), cols predicted."""
        return [[self.tn, self.fp], [self.fn, self.tp]]


@dataclass(frozen=True)
class DiagnosticParams:
    """Accuracy metrics at a single threshold.

    Interval fields are Wald 95% bounds p -/+ 1.96 sqrt(p(1-p)/n), clamped
    to [0, 1]; NaN when the metric is undefined.
    """

    counts: ConfusionCounts
    threshold: float
    sensitivity: float
    specificity: float
    ppv: float
    npv: float
    accuracy: float
    f1: float
    youden_j: float
    sensitivity_ci: tuple[float, float]
    specificity_ci: tuple[float, float]


@dataclass(frozen=True)
class ROCParams:
    """Empirical ROC curve.

    Index 0 is the origin (FPR 0, TPR 0, threshold +inf). Each later point
    corresponds to one distinct score, in descending order, and classifies
    scores >= threshold as positive.
    """

    fpr: NDArray
    tpr: NDArray
    thresholds: NDArray
    auc: float                   # trapezoidal; NaN if either class is absent
    optimal_index: int | None    # argmax of Youden's J (first wins)
    optimal_threshold: float
    optimal_j: float
    n_positive: int
    n_negative: int


@dataclass(frozen=True)
class PRParams:
    """Precision-recall curve, one point per distinct score (descending)."""

    precision: NDArray
    recall: NDArray
    thresholds: NDArray
    average_precision: float     # step-wise AP; NaN without positives
    prevalence: float            # no-skill baseline precision


@dataclass(frozen=True)
class CalibrationParams:
    """Reliability curve over equal-width score bins (non-empty bins only)."""

    bin_lower: NDArray
    bin_upper: NDArray
    mean_predicted: NDArray
    observed_fraction: NDArray
    count: NDArray
    n_bins: int


@dataclass(frozen=True)
class DecisionCurveParams:
    """Net benefit across threshold probabilities."""

    thresholds: NDArray
    net_benefit_model: NDArray
    net_benefit_treat_all: NDArray
    net_benefit_treat_none: NDArray
    prevalence: float
