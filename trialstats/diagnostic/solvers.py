"""
Public API for diagnostic accuracy analysis.

    confusion_counts(label, score, threshold)   -> ConfusionCounts
    diagnostic_metrics(label, score, threshold) -> DiagnosticSolution
    threshold_sweep(label, score, thresholds)   -> tuple[DiagnosticSolution, ...]
    roc_curve(label, score)                     -> ROCSolution
    pr_curve(label, score)                      -> PRSolution
    calibration_curve(label, score)             -> CalibrationSolution
    decision_curve(label, score)                -> DecisionCurveSolution

``label`` is the true status (1/True = disease positive), ``score`` the
predicted probability in [0, 1]. A ClassifierDesign may be passed in place
of ``label`` with ``score`` omitted.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from trialstats.core.constants import CALIBRATION_BINS, DEFAULT_THRESHOLD
from trialstats.core.exceptions import ValidationError
from trialstats.core.result import Result
from trialstats.core.compute.timing import Timer, timed
from trialstats.core.validation import (
    check_1d,
    check_array,
    check_scalar,
    check_unit_interval,
)
from trialstats.diagnostic.design import ClassifierDesign
from trialstats.diagnostic._common import ConfusionCounts
from trialstats.diagnostic._accuracy import accuracy_metrics, count_confusion
from trialstats.diagnostic._roc import roc_fit
from trialstats.diagnostic._pr import pr_fit
from trialstats.diagnostic._calibration import calibration_bins
from trialstats.diagnostic._decision import default_grid, net_benefit
from trialstats.diagnostic.solution import (
    CalibrationSolution,
    DecisionCurveSolution,
    DiagnosticSolution,
    PRSolution,
    ROCSolution,
)


def confusion_counts(
    label: ArrayLike | ClassifierDesign,
    score: ArrayLike | None = None,
    threshold: float = DEFAULT_THRESHOLD,
) -> ConfusionCounts:
    """2x2 counts with "predicted positive" meaning score >= threshold."""
    design = _ensure_design(label, score)
    return count_confusion(design, _check_threshold(threshold))


def diagnostic_metrics(
    label: ArrayLike | ClassifierDesign,
    score: ArrayLike | None = None,
    threshold: float = DEFAULT_THRESHOLD,
) -> DiagnosticSolution:
    """Sensitivity, specificity, PPV, NPV, accuracy, F1 and Youden's J.

    Parameters
    ----------
    label, score : array-like
        True status and predicted probability.
    threshold : float
        Scores >= threshold are called positive. Default 0.5.

    Returns
    -------
    DiagnosticSolution
        Each ratio is NaN when its denominator is zero (e.g. sensitivity
        with no diseased patients). Sensitivity and specificity carry
        Wald 95% intervals.
    """
    design = _ensure_design(label, score)
    return _metrics_at(design, _check_threshold(threshold))


def threshold_sweep(
    label: ArrayLike | ClassifierDesign,
    score: ArrayLike | None = None,
    thresholds: ArrayLike | None = None,
) -> tuple[DiagnosticSolution, ...]:
    """Accuracy metrics at each of several thresholds.

    Default thresholds: 0.05, 0.10, ..., 0.95.
    """
    design = _ensure_design(label, score)
    if thresholds is None:
        grid = np.linspace(0.05, 0.95, 19)
    else:
        grid = check_array(thresholds, "thresholds")
        check_1d(grid, "thresholds")
        if np.any(np.isnan(grid)):
            raise ValidationError("thresholds: must not contain missing values")
        check_unit_interval(grid, "thresholds")
    return tuple(_metrics_at(design, float(t)) for t in grid)


def roc_curve(
    label: ArrayLike | ClassifierDesign,
    score: ArrayLike | None = None,
) -> ROCSolution:
    """Empirical ROC curve with trapezoidal AUC.

    Scores are swept from high to low; each distinct score adds one
    (FPR, TPR) point after the origin (0, 0). The optimal threshold
    maximises Youden's J = TPR - FPR, the first maximum winning ties.

    If the sample lacks positives (or negatives), TPR (or FPR) is NaN
    beyond the origin, AUC and the optimal threshold are NaN, and a
    warning is recorded.
    """
    design = _ensure_design(label, score)

    timer = Timer()
    timer.start()
    with timer.section('sweep'):
        params, warnings_list = roc_fit(design)
    timer.stop()

    result = Result(
        params=params,
        info={"method": "ROC", "n": design.n},
        timing=timer.result(),
        backend_name="cpu_roc",
        warnings=tuple(warnings_list),
    )
    return ROCSolution(_result=result)


def pr_curve(
    label: ArrayLike | ClassifierDesign,
    score: ArrayLike | None = None,
) -> PRSolution:
    """Precision-recall curve with step-wise Average Precision.

    Without positives, recall and AP are NaN and a warning is recorded.
    """
    design = _ensure_design(label, score)

    timer = Timer()
    timer.start()
    with timer.section('sweep'):
        params, warnings_list = pr_fit(design)
    timer.stop()

    result = Result(
        params=params,
        info={"method": "Precision-Recall", "n": design.n},
        timing=timer.result(),
        backend_name="cpu_pr",
        warnings=tuple(warnings_list),
    )
    return PRSolution(_result=result)


def calibration_curve(
    label: ArrayLike | ClassifierDesign,
    score: ArrayLike | None = None,
    *,
    n_bins: int = CALIBRATION_BINS,
) -> CalibrationSolution:
    """Mean predicted probability vs observed positive fraction per bin.

    Parameters
    ----------
    n_bins : int
        Number of equal-width bins on [0, 1]. Default 10 (deciles).
    """
    design = _ensure_design(label, score)
    if isinstance(n_bins, bool) or not isinstance(n_bins, (int, np.integer)) or n_bins < 1:
        raise ValidationError(f"n_bins must be a positive integer, got {n_bins!r}")

    params = calibration_bins(design, int(n_bins))

    warnings_list = []
    if design.n == 0:
        warnings_list.append("no records: calibration curve is empty")

    result = Result(
        params=params,
        info={"method": "Calibration", "n_bins": int(n_bins)},
        timing=None,
        backend_name="cpu_calibration",
        warnings=tuple(warnings_list),
    )
    return CalibrationSolution(_result=result)


def decision_curve(
    label: ArrayLike | ClassifierDesign,
    score: ArrayLike | None = None,
    *,
    thresholds: ArrayLike | None = None,
) -> DecisionCurveSolution:
    """Net benefit of the model against treat-all and treat-none.

    Parameters
    ----------
    thresholds : array-like or None
        Threshold probabilities strictly inside (0, 1). Default grid
        0.01, 0.03, ..., 0.99.
    """
    design = _ensure_design(label, score)
    if thresholds is None:
        grid = default_grid()
    else:
        grid = check_array(thresholds, "thresholds")
        check_1d(grid, "thresholds")
        if np.any(np.isnan(grid)):
            raise ValidationError("thresholds: must not contain missing values")
        check_unit_interval(grid, "thresholds", open_interval=True)

    with timed() as timer:
        params = net_benefit(design, grid)

    warnings_list = []
    if design.n == 0:
        warnings_list.append("no records: net benefit is undefined")

    result = Result(
        params=params,
        info={"method": "Decision curve", "n_thresholds": int(grid.size)},
        timing=timer.result(),
        backend_name="cpu_decision_curve",
        warnings=tuple(warnings_list),
    )
    return DecisionCurveSolution(_result=result)


# -- Helpers --

def _ensure_design(label, score) -> ClassifierDesign:
    if isinstance(label, ClassifierDesign):
        return label
    if score is None:
        raise TypeError("score is required unless label is a ClassifierDesign")
    return ClassifierDesign.from_arrays(label, score)


def _check_threshold(threshold: float) -> float:
    threshold = check_scalar(threshold, "threshold")
    if not 0.0 <= threshold <= 1.0:
        raise ValidationError(f"threshold must be in [0, 1], got {threshold}")
    return threshold


def _metrics_at(design: ClassifierDesign, threshold: float) -> DiagnosticSolution:
    counts = count_confusion(design, threshold)
    params = accuracy_metrics(counts, threshold)

    warnings_list = []
    if counts.positives == 0:
        warnings_list.append("no positive cases: sensitivity is undefined")
    if counts.negatives == 0:
        warnings_list.append("no negative cases: specificity is undefined")

    result = Result(
        params=params,
        info={"method": "Diagnostic accuracy", "threshold": threshold},
        timing=None,
        backend_name="cpu_accuracy",
        warnings=tuple(warnings_list),
    )
    return DiagnosticSolution(_result=result)
