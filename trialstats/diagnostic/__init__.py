"""
Diagnostic accuracy of a probabilistic classifier.

Threshold metrics from the 2x2 table, ROC and precision-recall curves,
calibration by probability bins, and decision curve analysis.

Public API:
    confusion_counts(label, score, threshold)   - 2x2 counts
    diagnostic_metrics(label, score, threshold) - Sensitivity, specificity, ...
    threshold_sweep(label, score, thresholds)   - Metrics over many thresholds
    roc_curve(label, score)                     - ROC curve, AUC, Youden optimum
    pr_curve(label, score)                      - PR curve, average precision
    calibration_curve(label, score)             - Reliability by decile
    decision_curve(label, score)                - Net benefit curves
"""

from trialstats.diagnostic.solvers import (
    confusion_counts,
    diagnostic_metrics,
    threshold_sweep,
    roc_curve,
    pr_curve,
    calibration_curve,
    decision_curve,
)
from trialstats.diagnostic.design import ClassifierDesign
from trialstats.diagnostic._common import (
    ConfusionCounts,
    DiagnosticParams,
    ROCParams,
    PRParams,
    CalibrationParams,
    DecisionCurveParams,
)
from trialstats.diagnostic.solution import (
    DiagnosticSolution,
    ROCSolution,
    PRSolution,
    CalibrationSolution,
    DecisionCurveSolution,
)

__all__ = [
    "confusion_counts",
    "diagnostic_metrics",
    "threshold_sweep",
    "roc_curve",
    "pr_curve",
    "calibration_curve",
    "decision_curve",
    "ClassifierDesign",
    "ConfusionCounts",
    "DiagnosticParams",
    "ROCParams",
    "PRParams",
    "CalibrationParams",
    "DecisionCurveParams",
    "DiagnosticSolution",
    "ROCSolution",
    "PRSolution",
    "CalibrationSolution",
    "DecisionCurveSolution",
]
