"""
Threshold-based accuracy metrics from a 2x2 confusion table.
"""

from __future__ import annotations

import math

import numpy as np

from trialstats.core.constants import Z_95
from trialstats.diagnostic._common import ConfusionCounts, DiagnosticParams
from trialstats.diagnostic.design import ClassifierDesign


def count_confusion(design: ClassifierDesign, threshold: float) -> ConfusionCounts:
    """Predicted positive iff score >= threshold."""
    predicted = design.score >= threshold
    label = design.label
    return ConfusionCounts(
        tp=int(np.sum(label & predicted)),
        fp=int(np.sum(~label & predicted)),
        tn=int(np.sum(~label & ~predicted)),
        fn=int(np.sum(label & ~predicted)),
    )


def ratio(num: int, den: int) -> float:
    """num / den, or NaN when den == 0."""
    if den == 0:
        return math.nan
    return num / den


def wald_interval(p: float, n: int) -> tuple[float, float]:
    if n == 0 or math.isnan(p):
        return math.nan, math.nan
    margin = Z_95 * math.sqrt(p * (1.0 - p) / n)
    return max(0.0, p - margin), min(1.0, p + margin)


def accuracy_metrics(counts: ConfusionCounts, threshold: float) -> DiagnosticParams:
    sens = ratio(counts.tp, counts.tp + counts.fn)
    spec = ratio(counts.tn, counts.tn + counts.fp)
    ppv = ratio(counts.tp, counts.tp + counts.fp)
    npv = ratio(counts.tn, counts.tn + counts.fn)
    acc = ratio(counts.tp + counts.tn, counts.n)

    if math.isnan(ppv) or math.isnan(sens) or ppv + sens == 0.0:
        f1 = math.nan
    else:
        f1 = 2.0 * ppv * sens / (ppv + sens)

    return DiagnosticParams(
        counts=counts,
        threshold=threshold,
        sensitivity=sens,
        specificity=spec,
        ppv=ppv,
        npv=npv,
        accuracy=acc,
        f1=f1,
        youden_j=sens + spec - 1.0,
        sensitivity_ci=wald_interval(sens, counts.positives),
        specificity_ci=wald_interval(spec, counts.negatives),
    )
