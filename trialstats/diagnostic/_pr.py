"""
Precision-recall curve and step-wise Average Precision.

AP = sum_i precision_i * (recall_i - recall_{i-1}), summed over points
where recall strictly increases (recall_0 = 0). Precision is not
interpolated.
"""

from __future__ import annotations

import numpy as np

from trialstats.diagnostic._common import PRParams
from trialstats.diagnostic._sweep import descending_sweep
from trialstats.diagnostic.design import ClassifierDesign


def pr_fit(design: ClassifierDesign) -> tuple[PRParams, list[str]]:
    warnings_list: list[str] = []
    n_pos = design.n_positive

    thresholds, tp, fp = descending_sweep(design.label, design.score)
    precision = tp / (tp + fp) if tp.size else np.array([], dtype=np.float64)

    if n_pos == 0:
        warnings_list.append("no positive cases: recall and average precision are undefined")
        recall = np.full(tp.size, np.nan)
        ap = float('nan')
    else:
        recall = tp / n_pos
        gains = np.diff(np.r_[0.0, recall])
        step = gains > 0
        ap = float(np.sum(precision[step] * gains[step]))

    return PRParams(
        precision=precision,
        recall=recall,
        thresholds=thresholds,
        average_precision=ap,
        prevalence=design.prevalence,
    ), warnings_list
