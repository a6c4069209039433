"""
Empirical ROC curve, trapezoidal AUC and Youden-optimal threshold.
"""

from __future__ import annotations

import numpy as np

from trialstats.diagnostic._common import ROCParams
from trialstats.diagnostic._sweep import descending_sweep
from trialstats.diagnostic.design import ClassifierDesign


def roc_fit(design: ClassifierDesign) -> tuple[ROCParams, list[str]]:
    warnings_list: list[str] = []
    n_pos, n_neg = design.n_positive, design.n_negative

    thresholds, tp, fp = descending_sweep(design.label, design.score)

    if n_pos == 0:
        warnings_list.append("no positive cases: TPR is undefined")
        tpr_steps = np.full(tp.size, np.nan)
    else:
        tpr_steps = tp / n_pos
    if n_neg == 0:
        warnings_list.append("no negative cases: FPR is undefined")
        fpr_steps = np.full(fp.size, np.nan)
    else:
        fpr_steps = fp / n_neg

    tpr = np.r_[0.0, tpr_steps]
    fpr = np.r_[0.0, fpr_steps]
    thr = np.r_[np.inf, thresholds]

    defined = n_pos > 0 and n_neg > 0
    if defined:
        auc = float(np.sum(np.diff(fpr) * (tpr[1:] + tpr[:-1]) / 2.0))
        j = tpr - fpr
        best = int(np.argmax(j))
        optimal_index = best
        optimal_threshold = float(thr[best])
        optimal_j = float(j[best])
    else:
        auc = float('nan')
        optimal_index = None
        optimal_threshold = float('nan')
        optimal_j = float('nan')

    return ROCParams(
        fpr=fpr,
        tpr=tpr,
        thresholds=thr,
        auc=auc,
        optimal_index=optimal_index,
        optimal_threshold=optimal_threshold,
        optimal_j=optimal_j,
        n_positive=n_pos,
        n_negative=n_neg,
    ), warnings_list
