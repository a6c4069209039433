"""
Descending-score threshold sweep shared by the ROC and PR curves.

Scores are visited from highest to lowest. Records with tied scores are
processed as one step, so every distinct score yields exactly one curve
point whose counts include all records scoring >= that value.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def descending_sweep(label: NDArray, score: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    """Cumulative (tp, fp) at each distinct score.

    Returns
    -------
    thresholds : NDArray
        Distinct scores, descending.
    tp, fp : NDArray
        Number of positives / negatives with score >= each threshold.
    """
    if score.size == 0:
        empty = np.array([], dtype=np.float64)
        return empty, empty.astype(np.int64), empty.astype(np.int64)

    order = np.argsort(-score, kind='mergesort')
    s = score[order]
    positives = label[order].astype(np.int64)

    run_ends = np.r_[np.flatnonzero(np.diff(s) != 0), s.size - 1]
    tp = np.cumsum(positives)[run_ends]
    fp = (run_ends + 1) - tp
    return s[run_ends], tp, fp
