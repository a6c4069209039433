"""
Calibration (reliability) curve over equal-width probability bins.

Bin k covers [k/B, (k+1)/B); a score of exactly 1.0 falls in the last bin.
"""

from __future__ import annotations

import numpy as np

from trialstats.diagnostic._common import CalibrationParams
from trialstats.diagnostic.design import ClassifierDesign


def calibration_bins(design: ClassifierDesign, n_bins: int) -> CalibrationParams:
    idx = np.minimum(np.floor(design.score * n_bins).astype(np.int64), n_bins - 1)

    count = np.bincount(idx, minlength=n_bins)
    score_sum = np.bincount(idx, weights=design.score, minlength=n_bins)
    pos_sum = np.bincount(idx, weights=design.label.astype(np.float64), minlength=n_bins)

    occupied = count > 0
    edges = np.arange(n_bins + 1) / n_bins
    return CalibrationParams(
        bin_lower=edges[:-1][occupied],
        bin_upper=edges[1:][occupied],
        mean_predicted=score_sum[occupied] / count[occupied],
        observed_fraction=pos_sum[occupied] / count[occupied],
        count=count[occupied].astype(np.int64),
        n_bins=n_bins,
    )
