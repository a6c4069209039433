"""
p-value reporting for the Welch t statistic.

The default report is a three-bucket label read off |t| with normal
cutoffs, not a t-distribution tail probability:

    |t| <  1.96          -> ">0.05"
    1.96 <= |t| < 2.58   -> "<0.05"
    |t| >= 2.58          -> "<0.01"

``exact_p_value`` is an opt-in companion using scipy's Student-t.
"""

from __future__ import annotations

import numpy as np
from scipy import stats as sp_stats

from trialstats.core.constants import (
    P_ABOVE_05,
    P_BELOW_01,
    P_BELOW_05,
    P_BUCKET_01,
    P_BUCKET_05,
)


def bucket_p_value(t_stat: float) -> str:
    abs_t = abs(t_stat)
    if abs_t < P_BUCKET_05:
        return P_ABOVE_05
    if abs_t < P_BUCKET_01:
        return P_BELOW_05
    return P_BELOW_01


def exact_p_value(t_stat: float, df: float) -> float:
    """Two-sided p-value from the t distribution; NaN when df is undefined."""
    if np.isnan(t_stat) or np.isnan(df) or df <= 0:
        return float('nan')
    return float(2.0 * sp_stats.t.sf(abs(t_stat), df))
