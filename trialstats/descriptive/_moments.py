"""
Moment and location estimators on clean 1D samples.

Every function here receives a float array that already has missing values
removed (see SampleDesign) and returns 0.0 instead of raising on empty or
single-observation input.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from trialstats.core.constants import Z_95
from trialstats.descriptive._common import CIResult


def sample_mean(x: NDArray) -> float:
    if x.size == 0:
        return 0.0
    return float(np.mean(x))


def sample_sd(x: NDArray) -> float:
    """Bessel-corrected (n - 1) standard deviation; 0.0 when n <= 1."""
    if x.size <= 1:
        return 0.0
    return float(np.std(x, ddof=1))


def sample_median(x: NDArray) -> float:
    """Middle value; average of the two central values for even n."""
    if x.size == 0:
        return 0.0
    s = np.sort(x)
    mid = s.size // 2
    if s.size % 2 == 0:
        return float((s[mid - 1] + s[mid]) / 2.0)
    return float(s[mid])


def standard_error(x: NDArray) -> float:
    if x.size == 0:
        return 0.0
    return sample_sd(x) / math.sqrt(x.size)


def mean_ci95(x: NDArray) -> CIResult:
    """Normal-approximation 95% CI for the mean: mean +- 1.96 * sd / sqrt(n).

    Uses the z quantile rather than a t quantile; intended for arm sizes
    of roughly ten or more.
    """
    if x.size == 0:
        return CIResult(estimate=0.0, lower=0.0, upper=0.0, se=0.0)
    m = sample_mean(x)
    se = standard_error(x)
    margin = Z_95 * se
    return CIResult(estimate=m, lower=m - margin, upper=m + margin, se=se)
