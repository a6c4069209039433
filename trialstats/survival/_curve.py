"""
Read-outs from a fitted Kaplan-Meier curve.

Functions here take the (time, survival) step arrays of a curve, so they
work on a KMSolution, a KMParams payload, or a plain sequence of KMPoint.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from trialstats.core.constants import MEDIAN_SURVIVAL_LEVEL
from trialstats.core.exceptions import ValidationError
from trialstats.survival._common import KMPoint, MedianSurvival


def curve_arrays(curve: Any) -> tuple[NDArray, NDArray]:
    """Extract (time, survival) arrays from any supported curve type.

    A curve that does not begin at time 0 is given the origin (0, 1.0).
    """
    if hasattr(curve, 'time') and hasattr(curve, 'survival'):
        t = np.asarray(curve.time, dtype=np.float64)
        s = np.asarray(curve.survival, dtype=np.float64)
    elif isinstance(curve, Sequence) and all(isinstance(p, KMPoint) for p in curve):
        t = np.array([p.time for p in curve], dtype=np.float64)
        s = np.array([p.survival for p in curve], dtype=np.float64)
    else:
        raise ValidationError(
            f"curve: expected KMSolution, KMParams or sequence of KMPoint, "
            f"got {type(curve).__name__}"
        )

    if t.size != s.size:
        raise ValidationError(
            f"curve: time and survival lengths differ ({t.size} vs {s.size})"
        )
    if t.size > 1 and np.any(np.diff(t) <= 0):
        raise ValidationError("curve: times must be strictly increasing")

    if t.size == 0 or t[0] > 0.0:
        t = np.concatenate(([0.0], t))
        s = np.concatenate(([1.0], s))
    return t, s


def median_from_curve(time: NDArray, survival: NDArray) -> MedianSurvival:
    """First crossing strictly below 0.5, reported as a time midpoint.

    The median is (t_{i-1} + t_i) / 2 where i is the first point with
    S < 0.5: the times are averaged, survival is not interpolated.
    """
    below = np.flatnonzero(survival < MEDIAN_SURVIVAL_LEVEL)
    if below.size == 0:
        return MedianSurvival(time=float(time[-1]), reached=False)
    i = int(below[0])
    if i == 0:
        return MedianSurvival(time=float(time[0]), reached=True)
    return MedianSurvival(time=float((time[i - 1] + time[i]) / 2.0), reached=True)


def survival_at_time(time: NDArray, survival: NDArray, t: float) -> float:
    """Step-function value: S at the last curve time <= t (1.0 before it)."""
    idx = np.searchsorted(time, t, side='right') - 1
    if idx < 0:
        return 1.0
    return float(survival[idx])
