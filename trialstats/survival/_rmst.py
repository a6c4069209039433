"""
Restricted mean survival time (area under the KM curve up to tau).

The area is accumulated with the trapezoidal rule over consecutive curve
points: each interval contributes (t_i - t_{i-1}) * (S_{i-1} + S_i) / 2,
with t_i clipped to tau. If the curve ends before tau, the last survival
value is carried flat to tau.

Both choices are approximations. The KM curve is a step function, so the
exact area would use S_{i-1} over each interval; and the flat tail assumes
no events beyond the last observation.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def rmst_from_curve(time: NDArray, survival: NDArray, tau: float) -> float:
    """Trapezoidal RMST up to ``tau``. Returns 0.0 for tau <= 0."""
    if tau <= 0.0:
        return 0.0

    t_clipped = np.minimum(time, tau)
    widths = np.diff(t_clipped)
    heights = (survival[:-1] + survival[1:]) / 2.0
    area = float(np.sum(widths * heights))

    if time[-1] < tau:
        area += (tau - float(time[-1])) * float(survival[-1])
    return area
