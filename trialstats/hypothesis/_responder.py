"""
Responder analysis: responder rates, absolute risk reduction, NNT.
"""

from __future__ import annotations

import numpy as np

from trialstats.hypothesis._common import ResponderParams
from trialstats.hypothesis.design import TwoSampleDesign


def responder_rates(design: TwoSampleDesign, threshold: float) -> ResponderParams:
    r_t = int(np.sum(design.x <= threshold))
    r_c = int(np.sum(design.y <= threshold))
    n_t, n_c = design.n_x, design.n_y
    rate_t = r_t / n_t if n_t > 0 else float('nan')
    rate_c = r_c / n_c if n_c > 0 else float('nan')
    arr = rate_t - rate_c

    if n_t == 0 or n_c == 0:
        nnt = float('nan')
    else:
        # ARR = (r_t*n_c - r_c*n_t) / (n_t*n_c); ceil(1/ARR) in integers
        gain = r_t * n_c - r_c * n_t
        nnt = float(-(-(n_t * n_c) // gain)) if gain > 0 else float('inf')

    return ResponderParams(
        responders_treatment=r_t,
        responders_control=r_c,
        n_treatment=n_t,
        n_control=n_c,
        rate_treatment=rate_t,
        rate_control=rate_c,
        absolute_risk_reduction=arr,
        nnt=nnt,
        threshold=threshold,
    )
