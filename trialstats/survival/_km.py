"""
Kaplan-Meier product-limit estimator with Greenwood variance.

- Product-limit survival estimate: S(t) = prod(1 - d_j / n_j)
- Greenwood variance: Var(S(t)) = S(t)^2 * sum(d_j / (n_j * (n_j - d_j)))
- Plain 95% interval: S(t) -/+ 1.96 * SE, clamped to [0, 1]

The curve has one point per distinct observed time (events and censoring
alike) preceded by the origin (0, 1.0). Censoring-only times carry S
forward unchanged. A step where every subject at risk fails (n_j == d_j)
drives S to 0 and contributes no Greenwood term.

References:
    Kaplan, E. L., & Meier, P. (1958). Nonparametric estimation from
        incomplete observations. JASA, 53(282), 457-481.
    Greenwood, M. (1926). The natural duration of cancer. Reports on
        Public Health and Medical Subjects, 33.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from trialstats.core.constants import Z_95
from trialstats.core.exceptions import NumericalError
from trialstats.survival._common import KMParams


def kaplan_meier_fit(time: NDArray, event: NDArray) -> KMParams:
    """Compute the Kaplan-Meier survival curve.

    Parameters
    ----------
    time : NDArray
        (n,) non-negative time to event or censoring.
    event : NDArray
        (n,) event indicator (1=event, 0=censored).

    Returns
    -------
    KMParams
    """
    n_total = len(time)
    n_events_total = int(np.sum(event))

    if n_total == 0:
        return _origin_only()

    unique_times, inverse = np.unique(time, return_inverse=True)
    m = len(unique_times)
    d = np.bincount(inverse, weights=event, minlength=m).astype(np.int64)
    c = np.bincount(inverse, weights=1.0 - event, minlength=m).astype(np.int64)

    # n_j = number with time >= t_j
    sorted_time = np.sort(time)
    n_risk = n_total - np.searchsorted(sorted_time, unique_times, side='left')

    # Records at exactly t = 0 fold into the origin point
    if unique_times[0] > 0.0:
        unique_times = np.concatenate(([0.0], unique_times))
        d = np.concatenate(([0], d))
        c = np.concatenate(([0], c))
        n_risk = np.concatenate(([n_total], n_risk))

    steps = (d > 0) & (n_risk > 0)
    safe_risk = np.where(n_risk > 0, n_risk, 1)
    factor = np.where(steps, 1.0 - d / safe_risk, 1.0)
    survival = np.cumprod(factor)

    denom = n_risk * (n_risk - d)
    safe_denom = np.where(denom > 0, denom, 1)
    greenwood_terms = np.where(steps & (denom > 0), d / safe_denom, 0.0)
    greenwood_sum = np.cumsum(greenwood_terms)
    se = survival * np.sqrt(greenwood_sum)

    ci_lower = np.clip(survival - Z_95 * se, 0.0, 1.0)
    ci_upper = np.clip(survival + Z_95 * se, 0.0, 1.0)

    if np.any(survival < 0.0) or np.any(survival > 1.0):
        raise NumericalError(
            "Kaplan-Meier estimate left [0, 1]", quantity="survival",
        )

    return KMParams(
        time=unique_times.astype(np.float64),
        survival=survival,
        n_risk=n_risk.astype(np.int64),
        n_events=d,
        n_censored=c,
        se=se,
        ci_lower=ci_lower,
        ci_upper=ci_upper,
        n_observations=n_total,
        n_events_total=n_events_total,
    )


def _origin_only() -> KMParams:
    """Curve for an empty arm: the single point (0, 1.0) with nobody at risk."""
    zero_int = np.zeros(1, dtype=np.int64)
    return KMParams(
        time=np.zeros(1),
        survival=np.ones(1),
        n_risk=zero_int,
        n_events=zero_int.copy(),
        n_censored=zero_int.copy(),
        se=np.zeros(1),
        ci_lower=np.ones(1),
        ci_upper=np.ones(1),
        n_observations=0,
        n_events_total=0,
    )
