"""
Approximate hazard ratio as a ratio of crude event rates.

HR ~= (d_a / n_a) / (d_b / n_b) with a log-scale interval

    HR * exp(-/+ 1.96 * sqrt(1/d_a + 1/d_b))

This is not a Cox partial-likelihood estimate: follow-up time and
censoring are ignored. It is defined only when both arms have events.
"""

from __future__ import annotations

import math
from typing import Any

from trialstats.core.constants import Z_95
from trialstats.survival._common import HazardRatioParams
from trialstats.survival.design import SurvivalDesign


def event_rate_ratio(
    arm_a: SurvivalDesign,
    arm_b: SurvivalDesign,
    arms: tuple[Any, Any],
) -> tuple[HazardRatioParams, list[str]]:
    warnings_list: list[str] = []
    d_a, d_b = arm_a.n_events, arm_b.n_events
    n_a, n_b = arm_a.n, arm_b.n

    rate_a = d_a / n_a if n_a > 0 else math.nan
    rate_b = d_b / n_b if n_b > 0 else math.nan

    if math.isnan(rate_a) or math.isnan(rate_b) or rate_b == 0.0:
        estimate = math.nan
    else:
        estimate = rate_a / rate_b

    estimable = d_a > 0 and d_b > 0
    if estimable:
        se_log = math.sqrt(1.0 / d_a + 1.0 / d_b)
        ci_lower = estimate * math.exp(-Z_95 * se_log)
        ci_upper = estimate * math.exp(Z_95 * se_log)
    else:
        se_log = ci_lower = ci_upper = math.nan
        for label, d, n in ((arms[0], d_a, n_a), (arms[1], d_b, n_b)):
            if n == 0:
                warnings_list.append(f"arm {label!r} has no records")
            elif d == 0:
                warnings_list.append(f"arm {label!r} has zero events")
        warnings_list.append("hazard ratio confidence interval is undefined")

    return HazardRatioParams(
        estimate=estimate,
        ci_lower=ci_lower,
        ci_upper=ci_upper,
        se_log=se_log,
        estimable=estimable,
        events_a=d_a,
        events_b=d_b,
        n_a=n_a,
        n_b=n_b,
        arms=arms,
    ), warnings_list
