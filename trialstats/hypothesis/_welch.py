"""
Welch two-sample comparison with normal-approximation intervals.

The difference of means uses the unequal-variance standard error
sqrt(sd_x^2/n_x + sd_y^2/n_y). Degrees of freedom follow
Welch-Satterthwaite but are only reported; significance is read from the
t statistic through fixed cutoffs (see _p_bucket).
"""

from __future__ import annotations

import math

import numpy as np

from trialstats.core.constants import Z_95
from trialstats.descriptive._common import CIResult
from trialstats.descriptive._moments import sample_mean, sample_sd
from trialstats.hypothesis._common import TTestParams
from trialstats.hypothesis._p_bucket import bucket_p_value, exact_p_value
from trialstats.hypothesis.design import TwoSampleDesign

_ZERO_CI = CIResult(estimate=0.0, lower=0.0, upper=0.0, se=0.0)


def mean_difference(design: TwoSampleDesign) -> CIResult:
    """Difference of means (x - y) with Welch SE and 95% CI."""
    if design.either_empty:
        return _ZERO_CI

    x, y = design.x, design.y
    diff = sample_mean(x) - sample_mean(y)
    se = math.sqrt(
        (sample_sd(x) / math.sqrt(x.size)) ** 2
        + (sample_sd(y) / math.sqrt(y.size)) ** 2
    )
    margin = Z_95 * se
    return CIResult(estimate=diff, lower=diff - margin, upper=diff + margin, se=se)


def welch_df(design: TwoSampleDesign) -> float:
    """Welch-Satterthwaite degrees of freedom; NaN when undefined."""
    n1, n2 = design.n_x, design.n_y
    if n1 < 2 or n2 < 2:
        return float('nan')
    v1 = sample_sd(design.x) ** 2 / n1
    v2 = sample_sd(design.y) ** 2 / n2
    denom = v1 ** 2 / (n1 - 1) + v2 ** 2 / (n2 - 1)
    if denom == 0.0:
        return float('nan')
    return (v1 + v2) ** 2 / denom


def welch_t_test(
    design: TwoSampleDesign,
    *,
    exact: bool = False,
) -> tuple[TTestParams, list[str]]:
    """Welch t statistic with three-bucket p-value."""
    warnings_list: list[str] = []
    method = "Welch Two Sample t-test (normal-threshold p-value)"

    if design.either_empty:
        warnings_list.append("at least one group has no valid observations")
        return TTestParams(
            statistic=0.0,
            df=float('nan'),
            df_welch=float('nan'),
            p_value=bucket_p_value(0.0),
            p_value_exact=float('nan') if exact else None,
            mean_x=sample_mean(design.x),
            mean_y=sample_mean(design.y),
            difference=_ZERO_CI,
            n_x=design.n_x,
            n_y=design.n_y,
            method=method,
            data_name=design.data_name,
        ), warnings_list

    diff = mean_difference(design)
    if diff.se == 0.0:
        warnings_list.append("data are essentially constant")
        t_stat = 0.0
    else:
        t_stat = diff.estimate / diff.se

    df_welch = welch_df(design)
    df = float(math.floor(df_welch)) if np.isfinite(df_welch) else float('nan')

    return TTestParams(
        statistic=float(t_stat),
        df=df,
        df_welch=float(df_welch),
        p_value=bucket_p_value(t_stat),
        p_value_exact=exact_p_value(t_stat, df_welch) if exact else None,
        mean_x=sample_mean(design.x),
        mean_y=sample_mean(design.y),
        difference=diff,
        n_x=design.n_x,
        n_y=design.n_y,
        method=method,
        data_name=design.data_name,
    ), warnings_list
