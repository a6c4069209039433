"""
Common types for two-group comparisons.
"""

from __future__ import annotations

from dataclasses import dataclass

from trialstats.descriptive._common import CIResult


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for the Welch two-sample t-test.

    Attributes
    ----------
    statistic : float
        Welch t = (mean_x - mean_y) / sqrt(var_x/n_x + var_y/n_y).
        0.0 when either sample is empty or the standard error is 0.
    df : float
        Welch-Satterthwaite degrees of freedom, floored to an integer.
        NaN when undefined (a group with n <= 1, or zero variance in both).
    df_welch : float
        Unfloored Welch-Satterthwaite degrees of freedom (NaN when undefined).
    p_value : str
        Three-bucket approximation: ">0.05", "<0.05" or "<0.01".
    p_value_exact : float or None
        Two-sided Student-t p-value on ``df_welch``. Only computed when
        requested; None otherwise.
    mean_x, mean_y : float
        Group means (0.0 for an empty group).
    difference : CIResult
        Difference of means with Welch standard error and 95% CI.
    n_x, n_y : int
        Valid observations per group.
    method : str
    data_name : str
    """
    statistic: float
    df: float
    df_welch: float
    p_value: str
    p_value_exact: float | None
    mean_x: float
    mean_y: float
    difference: CIResult
    n_x: int
    n_y: int
    method: str
    data_name: str


@dataclass(frozen=True)
class ResponderParams:
    """
    Responder-rate comparison between a treatment and a control arm.

    A responder is a patient whose outcome is at or below ``threshold``
    (e.g. a percent change from baseline of -20% or better).

    Attributes
    ----------
    responders_treatment, responders_control : int
    n_treatment, n_control : int
    rate_treatment, rate_control : float
        Responder proportions; NaN for an empty arm.
    absolute_risk_reduction : float
        rate_treatment - rate_control (NaN if either rate is NaN).
    nnt : float
        Number needed to treat, ceil(1 / ARR) for ARR > 0; inf when the
        treatment shows no benefit (ARR <= 0); NaN when ARR is undefined.
    threshold : float
    """
    responders_treatment: int
    responders_control: int
    n_treatment: int
    n_control: int
    rate_treatment: float
    rate_control: float
    absolute_risk_reduction: float
    nnt: float
    threshold: float
