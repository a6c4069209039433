"""
Public API for two-group comparisons.

    mean_difference_ci(x, y)      -> CIResult
    t_test(x, y)                  -> TTestSolution
    responder_analysis(x, y)      -> ResponderSolution

Groups are filtered independently for missing values. No function raises
on empty or constant groups; neutral values are returned instead.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from trialstats.core.constants import RESPONDER_THRESHOLD
from trialstats.core.result import Result
from trialstats.core.compute.timing import timed
from trialstats.core.validation import check_scalar
from trialstats.descriptive._common import CIResult
from trialstats.hypothesis.design import TwoSampleDesign
from trialstats.hypothesis.solution import ResponderSolution, TTestSolution
from trialstats.hypothesis._welch import mean_difference, welch_t_test
from trialstats.hypothesis._responder import responder_rates


def _ensure_design(x, y) -> TwoSampleDesign:
    if isinstance(x, TwoSampleDesign):
        return x
    if y is None:
        raise TypeError("y is required unless x is a TwoSampleDesign")
    return TwoSampleDesign.from_arrays(x, y)


def mean_difference_ci(
    x: ArrayLike | TwoSampleDesign,
    y: ArrayLike | None = None,
) -> CIResult:
    """
    Difference of means (x - y) with a 95% confidence interval.

    Parameters
    ----------
    x, y : array-like
        Group A and group B outcomes. Alternatively pass a
        TwoSampleDesign as ``x``.

    Returns
    -------
    CIResult
        ``estimate = mean(x) - mean(y)``,
        ``se = sqrt(se_x^2 + se_y^2)`` (unequal variances),
        bounds ``estimate -/+ 1.96 * se``. All zeros if either group is
        empty.
    """
    return mean_difference(_ensure_design(x, y))


def t_test(
    x: ArrayLike | TwoSampleDesign,
    y: ArrayLike | None = None,
    *,
    exact: bool = False,
) -> TTestSolution:
    """
    Welch two-sample t-test with a three-bucket p-value.

    Parameters
    ----------
    x, y : array-like
        Group A and group B outcomes.
    exact : bool
        If True, also compute a two-sided Student-t p-value on the
        unfloored Welch-Satterthwaite df (``p_value_exact``). The bucketed
        ``p_value`` is always reported and is unaffected.

    Returns
    -------
    TTestSolution
        ``p_value`` is ">0.05" for |t| < 1.96, "<0.05" for
        1.96 <= |t| < 2.58 and "<0.01" for |t| >= 2.58.
    """
    design = _ensure_design(x, y)

    with timed() as timer:
        params, warnings_list = welch_t_test(design, exact=exact)

    result = Result(
        params=params,
        info={"method": params.method, "exact": exact},
        timing=timer.result(),
        backend_name="cpu_welch",
        warnings=tuple(warnings_list),
    )
    return TTestSolution(_result=result, _design=design)


def responder_analysis(
    treatment: ArrayLike | TwoSampleDesign,
    control: ArrayLike | None = None,
    *,
    threshold: float = RESPONDER_THRESHOLD,
) -> ResponderSolution:
    """
    Compare responder rates between a treatment and a control arm.

    Parameters
    ----------
    treatment, control : array-like
        Per-patient outcome, typically percent change from baseline.
    threshold : float
        Responders have outcome <= threshold. Default -20.

    Returns
    -------
    ResponderSolution
        Responder rates, absolute risk reduction and number needed to
        treat (inf when the treatment arm does no better).
    """
    design = _ensure_design(treatment, control)
    threshold = check_scalar(threshold, "threshold")

    params = responder_rates(design, threshold)

    warnings_list = []
    if design.either_empty:
        warnings_list.append("at least one arm has no valid observations")

    result = Result(
        params=params,
        info={"method": "Responder analysis", "threshold": threshold},
        timing=None,
        backend_name="cpu_responder",
        warnings=tuple(warnings_list),
    )
    return ResponderSolution(_result=result)
