"""
Public API for survival analysis.

    kaplan_meier(time, event) -> KMSolution
    kaplan_meier_by_group(time, event, group) -> dict[label, KMSolution]
    restricted_mean_survival_time(curve, tau) -> float
    rmst_difference(time, event, group, tau) -> RMSTComparison
    median_survival_time(curve) -> MedianSurvival
    survival_at(curve, t) -> float
    hazard_ratio(time, event, group) -> HazardRatioSolution
    number_at_risk(time, timepoints) -> ndarray
    cumulative_events(time, event) -> CumulativeEvents

Functions taking raw data validate inputs through SurvivalDesign; functions
taking a ``curve`` accept a KMSolution, KMParams, or sequence of KMPoint.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from trialstats.core.exceptions import ValidationError
from trialstats.core.result import Result
from trialstats.core.compute.timing import Timer
from trialstats.core.validation import check_1d, check_array, check_scalar
from trialstats.survival.design import SurvivalDesign
from trialstats.survival._common import CumulativeEvents, MedianSurvival, RMSTComparison
from trialstats.survival._km import kaplan_meier_fit
from trialstats.survival._curve import curve_arrays, median_from_curve, survival_at_time
from trialstats.survival._rmst import rmst_from_curve
from trialstats.survival._hazard import event_rate_ratio
from trialstats.survival._risk import at_risk_counts, cumulative_event_curve
from trialstats.survival.solution import HazardRatioSolution, KMSolution

HR_METHOD = "event-rate ratio (approximate hazard ratio, not Cox)"


def kaplan_meier(
    time: ArrayLike | SurvivalDesign,
    event: ArrayLike | None = None,
) -> KMSolution:
    """Kaplan-Meier survival curve with Greenwood 95% band.

    Parameters
    ----------
    time : array-like or SurvivalDesign
        Time to event or censoring (non-negative).
    event : array-like
        Event indicator (1/True = event, 0/False = censored).

    Returns
    -------
    KMSolution
        Starts at (time 0, S=1, CI [1, 1], at_risk=N, events=0), then one
        point per distinct observed time.
    """
    design = _ensure_design(time, event)

    timer = Timer()
    timer.start()
    params = kaplan_meier_fit(design.time, design.event)
    timer.stop()

    warnings_list = []
    if design.n == 0:
        warnings_list.append("no records: curve is the origin point only")
    if design.n_dropped:
        warnings_list.append(f"{design.n_dropped} record(s) with missing time or event dropped")

    result = Result(
        params=params,
        info={"method": "Kaplan-Meier", "conf_type": "plain"},
        timing=timer.result(),
        backend_name="cpu_km",
        warnings=tuple(warnings_list),
    )
    return KMSolution(_result=result)


def kaplan_meier_by_group(
    time: ArrayLike,
    event: ArrayLike,
    group: ArrayLike,
) -> dict[Any, KMSolution]:
    """Fit one Kaplan-Meier curve per arm.

    Returns
    -------
    dict
        Arm label (sorted when orderable) -> KMSolution.
    """
    design = SurvivalDesign.for_survival(time, event, group=group)
    return {label: kaplan_meier(design.subset(label)) for label in design.arm_labels()}


def restricted_mean_survival_time(curve: Any, restriction_time: float) -> float:
    """Restricted mean survival time: area under the KM curve up to tau.

    Trapezoidal integration over consecutive curve points, the last
    interval clipped at ``restriction_time``. If the curve ends earlier,
    its last survival value is extended flat to ``restriction_time`` and a
    RuntimeWarning is issued, since that tail assumes no further events.

    Parameters
    ----------
    curve : KMSolution, KMParams or sequence of KMPoint
    restriction_time : float
        Horizon tau. Values <= 0 give 0.

    Returns
    -------
    float
    """
    tau = check_scalar(restriction_time, "restriction_time")
    t, s = curve_arrays(curve)
    _warn_flat_tail(t, s, tau)
    return rmst_from_curve(t, s, tau)


def rmst_difference(
    time: ArrayLike,
    event: ArrayLike,
    group: ArrayLike,
    restriction_time: float,
    *,
    arms: tuple[Any, Any] | None = None,
) -> RMSTComparison:
    """RMST in each of two arms and their difference (arm A - arm B).

    Parameters
    ----------
    time, event, group : array-like
        Survival records and arm labels.
    restriction_time : float
        Common horizon tau. A RuntimeWarning is issued for each arm whose
        curve ends before it.
    arms : (label_a, label_b) or None
        Arms to compare. Default: the two distinct labels, sorted.
    """
    design = SurvivalDesign.for_survival(time, event, group=group)
    arms = _resolve_arms(design, arms)
    tau = check_scalar(restriction_time, "restriction_time")

    values = []
    for label in arms:
        t, s = curve_arrays(kaplan_meier_fit(*_arm_arrays(design, label)))
        _warn_flat_tail(t, s, tau, arm=label)
        values.append(rmst_from_curve(t, s, tau))

    return RMSTComparison(
        rmst_a=values[0],
        rmst_b=values[1],
        difference=values[0] - values[1],
        restriction_time=tau,
        arms=arms,
    )


def median_survival_time(curve: Any) -> MedianSurvival:
    """Median survival from a KM curve.

    The first point with S < 0.5 is located and the reported median is the
    midpoint of its time and the preceding point's time. If S never falls
    below 0.5, the last observed time is returned with ``reached=False``.
    """
    t, s = curve_arrays(curve)
    return median_from_curve(t, s)


def survival_at(curve: Any, t: float) -> float:
    """KM survival at time ``t`` (value of the last step at or before t)."""
    t = check_scalar(t, "t")
    times, surv = curve_arrays(curve)
    return survival_at_time(times, surv, t)


def hazard_ratio(
    time: ArrayLike,
    event: ArrayLike,
    group: ArrayLike,
    *,
    arms: tuple[Any, Any] | None = None,
) -> HazardRatioSolution:
    """Approximate hazard ratio (arm A vs arm B) as an event-rate ratio.

    HR = (events_a / n_a) / (events_b / n_b), 95% CI
    HR * exp(-/+ 1.96 * sqrt(1/events_a + 1/events_b)).

    This is NOT a proportional-hazards (Cox) estimate. When either arm has
    zero events the interval is undefined: ``estimable`` is False and the
    bounds are NaN (never infinite).

    Parameters
    ----------
    time, event, group : array-like
        Survival records and arm labels.
    arms : (label_a, label_b) or None
        Numerator and denominator arms. Default: the two distinct labels,
        sorted.
    """
    design = SurvivalDesign.for_survival(time, event, group=group)
    arms = _resolve_arms(design, arms)

    timer = Timer()
    timer.start()
    params, warnings_list = event_rate_ratio(
        design.subset(arms[0]), design.subset(arms[1]), arms,
    )
    timer.stop()

    result = Result(
        params=params,
        info={"method": HR_METHOD},
        timing=timer.result(),
        backend_name="cpu_event_rate_ratio",
        warnings=tuple(warnings_list),
    )
    return HazardRatioSolution(_result=result)


def number_at_risk(time: ArrayLike, timepoints: ArrayLike) -> NDArray:
    """Risk-table counts: records with time >= each timepoint.

    Missing times are ignored.
    """
    t = check_array(time, "time")
    check_1d(t, "time")
    t = t[~np.isnan(t)]
    points = check_array(timepoints, "timepoints")
    check_1d(points, "timepoints")
    return at_risk_counts(t, points)


def cumulative_events(
    time: ArrayLike | SurvivalDesign,
    event: ArrayLike | None = None,
) -> CumulativeEvents:
    """Cumulative event count curve: (0, 0) then one step per event."""
    design = _ensure_design(time, event)
    return cumulative_event_curve(design.time, design.event)


# -- Helpers --

def _ensure_design(time, event) -> SurvivalDesign:
    if isinstance(time, SurvivalDesign):
        return time
    if event is None:
        raise TypeError("event is required unless time is a SurvivalDesign")
    return SurvivalDesign.for_survival(time, event)


def _resolve_arms(design: SurvivalDesign, arms) -> tuple[Any, Any]:
    labels = design.arm_labels()
    if arms is None:
        if len(labels) != 2:
            raise ValidationError(
                f"group must have exactly 2 arms when arms is not given, "
                f"got {len(labels)}: {list(labels)}"
            )
        return labels[0], labels[1]
    if len(arms) != 2:
        raise ValidationError(f"arms must name exactly 2 labels, got {len(arms)}")
    return arms[0], arms[1]


def _arm_arrays(design: SurvivalDesign, label) -> tuple[NDArray, NDArray]:
    arm = design.subset(label)
    return arm.time, arm.event


def _warn_flat_tail(t: NDArray, s: NDArray, tau: float, arm=None) -> None:
    # Warns from the public caller's frame
    if tau > t[-1] and t.size > 1:
        where = "" if arm is None else f"arm {arm!r}: "
        warnings.warn(
            f"{where}restriction_time {tau:g} is beyond the last curve time "
            f"{t[-1]:g}; survival is extrapolated flat at {s[-1]:.4g}",
            RuntimeWarning,
            stacklevel=3,
        )
