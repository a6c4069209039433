"""
Survival analysis.

Kaplan-Meier estimation with Greenwood intervals, curve read-outs (RMST,
median, landmark survival), risk tables, and a crude event-rate ratio used
as an approximate hazard ratio.

Public API:
    kaplan_meier(time, event) -> KMSolution
    kaplan_meier_by_group(time, event, group) -> dict
    restricted_mean_survival_time(curve, tau) -> float
    rmst_difference(time, event, group, tau) -> RMSTComparison
    median_survival_time(curve) -> MedianSurvival
    survival_at(curve, t) -> float
    hazard_ratio(time, event, group) -> HazardRatioSolution
    number_at_risk(time, timepoints) -> ndarray
    cumulative_events(time, event) -> CumulativeEvents
"""

from trialstats.survival.solvers import (
    kaplan_meier,
    kaplan_meier_by_group,
    restricted_mean_survival_time,
    rmst_difference,
    median_survival_time,
    survival_at,
    hazard_ratio,
    number_at_risk,
    cumulative_events,
)
from trialstats.survival.design import SurvivalDesign
from trialstats.survival._common import (
    KMPoint,
    KMParams,
    MedianSurvival,
    HazardRatioParams,
    RMSTComparison,
    CumulativeEvents,
)
from trialstats.survival.solution import KMSolution, HazardRatioSolution

__all__ = [
    "kaplan_meier",
    "kaplan_meier_by_group",
    "restricted_mean_survival_time",
    "rmst_difference",
    "median_survival_time",
    "survival_at",
    "hazard_ratio",
    "number_at_risk",
    "cumulative_events",
    "SurvivalDesign",
    "KMPoint",
    "KMParams",
    "MedianSurvival",
    "HazardRatioParams",
    "RMSTComparison",
    "CumulativeEvents",
    "KMSolution",
    "HazardRatioSolution",
]
