"""
Decision curve analysis.

Net benefit at threshold probability p_t, with odds w = p_t / (1 - p_t):

    model:      TP/n - FP/n * w     (treat if score >= p_t)
    treat all:  prev - (1 - prev) * w
    treat none: 0

Model and treat-all curves are floored at 0.

Reference:
    Vickers, A. J., & Elkin, E. B. (2006). Decision curve analysis: a novel
        method for evaluating prediction models. Med Decis Making, 26(6).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from trialstats.core.constants import (
    DECISION_GRID_START,
    DECISION_GRID_STEP,
    DECISION_GRID_STOP,
)
from trialstats.diagnostic._common import DecisionCurveParams
from trialstats.diagnostic.design import ClassifierDesign


def default_grid() -> NDArray:
    """0.01, 0.03, ..., 0.99."""
    n = int(round((DECISION_GRID_STOP - DECISION_GRID_START) / DECISION_GRID_STEP)) + 1
    return np.linspace(DECISION_GRID_START, DECISION_GRID_STOP, n)


def net_benefit(design: ClassifierDesign, thresholds: NDArray) -> DecisionCurveParams:
    n = design.n
    prevalence = design.prevalence
    odds = thresholds / (1.0 - thresholds)

    if n == 0:
        nan_curve = np.full(thresholds.size, np.nan)
        return DecisionCurveParams(
            thresholds=thresholds,
            net_benefit_model=nan_curve,
            net_benefit_treat_all=nan_curve.copy(),
            net_benefit_treat_none=np.zeros(thresholds.size),
            prevalence=prevalence,
        )

    treated = design.score[:, None] >= thresholds[None, :]
    tp = np.sum(treated & design.label[:, None], axis=0)
    fp = np.sum(treated & ~design.label[:, None], axis=0)

    model = np.maximum(tp / n - fp / n * odds, 0.0)
    treat_all = np.maximum(prevalence - (1.0 - prevalence) * odds, 0.0)

    return DecisionCurveParams(
        thresholds=thresholds,
        net_benefit_model=model,
        net_benefit_treat_all=treat_all,
        net_benefit_treat_none=np.zeros(thresholds.size),
        prevalence=prevalence,
    )
