"""
Two-group comparison module.

Difference-of-means intervals, a Welch t-test reported with a coarse
three-bucket p-value, and responder-rate analysis.

Public API:
    mean_difference_ci(x, y)   - Difference of means with 95% CI
    t_test(x, y)               - Welch t-test (bucketed p-value)
    responder_analysis(x, y)   - Responder rates, ARR and NNT
"""

from trialstats.hypothesis.solvers import (
    mean_difference_ci,
    t_test,
    responder_analysis,
)
from trialstats.hypothesis.design import TwoSampleDesign
from trialstats.hypothesis._common import TTestParams, ResponderParams
from trialstats.hypothesis.solution import TTestSolution, ResponderSolution

__all__ = [
    "mean_difference_ci",
    "t_test",
    "responder_analysis",
    "TwoSampleDesign",
    "TTestParams",
    "ResponderParams",
    "TTestSolution",
    "ResponderSolution",
]
