"""
Descriptive statistics module.

Location, spread and normal-approximation confidence intervals for a
single sample, with missing values filtered out.

Public API:
    mean(x)                    - Arithmetic mean (0 for empty input)
    sd(x)                      - Sample standard deviation (Bessel-corrected)
    median(x)                  - Median
    confidence_interval_95(x)  - Mean with 95% CI (z = 1.96)
    summarize_by_group(x, g)   - Per-group summary table
"""

from trialstats.descriptive.design import SampleDesign
from trialstats.descriptive._common import CIResult, GroupSummary
from trialstats.descriptive.solvers import (
    mean,
    sd,
    median,
    confidence_interval_95,
    summarize_by_group,
)

__all__ = [
    "mean",
    "sd",
    "median",
    "confidence_interval_95",
    "summarize_by_group",
    "SampleDesign",
    "CIResult",
    "GroupSummary",
]
