"""
Public API for descriptive statistics.

    mean(x)                    -> float
    sd(x)                      -> float
    median(x)                  -> float
    confidence_interval_95(x)  -> CIResult
    summarize_by_group(x, g)   -> dict[label, GroupSummary]

All functions accept any 1D array-like (or a prebuilt SampleDesign),
drop missing values, and return neutral zeros on empty input.
"""

from __future__ import annotations

from typing import Any, Hashable

import numpy as np
from numpy.typing import ArrayLike

from trialstats.core.validation import check_array, check_1d, check_consistent_length
from trialstats.descriptive.design import SampleDesign
from trialstats.descriptive._common import CIResult, GroupSummary
from trialstats.descriptive._moments import (
    mean_ci95,
    sample_mean,
    sample_median,
    sample_sd,
)


def _ensure_design(x: ArrayLike | SampleDesign, name: str = "x") -> SampleDesign:
    if isinstance(x, SampleDesign):
        return x
    return SampleDesign.from_array(x, name=name)


def mean(x: ArrayLike | SampleDesign) -> float:
    """Arithmetic mean of the non-missing values. 0.0 for an empty sample."""
    return sample_mean(_ensure_design(x).values)


def sd(x: ArrayLike | SampleDesign) -> float:
    """Sample standard deviation (divides by n - 1). 0.0 when n <= 1."""
    return sample_sd(_ensure_design(x).values)


def median(x: ArrayLike | SampleDesign) -> float:
    """Sample median. 0.0 for an empty sample."""
    return sample_median(_ensure_design(x).values)


def confidence_interval_95(x: ArrayLike | SampleDesign) -> CIResult:
    """
    95% confidence interval for the mean.

    Parameters
    ----------
    x : array-like or SampleDesign
        Observations; None/NaN are ignored.

    Returns
    -------
    CIResult
        ``estimate`` is the mean, ``se = sd / sqrt(n)``, bounds are
        ``mean -/+ 1.96 * se``. All fields are 0.0 for an empty sample.
    """
    return mean_ci95(_ensure_design(x).values)


def summarize_by_group(
    values: ArrayLike,
    groups: ArrayLike,
) -> dict[Hashable, GroupSummary]:
    """
    Descriptive summary of ``values`` within each level of ``groups``.

    Parameters
    ----------
    values : array-like
        Outcome per record; None/NaN are treated as missing.
    groups : array-like
        Group label per record (same length as ``values``).

    Returns
    -------
    dict
        Maps each group label, in order of first appearance, to a
        GroupSummary.
    """
    arr = check_array(values, "values")
    check_1d(arr, "values")
    labels = np.asarray(groups, dtype=object).ravel()
    check_consistent_length(arr, labels, names=("values", "groups"))

    summaries: dict[Hashable, GroupSummary] = {}
    for label in dict.fromkeys(labels.tolist()):
        in_group = np.array([g == label for g in labels.tolist()], dtype=bool)
        design = SampleDesign.from_array(arr[in_group], name=str(label))
        summaries[label] = _group_summary(design, n_records=int(in_group.sum()))
    return summaries


def _group_summary(design: SampleDesign, n_records: int) -> GroupSummary:
    x = design.values
    ci = mean_ci95(x)
    return GroupSummary(
        n=n_records,
        n_valid=design.n,
        mean=ci.estimate,
        median=sample_median(x),
        sd=sample_sd(x),
        se=ci.se,
        ci_lower=ci.lower,
        ci_upper=ci.upper,
        min=float(np.min(x)) if design.n > 0 else 0.0,
        max=float(np.max(x)) if design.n > 0 else 0.0,
    )
