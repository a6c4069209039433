"""
Tests for mean, sd, median, confidence_interval_95 and summarize_by_group.

Reference values are hand-computed.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from trialstats.core.compute.tolerances import EXACT
from trialstats.core.exceptions import DimensionError, ValidationError
from trialstats.descriptive import (
    CIResult,
    SampleDesign,
    confidence_interval_95,
    mean,
    median,
    sd,
    summarize_by_group,
)

SAMPLE_A = [10, 20, 30]
SAMPLE_B = [15, 25]


class TestLocation:
    """Means and medians of small samples."""

    def test_scenario_means_and_median(self):
        assert mean(SAMPLE_A) == 20.0
        assert median(SAMPLE_A) == 20.0
        assert mean(SAMPLE_B) == 20.0

    def test_even_median_averages_middle_pair(self):
        assert median([4, 1, 3, 2]) == 2.5

    def test_unsorted_input(self):
        assert median([30, 10, 20]) == 20.0

    def test_numpy_and_tuple_inputs(self):
        assert mean(np.array([1.0, 2.0, 3.0])) == 2.0
        assert mean((1, 2, 3)) == 2.0


class TestSpread:

    def test_bessel_correction(self):
        # var = ((-10)^2 + 0 + 10^2) / 2 = 100
        assert_allclose(sd(SAMPLE_A), 10.0, rtol=EXACT.rtol)

    def test_single_value_sd_zero(self):
        assert sd([7.0]) == 0.0

    def test_empty_sd_zero(self):
        assert sd([]) == 0.0


class TestMissing:
    """None, NaN and infinities are dropped before computing."""

    def test_none_filtered(self):
        assert mean([10, None, 30]) == 20.0
        assert median([None, 1, 3]) == 2.0

    def test_nan_and_inf_filtered(self):
        assert mean([1.0, np.nan, 3.0, np.inf, -np.inf]) == 2.0

    def test_design_counts_missing(self):
        design = SampleDesign.from_array([1.0, None, np.nan, 4.0])
        assert design.n == 2
        assert design.n_missing == 2
        assert not design.is_empty

    def test_all_missing_is_empty(self):
        assert mean([None, np.nan]) == 0.0
        assert SampleDesign.from_array([None]).is_empty


class TestEmptyInput:
    """Empty samples give neutral zeros, never errors."""

    def test_mean_empty(self):
        assert mean([]) == 0.0

    def test_median_empty(self):
        assert median([]) == 0.0

    def test_ci_empty_all_zero(self):
        ci = confidence_interval_95([])
        assert ci == CIResult(estimate=0.0, lower=0.0, upper=0.0, se=0.0)


class TestConfidenceInterval:

    def test_normal_approximation(self):
        ci = confidence_interval_95(SAMPLE_A)
        se = 10.0 / math.sqrt(3)
        assert_allclose(ci.estimate, 20.0)
        assert_allclose(ci.se, se, rtol=EXACT.rtol)
        assert_allclose(ci.lower, 20.0 - 1.96 * se, rtol=EXACT.rtol)
        assert_allclose(ci.upper, 20.0 + 1.96 * se, rtol=EXACT.rtol)
        assert_allclose(ci.margin, 1.96 * se, rtol=EXACT.rtol)

    def test_single_observation_degenerate_interval(self):
        ci = confidence_interval_95([5.0])
        assert ci.lower == ci.estimate == ci.upper == 5.0

    def test_bounds_bracket_mean(self, rng):
        for _ in range(20):
            x = rng.normal(rng.uniform(-50, 50), rng.uniform(0.1, 20), rng.integers(1, 40))
            ci = confidence_interval_95(x)
            assert ci.lower <= ci.estimate <= ci.upper
            assert ci.contains(ci.estimate)


class TestInputErrors:
    """Malformed input types are contract violations."""

    def test_strings_rejected(self):
        with pytest.raises(ValidationError):
            mean(["a", "b"])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            mean(np.ones((2, 3)))


class TestSummarizeByGroup:

    def test_groups_in_first_appearance_order(self):
        values = [10, 1, 20, 2, 30, 3]
        groups = ["Treatment", "Placebo"] * 3
        result = summarize_by_group(values, groups)

        assert list(result) == ["Treatment", "Placebo"]
        trt = result["Treatment"]
        assert trt.n == 3 and trt.n_valid == 3
        assert trt.mean == 20.0 and trt.median == 20.0
        assert trt.min == 10.0 and trt.max == 30.0
        assert_allclose(trt.sd, 10.0, rtol=EXACT.rtol)
        assert trt.ci_lower < trt.mean < trt.ci_upper

        pbo = result["Placebo"]
        assert pbo.mean == 2.0
        assert_allclose(pbo.se, 1.0 / math.sqrt(3), rtol=EXACT.rtol)

    def test_missing_values_counted(self):
        result = summarize_by_group([1.0, None, 3.0, None], ["A", "A", "A", "B"])
        assert result["A"].n == 3
        assert result["A"].n_valid == 2
        assert result["A"].mean == 2.0
        b = result["B"]
        assert b.n == 1 and b.n_valid == 0
        assert b.mean == 0.0 and b.min == 0.0 and b.max == 0.0

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            summarize_by_group([1, 2, 3], ["A", "B"])
