"""
Tests for curve read-outs: restricted_mean_survival_time(),
median_survival_time(), survival_at() and rmst_difference().

Scenario curve: events at 5 and 12, censoring at 10, giving points
(0, 1), (5, 2/3), (10, 2/3), (12, 0).
"""

import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose

from trialstats.core.compute.tolerances import ACCUMULATED
from trialstats.core.exceptions import ValidationError
from trialstats.survival import (
    KMPoint,
    MedianSurvival,
    kaplan_meier,
    median_survival_time,
    restricted_mean_survival_time,
    rmst_difference,
    survival_at,
)


@pytest.fixture
def scenario_curve():
    return kaplan_meier([5.0, 10.0, 12.0], [1, 0, 1])


class TestRMST:

    def test_zero_horizon(self, scenario_curve):
        assert restricted_mean_survival_time(scenario_curve, 0) == 0.0
        assert restricted_mean_survival_time(scenario_curve, -3.0) == 0.0

    def test_full_curve(self, scenario_curve):
        # 5 * (1 + 2/3) / 2 + 5 * 2/3 + 2 * (2/3 + 0) / 2
        expected = 25 / 6 + 10 / 3 + 2 / 3
        assert_allclose(
            restricted_mean_survival_time(scenario_curve, 12.0),
            expected,
            rtol=ACCUMULATED.rtol,
        )

    def test_clipped_interval(self, scenario_curve):
        # Interval (5, 10] clipped to (5, 7]
        expected = 25 / 6 + 2 * (2 / 3 + 2 / 3) / 2
        assert_allclose(
            restricted_mean_survival_time(scenario_curve, 7.0),
            expected,
            rtol=ACCUMULATED.rtol,
        )

    def test_flat_extrapolation_warns(self):
        curve = kaplan_meier([1.0, 2.0, 3.0], [0, 0, 0])
        with pytest.warns(RuntimeWarning, match="extrapolated flat"):
            value = restricted_mean_survival_time(curve, 10.0)
        assert_allclose(value, 10.0, rtol=ACCUMULATED.rtol)

    @pytest.mark.filterwarnings("ignore::RuntimeWarning")
    def test_non_decreasing_in_horizon(self, scenario_curve):
        taus = np.linspace(0.0, 20.0, 81)
        values = [restricted_mean_survival_time(scenario_curve, t) for t in taus]
        assert np.all(np.diff(values) >= -1e-12)

    def test_accepts_point_sequence(self, scenario_curve):
        points = list(scenario_curve.points)
        assert_allclose(
            restricted_mean_survival_time(points, 12.0),
            restricted_mean_survival_time(scenario_curve, 12.0),
        )

    def test_rejects_unordered_points(self):
        points = [
            KMPoint(time=0.0, survival=1.0, lower=1.0, upper=1.0, at_risk=2, events=0),
            KMPoint(time=5.0, survival=0.5, lower=0.1, upper=0.9, at_risk=2, events=1),
            KMPoint(time=3.0, survival=0.5, lower=0.1, upper=0.9, at_risk=1, events=0),
        ]
        with pytest.raises(ValidationError, match="strictly increasing"):
            restricted_mean_survival_time(points, 5.0)

    def test_rejects_non_curve(self):
        with pytest.raises(ValidationError, match="curve"):
            restricted_mean_survival_time([1.0, 2.0], 5.0)


class TestMedianSurvival:

    def test_midpoint_of_crossing(self, scenario_curve):
        median = median_survival_time(scenario_curve)
        assert median == MedianSurvival(time=11.0, reached=True)

    def test_basic_curve(self):
        curve = kaplan_meier([1, 2, 3, 4, 5, 6], [1, 0, 1, 0, 1, 1])
        # First S < 0.5 is 5/16 at t = 5; previous point is t = 4
        assert median_survival_time(curve).time == 4.5

    def test_exactly_half_is_not_below(self):
        curve = kaplan_meier([2.0, 4.0], [1, 0])
        median = median_survival_time(curve)
        assert not median.reached
        assert median.time == 4.0

    def test_not_reached(self):
        median = median_survival_time(kaplan_meier([3.0, 8.0], [0, 0]))
        assert median == MedianSurvival(time=8.0, reached=False)

    def test_solution_property_matches(self, scenario_curve):
        assert scenario_curve.median_survival == median_survival_time(scenario_curve)


class TestSurvivalAt:

    @pytest.mark.parametrize("t, expected", [
        (-1.0, 1.0),
        (0.0, 1.0),
        (4.9, 1.0),
        (5.0, 2 / 3),
        (11.0, 2 / 3),
        (12.0, 0.0),
        (100.0, 0.0),
    ])
    def test_step_value(self, scenario_curve, t, expected):
        assert_allclose(survival_at(scenario_curve, t), expected)


class TestRMSTDifference:

    def test_difference_matches_single_arm_values(self, two_arm_survival):
        time, event, group = two_arm_survival
        result = rmst_difference(time, event, group, 10.0)

        assert result.arms == ("Placebo", "Treatment")
        placebo = kaplan_meier(time[group == "Placebo"], event[group == "Placebo"])
        treatment = kaplan_meier(time[group == "Treatment"], event[group == "Treatment"])
        assert_allclose(result.rmst_a, restricted_mean_survival_time(placebo, 10.0))
        assert_allclose(result.rmst_b, restricted_mean_survival_time(treatment, 10.0))
        assert_allclose(result.difference, result.rmst_a - result.rmst_b)
        assert result.difference < 0

    def test_explicit_arm_order(self, two_arm_survival):
        time, event, group = two_arm_survival
        forward = rmst_difference(time, event, group, 10.0)
        reverse = rmst_difference(time, event, group, 10.0, arms=("Treatment", "Placebo"))
        assert_allclose(reverse.difference, -forward.difference)

    def test_warns_for_arm_ending_before_horizon(self, two_arm_survival):
        time, event, group = two_arm_survival
        # Placebo ends at 11, Treatment at 12
        with pytest.warns(RuntimeWarning, match="arm 'Placebo'.*extrapolated flat") as record:
            result = rmst_difference(time, event, group, 11.5)
        assert len(record) == 1
        assert np.isfinite(result.difference)

    def test_no_warning_within_follow_up(self, two_arm_survival):
        time, event, group = two_arm_survival
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            rmst_difference(time, event, group, 10.0)
