"""
Tests for number_at_risk() and cumulative_events().
"""

import numpy as np
from numpy.testing import assert_array_equal

from trialstats.survival import CumulativeEvents, cumulative_events, number_at_risk


class TestNumberAtRisk:

    def test_counts_time_at_or_after(self):
        counts = number_at_risk([1, 2, 3, 4, 5], [0, 2.5, 5, 6])
        assert_array_equal(counts, [5, 3, 1, 0])

    def test_boundary_is_inclusive(self):
        assert_array_equal(number_at_risk([3.0, 3.0, 4.0], [3.0]), [3])

    def test_missing_times_ignored(self):
        assert_array_equal(number_at_risk([1.0, np.nan, 4.0], [0.0, 2.0]), [2, 1])

    def test_empty(self):
        assert_array_equal(number_at_risk([], [0.0, 1.0]), [0, 0])


class TestCumulativeEvents:

    def test_steps_at_sorted_event_times(self):
        result = cumulative_events([5, 1, 3, 4], [1, 1, 0, 1])
        assert isinstance(result, CumulativeEvents)
        assert_array_equal(result.time, [0.0, 1.0, 4.0, 5.0])
        assert_array_equal(result.count, [0, 1, 2, 3])
        assert result.total == 3

    def test_no_events(self):
        result = cumulative_events([2.0, 3.0], [0, 0])
        assert_array_equal(result.time, [0.0])
        assert result.total == 0
