"""
Tests for the timing and tolerance utilities in core/compute.
"""

import pytest

from trialstats.core.compute import Timer, timed
from trialstats.core.compute.tolerances import ACCUMULATED, EXACT


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('sweep'):
            pass
        with timer.section('sweep'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'sweep'}
        assert result['sweep'] >= 0.0

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(10))
        assert timer.result()['total_seconds'] >= 0.0


class TestTolerances:

    def test_exact_is_tighter(self):
        assert EXACT.rtol < ACCUMULATED.rtol
