"""
Tests for confusion_counts(), diagnostic_metrics() and threshold_sweep().
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from trialstats.core.exceptions import DimensionError, ValidationError
from trialstats.diagnostic import (
    ClassifierDesign,
    ConfusionCounts,
    DiagnosticSolution,
    confusion_counts,
    diagnostic_metrics,
    threshold_sweep,
)

LABEL = [1, 1, 1, 0, 0, 0, 0, 1]
SCORE = [0.9, 0.8, 0.3, 0.6, 0.2, 0.1, 0.4, 0.7]


class TestConfusionCounts:

    def test_default_threshold(self):
        counts = confusion_counts(LABEL, SCORE)
        assert counts == ConfusionCounts(tp=3, fp=1, tn=3, fn=1)
        assert counts.positives == 4
        assert counts.negatives == 4
        assert counts.as_matrix() == [[3, 1], [1, 3]]

    def test_score_equal_to_threshold_is_positive(self):
        counts = confusion_counts([1, 0], [0.5, 0.5], threshold=0.5)
        assert counts.tp == 1 and counts.fp == 1

    def test_single_score_bucket(self):
        # Every record scores 1; only one is disease-negative
        label = [True, True, True, True, False]
        counts = confusion_counts(label, [1.0] * 5)
        assert counts == ConfusionCounts(tp=4, fp=1, tn=0, fn=0)

    def test_accepts_bool_labels(self):
        counts = confusion_counts([True, False], [0.9, 0.1])
        assert counts == ConfusionCounts(tp=1, fp=0, tn=1, fn=0)


class TestDiagnosticMetrics:

    def test_balanced_example(self):
        result = diagnostic_metrics(LABEL, SCORE)
        assert isinstance(result, DiagnosticSolution)
        for value in (result.sensitivity, result.specificity, result.ppv,
                      result.npv, result.accuracy, result.f1):
            assert_allclose(value, 0.75)
        assert_allclose(result.youden_j, 0.5)

    def test_wald_interval(self):
        result = diagnostic_metrics(LABEL, SCORE)
        margin = 1.96 * math.sqrt(0.75 * 0.25 / 4)
        lower, upper = result.sensitivity_ci
        assert_allclose(lower, 0.75 - margin)
        # clamped at 1
        assert upper == 1.0

    def test_undefined_sensitivity_is_nan(self):
        result = diagnostic_metrics([0, 0, 0], [0.2, 0.7, 0.1])
        assert np.isnan(result.sensitivity)
        assert np.isnan(result.f1)
        assert np.isnan(result.sensitivity_ci[0])
        assert_allclose(result.specificity, 2 / 3)
        assert result.ppv == 0.0
        assert any("no positive cases" in w for w in result.warnings)

    def test_zero_is_distinct_from_undefined(self):
        # A positive exists but is missed: sensitivity is a real 0
        result = diagnostic_metrics([1, 0], [0.1, 0.2])
        assert result.sensitivity == 0.0
        # Nobody called positive: PPV undefined
        assert np.isnan(result.ppv)

    def test_empty_input(self):
        result = diagnostic_metrics([], [])
        assert result.counts.n == 0
        assert np.isnan(result.accuracy)

    def test_summary_marks_undefined(self):
        text = diagnostic_metrics([0, 0], [0.2, 0.7]).summary()
        assert "sensitivity" in text
        assert "NA" in text


class TestValidation:

    def test_threshold_out_of_range(self):
        with pytest.raises(ValidationError, match="threshold"):
            diagnostic_metrics(LABEL, SCORE, threshold=1.5)

    def test_non_binary_label(self):
        with pytest.raises(ValidationError, match="label"):
            diagnostic_metrics([0, 2], [0.1, 0.2])

    def test_score_outside_unit_interval(self):
        with pytest.raises(ValidationError, match="score"):
            diagnostic_metrics([0, 1], [0.1, 1.2])

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            diagnostic_metrics([0, 1, 1], [0.1, 0.2])

    def test_missing_records_dropped(self):
        design = ClassifierDesign.from_arrays([1, None, 0, 1], [0.9, 0.5, np.nan, 0.4])
        assert design.n == 2
        assert design.n_dropped == 2
        assert design.prevalence == 1.0


class TestThresholdSweep:

    def test_default_grid(self):
        rows = threshold_sweep(LABEL, SCORE)
        assert len(rows) == 19
        assert_allclose(rows[0].threshold, 0.05)
        assert_allclose(rows[-1].threshold, 0.95)

    def test_sensitivity_falls_as_threshold_rises(self, noisy_classifier):
        label, score = noisy_classifier
        rows = threshold_sweep(label, score, [0.2, 0.4, 0.6, 0.8])
        sens = [r.sensitivity for r in rows]
        spec = [r.specificity for r in rows]
        assert np.all(np.diff(sens) <= 0)
        assert np.all(np.diff(spec) >= 0)

    def test_design_reused(self):
        design = ClassifierDesign.from_arrays(LABEL, SCORE)
        rows = threshold_sweep(design, thresholds=[0.5])
        assert rows[0].counts == confusion_counts(design, threshold=0.5)

    def test_rejects_out_of_range(self):
        with pytest.raises(ValidationError):
            threshold_sweep(LABEL, SCORE, [0.5, 1.5])
