"""
Tests for responder_analysis(): responder rates, ARR and NNT.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from trialstats.core.exceptions import ValidationError
from trialstats.hypothesis import ResponderSolution, responder_analysis

TREATMENT = [-30.0, -25.0, -10.0, 0.0, -20.0]
CONTROL = [-5.0, -21.0, 10.0, 0.0, 5.0]


class TestResponderRates:

    def test_default_threshold(self):
        result = responder_analysis(TREATMENT, CONTROL)
        assert isinstance(result, ResponderSolution)
        assert result.threshold == -20.0
        # -20 itself counts as a response
        assert result.responders_treatment == 3
        assert result.responders_control == 1
        assert_allclose(result.rate_treatment, 0.6)
        assert_allclose(result.rate_control, 0.2)
        assert_allclose(result.absolute_risk_reduction, 0.4)

    def test_nnt_rounds_up(self):
        # 1 / 0.4 = 2.5 -> 3 patients
        assert responder_analysis(TREATMENT, CONTROL).nnt == 3.0

    def test_nnt_exact_reciprocal(self):
        # 0.3 - 0.2 falls just below 0.1 in floating point; 1/ARR must not round to 11
        result = responder_analysis([-30.0] * 3 + [0.0] * 7, [-30.0] * 2 + [0.0] * 8)
        assert_allclose(result.absolute_risk_reduction, 0.1)
        assert result.nnt == 10.0

    def test_nnt_unequal_arms(self):
        # 2/4 - 1/6 = 1/3 -> exactly 3 patients
        result = responder_analysis([-30.0] * 2 + [0.0] * 2, [-30.0] + [0.0] * 5)
        assert result.nnt == 3.0

    def test_custom_threshold(self):
        result = responder_analysis(TREATMENT, CONTROL, threshold=-50.0)
        assert result.responders_treatment == 0
        assert result.responders_control == 0


class TestNoBenefit:

    def test_equal_rates_infinite_nnt(self):
        result = responder_analysis(TREATMENT, TREATMENT)
        assert result.absolute_risk_reduction == 0.0
        assert math.isinf(result.nnt)

    def test_harm_infinite_nnt(self):
        result = responder_analysis(CONTROL, TREATMENT)
        assert result.absolute_risk_reduction < 0
        assert math.isinf(result.nnt)
        assert "NNT = Inf" in result.summary()


class TestDegenerate:

    def test_empty_arm(self):
        result = responder_analysis(TREATMENT, [])
        assert np.isnan(result.rate_control)
        assert np.isnan(result.absolute_risk_reduction)
        assert np.isnan(result.nnt)
        assert result.warnings

    def test_threshold_must_be_number(self):
        with pytest.raises(ValidationError):
            responder_analysis(TREATMENT, CONTROL, threshold="-20")
