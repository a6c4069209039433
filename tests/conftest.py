"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def two_arm_survival():
    """Small two-arm trial: Treatment has fewer and later events."""
    time = np.array([2, 4, 6, 8, 10, 12, 1, 3, 5, 7, 9, 11], dtype=np.float64)
    event = np.array([0, 1, 0, 1, 0, 0, 1, 1, 1, 0, 1, 1], dtype=np.float64)
    group = np.array(["Treatment"] * 6 + ["Placebo"] * 6, dtype=object)
    return time, event, group


@pytest.fixture
def noisy_classifier(rng):
    """Scores informative of the label, with overlap between classes."""
    n = 200
    label = rng.random(n) < 0.3
    score = np.clip(0.3 + 0.35 * label + rng.normal(0.0, 0.15, n), 0.0, 1.0)
    return label, score
