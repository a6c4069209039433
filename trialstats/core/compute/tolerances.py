"""
Tolerance tiers for numerical validation.

Defines precision expectations when comparing trialstats output against
hand-derived reference values:
- EXACT: closed-form arithmetic (means, KM products, counts ratios)
- ACCUMULATED: sums over many terms (AUC, AP, RMST, Greenwood variance)

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='exact',
    description='Closed-form arithmetic on a handful of values',
)

ACCUMULATED = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='accumulated',
    description='Running sums over curve points',
)
