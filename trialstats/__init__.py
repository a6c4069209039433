"""
trialstats: biostatistics for clinical-trial dashboards.

Pure, stateless computations over in-memory trial data, returning
structured results for a separate rendering layer.

Submodules:
    descriptive: Means, medians, standard deviations, 95% CIs
    hypothesis: Two-group comparison and responder analysis
    survival: Kaplan-Meier, RMST, median survival, event-rate ratio
    diagnostic: Confusion metrics, ROC, PR, calibration, decision curves
"""

__version__ = "0.1.0"

from trialstats import descriptive
from trialstats import hypothesis
from trialstats import survival
from trialstats import diagnostic

__all__ = [
    "__version__",
    "descriptive",
    "hypothesis",
    "survival",
    "diagnostic",
]
