"""
Shared compute infrastructure for trialstats.

Submodules:
    timing: Execution timing utilities
    tolerances: Comparison tolerances for validation
"""

from trialstats.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
