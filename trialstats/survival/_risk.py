"""
Risk-table and event-count helpers for survival displays.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from trialstats.survival._common import CumulativeEvents


def at_risk_counts(time: NDArray, timepoints: NDArray) -> NDArray:
    """Number of records with time >= each timepoint."""
    sorted_time = np.sort(time)
    return (len(sorted_time) - np.searchsorted(sorted_time, timepoints, side='left')).astype(np.int64)


def cumulative_event_curve(time: NDArray, event: NDArray) -> CumulativeEvents:
    """One step per event, in time order, prefixed with (0, 0)."""
    event_times = np.sort(time[event == 1])
    return CumulativeEvents(
        time=np.concatenate(([0.0], event_times)),
        count=np.arange(event_times.size + 1, dtype=np.int64),
    )
