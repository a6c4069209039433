"""
SurvivalDesign: immutable container for time-to-event data.

Wraps time, event indicator and optional group labels. Validates inputs at
construction time; all downstream code trusts clean data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from trialstats.core.exceptions import ValidationError
from trialstats.core.validation import (
    check_1d,
    check_array,
    check_binary,
    check_consistent_length,
    check_non_negative,
)


@dataclass(frozen=True)
class SurvivalDesign:
    """Immutable survival data container.

    Parameters
    ----------
    time : NDArray
        Time to event or censoring. Non-negative.
    event : NDArray
        Event indicator: 1 = event observed, 0 = right-censored at ``time``.
    group : NDArray or None
        Arm label per record, for two-arm summaries.
    n_dropped : int
        Records removed because time or event was missing.
    """

    time: NDArray
    event: NDArray
    group: NDArray | None
    n_dropped: int = 0

    @classmethod
    def for_survival(
        cls,
        time: ArrayLike,
        event: ArrayLike,
        *,
        group: ArrayLike | None = None,
    ) -> SurvivalDesign:
        """Create and validate survival data.

        Records whose time or event is missing (None/NaN) are dropped. An
        empty collection is valid.

        Parameters
        ----------
        time : array-like
            Time to event or censoring.
        event : array-like
            Event indicator (0/1 or False/True).
        group : array-like or None
            Optional arm labels.

        Returns
        -------
        SurvivalDesign

        Raises
        ------
        ValidationError
            If times are negative or infinite, event flags are not binary,
            or lengths differ.
        """
        time_arr = check_array(time, "time")
        event_arr = check_array(event, "event")
        check_1d(time_arr, "time")
        check_1d(event_arr, "event")
        check_consistent_length(time_arr, event_arr, names=("time", "event"))

        check_non_negative(time_arr, "time")
        if np.any(np.isinf(time_arr)):
            raise ValidationError("time must be finite")
        check_binary(event_arr, "event")

        group_arr = None
        if group is not None:
            group_arr = np.asarray(group, dtype=object).ravel()
            check_consistent_length(
                time_arr, group_arr, names=("time", "group"),
            )

        keep = ~(np.isnan(time_arr) | np.isnan(event_arr))
        n_dropped = int(np.sum(~keep))

        return cls(
            time=time_arr[keep],
            event=event_arr[keep],
            group=group_arr[keep] if group_arr is not None else None,
            n_dropped=n_dropped,
        )

    @property
    def n(self) -> int:
        """Number of observations."""
        return len(self.time)

    @property
    def n_events(self) -> int:
        """Number of observed events."""
        return int(np.sum(self.event))

    def arm_labels(self) -> tuple[Any, ...]:
        """Distinct group labels, sorted when the labels are orderable."""
        if self.group is None:
            raise ValidationError("group labels are required for arm comparisons")
        labels = list(dict.fromkeys(self.group.tolist()))
        try:
            return tuple(sorted(labels))
        except TypeError:
            return tuple(labels)

    def subset(self, label: Any) -> SurvivalDesign:
        """Records belonging to one arm."""
        if self.group is None:
            raise ValidationError("group labels are required for arm comparisons")
        mask = np.array([g == label for g in self.group.tolist()], dtype=bool)
        return SurvivalDesign(
            time=self.time[mask],
            event=self.event[mask],
            group=None,
            n_dropped=0,
        )
