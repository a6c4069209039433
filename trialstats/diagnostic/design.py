"""
ClassifierDesign: labelled predicted probabilities for diagnostic accuracy.

Each record pairs a true disease status with a predicted probability.
Validates inputs at construction time; all downstream code trusts clean
data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from trialstats.core.validation import (
    check_1d,
    check_array,
    check_binary,
    check_consistent_length,
    check_unit_interval,
)


@dataclass(frozen=True)
class ClassifierDesign:
    """Immutable classifier output container.

    Parameters
    ----------
    label : NDArray[bool]
        True = disease positive.
    score : NDArray[float]
        Predicted probability of being positive, in [0, 1].
    n_dropped : int
        Records removed because label or score was missing.
    """

    label: NDArray[np.bool_]
    score: NDArray[np.floating[Any]]
    n_dropped: int = 0

    @classmethod
    def from_arrays(cls, label: ArrayLike, score: ArrayLike) -> ClassifierDesign:
        """Create and validate classifier data.

        Parameters
        ----------
        label : array-like
            True status (0/1 or False/True). Missing entries drop the record.
        score : array-like
            Predicted probability in [0, 1]. Missing entries drop the record.

        Raises
        ------
        ValidationError
            Non-binary labels, scores outside [0, 1], or length mismatch.
        """
        label_arr = check_array(label, "label")
        score_arr = check_array(score, "score")
        check_1d(label_arr, "label")
        check_1d(score_arr, "score")
        check_consistent_length(label_arr, score_arr, names=("label", "score"))
        check_binary(label_arr, "label")
        check_unit_interval(score_arr, "score")

        keep = ~(np.isnan(label_arr) | np.isnan(score_arr))
        return cls(
            label=label_arr[keep] == 1.0,
            score=score_arr[keep],
            n_dropped=int(np.sum(~keep)),
        )

    @property
    def n(self) -> int:
        return len(self.label)

    @property
    def n_positive(self) -> int:
        return int(np.sum(self.label))

    @property
    def n_negative(self) -> int:
        return self.n - self.n_positive

    @property
    def prevalence(self) -> float:
        """Fraction of positives; NaN for an empty design."""
        if self.n == 0:
            return float('nan')
        return self.n_positive / self.n
