"""
SampleDesign: data wrapper for one-group descriptive statistics.

Wraps a single sample (one treatment arm, one timepoint) after missing
values have been removed. Follows the trialstats Design pattern: validate
once at construction, then every downstream routine trusts clean data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from trialstats.core.validation import check_array, check_1d


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for a single sample of observations.

    Missing observations (None, NaN, +/-inf) are dropped. An empty sample is
    valid and yields neutral (zero) statistics downstream.

    Construction:
        SampleDesign.from_array([10, 20, None, 30])
    """
    _values: NDArray[np.floating[Any]]
    _n_missing: int
    _name: str

    @classmethod
    def from_array(cls, values: ArrayLike, *, name: str = "x") -> SampleDesign:
        """
        Build SampleDesign from an array-like of observations.

        Parameters
        ----------
        values : array-like
            1D sequence of numbers. Can be a list, numpy array, or pandas
            Series (anything with ``.values`` is unwrapped).
        name : str
            Label used in error messages and summaries.
        """
        if hasattr(values, 'values') and not isinstance(values, dict):
            values = values.values
        arr = check_array(values, name)
        check_1d(arr, name)

        finite = np.isfinite(arr)
        clean = arr[finite]
        return cls(_values=clean, _n_missing=int(arr.size - clean.size), _name=name)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Observations with missing values removed."""
        return self._values

    @property
    def n(self) -> int:
        """Number of valid observations."""
        return int(self._values.size)

    @property
    def n_missing(self) -> int:
        """Number of observations dropped as missing."""
        return self._n_missing

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_empty(self) -> bool:
        return self._values.size == 0
