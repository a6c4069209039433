"""
TwoSampleDesign: paired-arm input for two-group comparisons.

Holds two independently filtered samples (e.g. Treatment vs Placebo).
Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from trialstats.descriptive.design import SampleDesign


@dataclass(frozen=True)
class TwoSampleDesign:
    """
    Design for two-group comparisons.

    Do not construct directly; use ``TwoSampleDesign.from_arrays``.
    """
    _x: SampleDesign
    _y: SampleDesign
    _data_name: str

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike | SampleDesign,
        y: ArrayLike | SampleDesign,
        *,
        x_name: str = "x",
        y_name: str = "y",
    ) -> TwoSampleDesign:
        """
        Build from two samples. Missing values are removed per sample.

        Parameters
        ----------
        x, y : array-like or SampleDesign
            Outcome values of group A and group B.
        x_name, y_name : str
            Labels used in error messages and summaries.
        """
        dx = x if isinstance(x, SampleDesign) else SampleDesign.from_array(x, name=x_name)
        dy = y if isinstance(y, SampleDesign) else SampleDesign.from_array(y, name=y_name)
        return cls(_x=dx, _y=dy, _data_name=f"{dx.name} and {dy.name}")

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x.values

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y.values

    @property
    def n_x(self) -> int:
        return self._x.n

    @property
    def n_y(self) -> int:
        return self._y.n

    @property
    def data_name(self) -> str:
        return self._data_name

    @property
    def either_empty(self) -> bool:
        """True when at least one group has no valid observations."""
        return self._x.is_empty or self._y.is_empty
