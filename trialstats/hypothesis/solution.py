"""
Solution types for two-group comparisons.

TTestSolution and ResponderSolution wrap Result envelopes and provide
text summaries for console use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np

from trialstats.core.result import Result
from trialstats.descriptive._common import CIResult
from trialstats.hypothesis._common import ResponderParams, TTestParams

if TYPE_CHECKING:
    from trialstats.hypothesis.design import TwoSampleDesign


@dataclass
class TTestSolution:
    """
    User-facing Welch t-test results.

    ``p_value`` is the three-bucket label; ``p_value_exact`` is only set
    when the test was run with ``exact=True``.
    """
    _result: Result[TTestParams]
    _design: 'TwoSampleDesign | None'

    @property
    def statistic(self) -> float:
        """Welch t statistic."""
        return self._result.params.statistic

    @property
    def df(self) -> float:
        """Welch-Satterthwaite degrees of freedom, floored."""
        return self._result.params.df

    @property
    def df_welch(self) -> float:
        return self._result.params.df_welch

    @property
    def p_value(self) -> str:
        """'>0.05', '<0.05' or '<0.01'."""
        return self._result.params.p_value

    @property
    def p_value_exact(self) -> float | None:
        return self._result.params.p_value_exact

    @property
    def mean_x(self) -> float:
        return self._result.params.mean_x

    @property
    def mean_y(self) -> float:
        return self._result.params.mean_y

    @property
    def mean_diff(self) -> float:
        return self._result.params.difference.estimate

    @property
    def conf_int(self) -> CIResult:
        """Difference of means with 95% CI."""
        return self._result.params.difference

    @property
    def se(self) -> float:
        return self._result.params.difference.se

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def significant(self) -> bool:
        """True when the bucketed p-value is below 0.05."""
        return self._result.params.p_value != ">0.05"

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """
        Format in the familiar htest layout, e.g.::

            Welch Two Sample t-test (normal-threshold p-value)

            data:  Treatment and Placebo
            t = -2.7031, df = 37, p-value <0.01
            95 percent confidence interval:
             -8.41  -1.33
            sample estimates:
                 mean of x      mean of y
                     -12.4          -7.53
        """
        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]

        stat_line = f"t = {p.statistic:.5g}, df = {_format_df(p.df)}, p-value {p.p_value}"
        if p.p_value_exact is not None:
            stat_line += f" (exact {p.p_value_exact:.4g})"
        lines.append(stat_line)

        lines.append("95 percent confidence interval:")
        lines.append(f" {p.difference.lower:.7g}  {p.difference.upper:.7g}")
        lines.append("sample estimates:")
        lines.append(f"{'mean of x':>14s} {'mean of y':>14s}")
        lines.append(f"{p.mean_x:14.7g} {p.mean_y:14.7g}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TTestSolution(t={p.statistic:.4g}, df={_format_df(p.df)}, "
            f"p_value={p.p_value!r})"
        )


def _format_df(df: float) -> str:
    if np.isnan(df):
        return "NA"
    return f"{df:.0f}"


class ResponderSolution:
    """Responder analysis solution (rates, ARR, NNT)."""

    __slots__ = ('_result',)

    def __init__(self, _result: Result[ResponderParams]) -> None:
        self._result = _result

    @property
    def responders_treatment(self) -> int:
        return self._result.params.responders_treatment

    @property
    def responders_control(self) -> int:
        return self._result.params.responders_control

    @property
    def rate_treatment(self) -> float:
        return self._result.params.rate_treatment

    @property
    def rate_control(self) -> float:
        return self._result.params.rate_control

    @property
    def absolute_risk_reduction(self) -> float:
        return self._result.params.absolute_risk_reduction

    @property
    def nnt(self) -> float:
        return self._result.params.nnt

    @property
    def threshold(self) -> float:
        return self._result.params.threshold

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        p = self._result.params
        nnt = "NA" if np.isnan(p.nnt) else ("Inf" if np.isinf(p.nnt) else f"{p.nnt:.0f}")
        lines = [
            f"Responders (outcome <= {p.threshold:g}):",
            f"  treatment: {p.responders_treatment}/{p.n_treatment} ({p.rate_treatment:.1%})",
            f"  control:   {p.responders_control}/{p.n_control} ({p.rate_control:.1%})",
            f"  ARR = {p.absolute_risk_reduction:.4g}, NNT = {nnt}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"ResponderSolution(ARR={p.absolute_risk_reduction:.4g}, "
            f"NNT={p.nnt})"
        )
