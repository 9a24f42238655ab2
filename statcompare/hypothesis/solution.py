"""
Hypothesis test solution types.

TTestSolution wraps Result[TTestParams] and renders the t-test card text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from statcompare.core.result import Result
from statcompare.core.settings import DEFAULT_SETTINGS
from statcompare.core.formatting import (
    format_pvalue,
    format_statistic,
    is_significant,
    round_statistic,
)
from statcompare.hypothesis._common import TTestParams


@dataclass
class TTestSolution:
    """
    User-facing two-sample t-test result.

    Produced by t_test() and t_test_from_samples().
    """
    _result: Result[TTestParams]

    @property
    def statistic(self) -> float:
        """t statistic, full precision."""
        return self._result.params.statistic

    @property
    def t(self) -> float:
        return self._result.params.statistic

    @property
    def df(self) -> int:
        return self._result.params.df

    @property
    def mean_diff(self) -> float:
        return self._result.params.mean_diff

    @property
    def std_error(self) -> float:
        return self._result.params.std_error

    @property
    def p_value(self) -> float | None:
        return self._result.params.p_value

    @property
    def labels(self) -> tuple[str, str]:
        return self._result.params.labels

    @property
    def comparison(self) -> str:
        """'<label1> vs <label2>'."""
        a, b = self._result.params.labels
        return f"{a} vs {b}"

    @property
    def params(self) -> TTestParams:
        return self._result.params

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def rounded(self, decimals: int | None = None) -> dict[str, Any]:
        return {
            't': round_statistic(self.statistic, decimals),
            'df': self.df,
            'p_value': self.p_value,
        }

    def interpretation(self, alpha: float | None = None) -> str:
        """Plain-language reading of the p-value."""
        p = self.p_value
        if p is None:
            return "No p-value available."
        if alpha is None:
            alpha = DEFAULT_SETTINGS.significance_level
        if is_significant(p, alpha):
            bound = "< 0.001" if p < 0.001 else f"= {format_pvalue(p)}"
            return f"Statistically significant difference detected (p {bound})."
        return f"No statistically significant difference (p >= {alpha:g})."

    def summary(self, decimals: int | None = None) -> str:
        p = self._result.params
        lines = [
            "Independent Two-Sample t-test",
            "=" * 50,
            f"Comparison: {self.comparison}",
            f"t-statistic: {format_statistic(p.statistic, decimals)}",
            f"Degrees of freedom: {p.df}",
            f"p-value: {format_pvalue(p.p_value)}",
        ]
        if p.p_value is not None:
            lines.append("")
            lines.append(self.interpretation())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"TTestSolution(t={self.statistic:.4g}, df={self.df})"
