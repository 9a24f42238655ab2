"""
User-facing ANOVA solution types.

Each solution wraps a Result[Params] and provides convenient accessors,
the ANOVA table, and formatted summary output.
"""

from dataclasses import dataclass
from typing import Any

from statcompare.core.result import Result
from statcompare.core.sentinels import Statistic
from statcompare.core.settings import DEFAULT_SETTINGS
from statcompare.core.formatting import (
    format_pvalue,
    format_statistic,
    is_significant,
    round_statistic,
)
from statcompare.anova._common import (
    AnovaTableRow,
    OneWayAnovaParams,
    TwoWayAnovaParams,
)


# =====================================================================
# OneWayAnovaSolution
# =====================================================================


@dataclass
class OneWayAnovaSolution:
    """
    User-facing result for one-way ANOVA.

    Produced by anova_oneway().
    """
    _result: Result[OneWayAnovaParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table: Between Groups, Within Groups, Total."""
        return self._result.params.table

    @property
    def f_value(self) -> Statistic:
        return self._result.params.f_value

    @property
    def p_value(self) -> float | None:
        return self._result.params.p_value

    @property
    def ss_between(self) -> float:
        return self._result.params.ss_between

    @property
    def ss_within(self) -> float:
        return self._result.params.ss_within

    @property
    def ss_total(self) -> float:
        return self._result.params.ss_total

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def df_total(self) -> int:
        return self._result.params.df_total

    @property
    def ms_between(self) -> float:
        return self._result.params.ms_between

    @property
    def ms_within(self) -> float:
        return self._result.params.ms_within

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def labels(self) -> tuple[str, ...]:
        """Group labels in input order. Labels may repeat."""
        return self._result.params.labels

    @property
    def group_means(self) -> tuple[float, ...]:
        """Group means, aligned with labels."""
        return self._result.params.group_means

    @property
    def group_sizes(self) -> tuple[int, ...]:
        return self._result.params.group_sizes

    @property
    def params(self) -> OneWayAnovaParams:
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
        p = self._result.params
        return {
            'F': round_statistic(p.f_value, decimals),
            'ss_between': round_statistic(p.ss_between, decimals),
            'ss_within': round_statistic(p.ss_within, decimals),
            'ss_total': round_statistic(p.ss_total, decimals),
            'ms_between': round_statistic(p.ms_between, decimals),
            'ms_within': round_statistic(p.ms_within, decimals),
            'df_between': p.df_between,
            'df_within': p.df_within,
            'df_total': p.df_total,
            'p_value': p.p_value,
        }

    def interpretation(self, alpha: float | None = None) -> str:
        p = self.p_value
        if p is None:
            return "No p-value available."
        if alpha is None:
            alpha = DEFAULT_SETTINGS.significance_level
        if is_significant(p, alpha):
            return (
                f"There is a statistically significant difference between at "
                f"least two groups (p {_pvalue_relation(p)}). "
                f"Post-hoc tests recommended."
            )
        return f"No statistically significant difference between groups (p >= {alpha:g})."

    def summary(self, decimals: int | None = None) -> str:
        """ANOVA summary table."""
        lines = [
            "One-Way Analysis of Variance",
            "=" * 72,
            f"Groups: {self.df_between + 1}    Observations: {self.df_total + 1}",
            "",
        ]
        lines.extend(_format_table(self.table, decimals))
        if self.p_value is not None:
            lines.append("")
            lines.append(self.interpretation())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"OneWayAnovaSolution(F={format_statistic(self.f_value, 4)}, "
            f"df=({self.df_between}, {self.df_within}))"
        )


# =====================================================================
# TwoWayAnovaSolution
# =====================================================================


@dataclass
class TwoWayAnovaSolution:
    """
    User-facing result for two-way ANOVA (main effects only).

    Produced by anova_twoway(). The A:B interaction is not estimated.
    """
    _result: Result[TwoWayAnovaParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table: Factor A, Factor B, Error."""
        return self._result.params.table

    @property
    def f_a(self) -> Statistic:
        return self._result.params.f_a

    @property
    def f_b(self) -> Statistic:
        return self._result.params.f_b

    @property
    def p_a(self) -> float | None:
        return self._result.params.p_a

    @property
    def p_b(self) -> float | None:
        return self._result.params.p_b

    @property
    def df_a(self) -> int:
        return self._result.params.df_a

    @property
    def df_b(self) -> int:
        return self._result.params.df_b

    @property
    def df_error(self) -> int:
        return self._result.params.df_error

    @property
    def ms_a(self) -> float:
        return self._result.params.ms_a

    @property
    def ms_b(self) -> float:
        return self._result.params.ms_b

    @property
    def ms_error(self) -> float:
        return self._result.params.ms_error

    @property
    def levels_a(self) -> tuple[str, ...]:
        return self._result.params.levels_a

    @property
    def levels_b(self) -> tuple[str, ...]:
        return self._result.params.levels_b

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def params(self) -> TwoWayAnovaParams:
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
        p = self._result.params
        return {
            'F_A': round_statistic(p.f_a, decimals),
            'F_B': round_statistic(p.f_b, decimals),
            'ms_a': round_statistic(p.ms_a, decimals),
            'ms_b': round_statistic(p.ms_b, decimals),
            'ms_error': round_statistic(p.ms_error, decimals),
            'df_a': p.df_a,
            'df_b': p.df_b,
            'df_error': p.df_error,
            'p_a': p.p_a,
            'p_b': p.p_b,
        }

    def interpretation(self, alpha: float | None = None) -> str:
        """One line per factor reading its p-value."""
        if self.p_a is None and self.p_b is None:
            return "No p-value available."
        if alpha is None:
            alpha = DEFAULT_SETTINGS.significance_level
        lines = []
        for factor, p in (('A', self.p_a), ('B', self.p_b)):
            if p is None:
                lines.append(f"Factor {factor}: no p-value available.")
            elif is_significant(p, alpha):
                lines.append(
                    f"Factor {factor}: statistically significant main effect "
                    f"(p {_pvalue_relation(p)})."
                )
            else:
                lines.append(
                    f"Factor {factor}: no statistically significant main effect "
                    f"(p >= {alpha:g})."
                )
        return "\n".join(lines)

    def summary(self, decimals: int | None = None) -> str:
        p = self._result.params
        lines = [
            "Two-Way Analysis of Variance (main effects only)",
            "=" * 72,
            f"Factor A levels: {', '.join(p.levels_a)}",
            f"Factor B levels: {', '.join(p.levels_b)}",
            f"Observations per cell: {p.n_per_cell}",
            "",
        ]
        lines.extend(_format_table(self.table, decimals))
        lines.append("Interaction term not estimated.")
        if p.p_a is not None or p.p_b is not None:
            lines.append("")
            lines.append(self.interpretation())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TwoWayAnovaSolution(F_A={format_statistic(self.f_a, 4)}, "
            f"F_B={format_statistic(self.f_b, 4)}, df_error={self.df_error})"
        )


# =====================================================================
# Helpers
# =====================================================================


def _format_table(rows: tuple[AnovaTableRow, ...], decimals: int | None) -> list[str]:
    lines = [
        f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'p':>10}",
        "-" * 72,
    ]
    for row in rows:
        mean_sq = format_statistic(row.mean_sq, decimals) if row.mean_sq is not None else ""
        f_text = format_statistic(row.f_value, decimals) if row.f_value is not None else ""
        p_text = format_pvalue(row.p_value) if row.p_value is not None else ""
        lines.append(
            f"{row.term:<20} {row.df:>6} {format_statistic(row.sum_sq, decimals):>14} "
            f"{mean_sq:>14} {f_text:>10} {p_text:>10}"
        )
    lines.append("-" * 72)
    return lines


def _pvalue_relation(p: float) -> str:
    text = format_pvalue(p)
    return text if text.startswith("<") else f"= {text}"
