"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container: no methods, no computation.
F statistics are floats or Sentinel members, never inf/nan.
"""

from dataclasses import dataclass

from statcompare.core.sentinels import Statistic


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of an ANOVA table."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float | None      # None for the Total row
    f_value: Statistic | None  # None for error / total rows
    p_value: float | None      # None without a distribution provider


@dataclass(frozen=True)
class OneWayAnovaParams:
    """Parameter payload for one-way ANOVA."""
    table: tuple[AnovaTableRow, ...]
    f_value: Statistic
    ss_between: float
    ss_within: float
    ss_total: float
    df_between: int
    df_within: int
    df_total: int
    ms_between: float
    ms_within: float
    grand_mean: float
    grand_mean_method: str                 # 'pooled' or 'unweighted'
    labels: tuple[str, ...]                # input order, may repeat
    group_means: tuple[float, ...]         # aligned with labels
    group_sizes: tuple[int, ...]
    p_value: float | None


@dataclass(frozen=True)
class TwoWayAnovaParams:
    """
    Parameter payload for two-way ANOVA, main effects only.

    No interaction term is estimated; the error term is the pooled
    within-cell sum of squares.
    """
    table: tuple[AnovaTableRow, ...]
    f_a: Statistic
    f_b: Statistic
    ss_a: float
    ss_b: float
    ss_error: float
    df_a: int
    df_b: int
    df_error: int
    ms_a: float
    ms_b: float
    ms_error: float
    grand_mean: float
    levels_a: tuple[str, ...]
    levels_b: tuple[str, ...]
    n_per_cell: int
    means_a: dict[str, float]              # level of A -> mean over its row
    means_b: dict[str, float]              # level of B -> mean over its column
    cell_means: dict[tuple[str, str], float]
    p_a: float | None
    p_b: float | None
