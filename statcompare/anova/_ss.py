"""
Sums of squares for one-way and two-way (main effects) ANOVA.

One-way:
    SSB = sum_i n_i * (mean_i - grand_mean)^2
    SSW = sum_i sum_x (x - mean_i)^2

    grand_mean is either the pooled mean of all observations ('pooled')
    or the unweighted mean of the group means ('unweighted'). The two
    agree when groups have equal sizes; only 'pooled' gives
    SSB + SSW = SST otherwise.

Two-way, main effects only, balanced cells of size r:
    SSA = sum_a (r * |B|) * (mean_a - grand_mean)^2
    SSB = sum_b (r * |A|) * (mean_b - grand_mean)^2
    SSE = sum_cells sum_x (x - cell_mean)^2

    The interaction sum of squares is not estimated, so
    SSA + SSB + SSE < SST whenever cell means are not additive.
"""

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from statcompare.anova.design import FactorialDesign


VALID_GRAND_MEANS = ('pooled', 'unweighted')


@dataclass(frozen=True)
class OneWayComponents:
    grand_mean: float
    group_means: tuple[float, ...]
    group_sizes: tuple[int, ...]
    ss_between: float
    ss_within: float


@dataclass(frozen=True)
class TwoWayComponents:
    grand_mean: float
    means_a: dict[str, float]
    means_b: dict[str, float]
    cell_means: dict[tuple[str, str], float]
    ss_a: float
    ss_b: float
    ss_error: float


def _within_ss(x: NDArray[np.floating[Any]], center: float) -> float:
    return float(np.sum((x - center) ** 2))


def compute_oneway_ss(
    groups: Sequence[NDArray[np.floating[Any]]],
    grand_mean: str = 'pooled',
) -> OneWayComponents:
    """Between- and within-group sums of squares."""
    means = tuple(float(np.mean(g)) for g in groups)
    sizes = tuple(int(g.shape[0]) for g in groups)

    if grand_mean == 'pooled':
        gm = float(np.mean(np.concatenate(groups)))
    elif grand_mean == 'unweighted':
        gm = float(np.mean(means))
    else:
        raise ValueError(
            f"grand_mean must be one of {VALID_GRAND_MEANS}, got {grand_mean!r}"
        )

    ss_between = float(sum(n * (m - gm) ** 2 for n, m in zip(sizes, means)))
    ss_within = float(sum(_within_ss(g, m) for g, m in zip(groups, means)))

    return OneWayComponents(
        grand_mean=gm,
        group_means=means,
        group_sizes=sizes,
        ss_between=ss_between,
        ss_within=ss_within,
    )


def compute_twoway_ss(design: FactorialDesign) -> TwoWayComponents:
    """Main-effect and within-cell sums of squares for a balanced design."""
    gm = float(np.mean(design.all_values()))
    r = design.n_per_cell
    n_a = len(design.levels_a)
    n_b = len(design.levels_b)

    means_a = {a: float(np.mean(design.row(a))) for a in design.levels_a}
    means_b = {b: float(np.mean(design.column(b))) for b in design.levels_b}

    ss_a = float(sum((r * n_b) * (m - gm) ** 2 for m in means_a.values()))
    ss_b = float(sum((r * n_a) * (m - gm) ** 2 for m in means_b.values()))

    cell_means: dict[tuple[str, str], float] = {}
    ss_error = 0.0
    for key, ds in design.cells.items():
        cm = float(np.mean(ds.values))
        cell_means[key] = cm
        ss_error += _within_ss(ds.values, cm)

    return TwoWayComponents(
        grand_mean=gm,
        means_a=means_a,
        means_b=means_b,
        cell_means=cell_means,
        ss_a=ss_a,
        ss_b=ss_b,
        ss_error=float(ss_error),
    )
