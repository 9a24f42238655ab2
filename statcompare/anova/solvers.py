"""
ANOVA solver dispatch.

Public API:
    anova_oneway(groups, ...) -> OneWayAnovaSolution
    anova_twoway(design_or_datasets, ...) -> TwoWayAnovaSolution
"""

from collections.abc import Iterable
from typing import Literal

from statcompare.core.result import Result
from statcompare.core.compute.timing import Timer
from statcompare.core.distributions import f_pvalue
from statcompare.core.exceptions import DegenerateDesignError, ValidationError
from statcompare.core.protocols import DistributionProvider
from statcompare.core.sentinels import ratio
from statcompare.anova._common import (
    AnovaTableRow,
    OneWayAnovaParams,
    TwoWayAnovaParams,
)
from statcompare.anova._ss import (
    VALID_GRAND_MEANS,
    compute_oneway_ss,
    compute_twoway_ss,
)
from statcompare.anova.design import FactorialDesign, GroupInput, OneWayDesign
from statcompare.anova.solution import OneWayAnovaSolution, TwoWayAnovaSolution


def anova_oneway(
    groups: Iterable[GroupInput],
    *,
    grand_mean: Literal['pooled', 'unweighted'] = 'pooled',
    distributions: DistributionProvider | None = None,
) -> OneWayAnovaSolution:
    """
    One-way Analysis of Variance.

    Tests whether the means of two or more groups are equal.

    Args:
        groups: k >= 2 groups as Datasets, Samples, array-likes or
            (label, data) pairs
        grand_mean: 'pooled' (default): mean of all observations.
            'unweighted': mean of the group means. They agree when all
            groups have the same size; with unequal sizes 'unweighted'
            no longer partitions the total sum of squares and a warning
            is recorded on the result.
        distributions: If given, the upper-tail p-value of F is attached.

    Returns:
        OneWayAnovaSolution with the ANOVA table and group means.
        F is Sentinel.INFINITE when MSW == 0 < MSB and Sentinel.UNDEFINED
        when both are 0.

    Raises:
        InvalidArityError: Fewer than 2 groups
        DegenerateDesignError: Total observations do not exceed k

    Examples:
        >>> result = anova_oneway([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        >>> result.f_value
        27.0
        >>> print(result.summary())
    """
    if grand_mean not in VALID_GRAND_MEANS:
        raise ValidationError(
            f"grand_mean must be one of {VALID_GRAND_MEANS}, got {grand_mean!r}"
        )

    timer = Timer()
    timer.start()

    design = OneWayDesign.from_groups(groups)
    k = design.k
    n_total = design.n

    df_between = k - 1
    df_within = n_total - k
    if df_within <= 0:
        raise DegenerateDesignError(
            f"one-way ANOVA needs more observations than groups: "
            f"{n_total} observations in {k} groups leaves {df_within} "
            f"within-group degrees of freedom",
            df=df_within,
        )

    with timer.section('sums_of_squares'):
        comp = compute_oneway_ss(design.arrays, grand_mean=grand_mean)

    ms_between = comp.ss_between / df_between
    ms_within = comp.ss_within / df_within
    f_value = ratio(ms_between, ms_within)

    with timer.section('p_value'):
        p_value = f_pvalue(distributions, f_value, df_between, df_within)

    ss_total = comp.ss_between + comp.ss_within
    df_total = n_total - 1

    table = (
        AnovaTableRow('Between Groups', df_between, comp.ss_between, ms_between, f_value, p_value),
        AnovaTableRow('Within Groups', df_within, comp.ss_within, ms_within, None, None),
        AnovaTableRow('Total', df_total, ss_total, None, None, None),
    )

    warnings_list: list[str] = []
    if grand_mean == 'unweighted' and len(set(comp.group_sizes)) > 1:
        warnings_list.append(
            "unweighted grand mean with unequal group sizes: "
            "SS between + SS within differs from the total sum of squares"
        )

    timer.stop()

    params = OneWayAnovaParams(
        table=table,
        f_value=f_value,
        ss_between=comp.ss_between,
        ss_within=comp.ss_within,
        ss_total=ss_total,
        df_between=df_between,
        df_within=df_within,
        df_total=df_total,
        ms_between=ms_between,
        ms_within=ms_within,
        grand_mean=comp.grand_mean,
        grand_mean_method=grand_mean,
        labels=design.labels,
        group_means=comp.group_means,
        group_sizes=comp.group_sizes,
        p_value=p_value,
    )

    result = Result(
        params=params,
        info={
            'method': 'oneway',
            'grand_mean': grand_mean,
            'labels': design.labels,
            'distributions': distributions.name if distributions is not None else None,
        },
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )

    return OneWayAnovaSolution(_result=result)


def anova_twoway(
    data: FactorialDesign | Iterable[GroupInput],
    *,
    distributions: DistributionProvider | None = None,
) -> TwoWayAnovaSolution:
    """
    Two-way Analysis of Variance, main effects only.

    Each dataset is one cell of a complete, balanced two-factor layout,
    labeled 'LevelA-LevelB'. The interaction term is not estimated: the
    error term is the pooled within-cell variation.

    Args:
        data: A FactorialDesign, or labeled datasets which are passed
            through decompose_factors() first
        distributions: If given, p-values for both main effects are attached

    Returns:
        TwoWayAnovaSolution. F values follow the same Sentinel policy as
        anova_oneway().

    Raises:
        MalformedLabelError, InsufficientLevelsError,
        DuplicateCombinationError, MissingCombinationError,
        UnbalancedDesignError: Design preconditions
        DegenerateDesignError: N - |A||B| <= 0 (one observation per cell)

    Examples:
        >>> result = anova_twoway([
        ...     ('Control-DrugX', [1, 2, 3]), ('Control-Placebo', [2, 3, 4]),
        ...     ('Treated-DrugX', [5, 6, 7]), ('Treated-Placebo', [6, 7, 8]),
        ... ])
        >>> result.levels_a
        ('Control', 'Treated')
    """
    timer = Timer()
    timer.start()

    with timer.section('design'):
        if isinstance(data, FactorialDesign):
            design = data
        else:
            design = FactorialDesign.from_datasets(data)

    n_a = len(design.levels_a)
    n_b = len(design.levels_b)
    df_a = n_a - 1
    df_b = n_b - 1
    df_error = design.n - n_a * n_b
    if df_error <= 0:
        raise DegenerateDesignError(
            f"two-way ANOVA needs more than one observation per cell: "
            f"{design.n} observations in {n_a * n_b} cells leaves "
            f"{df_error} error degrees of freedom",
            df=df_error,
        )

    with timer.section('sums_of_squares'):
        comp = compute_twoway_ss(design)

    ms_a = comp.ss_a / df_a
    ms_b = comp.ss_b / df_b
    ms_error = comp.ss_error / df_error
    f_a = ratio(ms_a, ms_error)
    f_b = ratio(ms_b, ms_error)

    with timer.section('p_value'):
        p_a = f_pvalue(distributions, f_a, df_a, df_error)
        p_b = f_pvalue(distributions, f_b, df_b, df_error)

    table = (
        AnovaTableRow('Factor A', df_a, comp.ss_a, ms_a, f_a, p_a),
        AnovaTableRow('Factor B', df_b, comp.ss_b, ms_b, f_b, p_b),
        AnovaTableRow('Error', df_error, comp.ss_error, ms_error, None, None),
    )

    timer.stop()

    params = TwoWayAnovaParams(
        table=table,
        f_a=f_a,
        f_b=f_b,
        ss_a=comp.ss_a,
        ss_b=comp.ss_b,
        ss_error=comp.ss_error,
        df_a=df_a,
        df_b=df_b,
        df_error=df_error,
        ms_a=ms_a,
        ms_b=ms_b,
        ms_error=ms_error,
        grand_mean=comp.grand_mean,
        levels_a=design.levels_a,
        levels_b=design.levels_b,
        n_per_cell=design.n_per_cell,
        means_a=comp.means_a,
        means_b=comp.means_b,
        cell_means=comp.cell_means,
        p_a=p_a,
        p_b=p_b,
    )

    result = Result(
        params=params,
        info={
            'method': 'twoway_main_effects',
            'interaction': False,
            'distributions': distributions.name if distributions is not None else None,
        },
        timing=timer.result(),
        backend_name='cpu',
    )

    return TwoWayAnovaSolution(_result=result)
