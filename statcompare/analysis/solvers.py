"""
Batch analysis.

Public API:
    analyze(datasets, analyses, ...) -> AnalysisReport

Runs a list of named analyses over the same datasets. Each analysis is
independent: a failure in one is recorded as an AnalysisError for that
name and does not affect the others.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Literal

from statcompare.core.compute.timing import Timer
from statcompare.core.distributions import default_distributions
from statcompare.core.exceptions import StatCompareError
from statcompare.core.protocols import DistributionProvider
from statcompare.core.settings import DEFAULT_SETTINGS, EngineSettings
from statcompare.core.validation import check_group_count
from statcompare.descriptive.design import Dataset, as_datasets
from statcompare.descriptive.solvers import mean, standard_deviation
from statcompare.hypothesis.solvers import t_test_from_samples
from statcompare.anova.solvers import anova_oneway, anova_twoway
from statcompare.analysis._common import (
    ANALYSES,
    AnalysisError,
    AnalysisReport,
    Outcome,
    StatisticByDataset,
)


def _per_dataset(
    name: str,
    datasets: tuple[Dataset, ...],
    func: Callable[[Dataset], float],
) -> StatisticByDataset:
    return StatisticByDataset(
        name=name,
        labels=tuple(ds.label for ds in datasets),
        values=tuple(func(ds) for ds in datasets),
    )


def analyze(
    datasets: Iterable[Any],
    analyses: Sequence[str],
    *,
    t_test_sd: Literal['population', 'sample'] = 'sample',
    grand_mean: Literal['pooled', 'unweighted'] = 'pooled',
    distributions: DistributionProvider | None = None,
    p_values: bool = True,
    settings: EngineSettings | None = None,
) -> AnalysisReport:
    """
    Run named analyses over a set of datasets.

    Parameters
    ----------
    datasets : iterable
        Datasets, or (label, data) pairs where data is a Sample,
        array-like, or delimited text. Inputs are validated up front; a
        bad input raises instead of producing a report.
    analyses : sequence of str
        Names from ANALYSES: 'mean', 'sample-std-dev',
        'population-std-dev', 't-test', 'anova-one-way', 'anova-two-way'.
        Repeated names are run once, at their first position.
    t_test_sd : str
        Standard deviation kind fed to the t-test. 'sample' (default)
        makes the t-test agree with one-way ANOVA (F == t^2) for two
        groups of equal size.
    grand_mean : str
        Grand mean policy for one-way ANOVA, see anova_oneway().
    distributions : DistributionProvider, optional
        Source of p-values. Defaults to the scipy-backed provider.
    p_values : bool
        If False, no p-values are computed.
    settings : EngineSettings, optional
        Minimum sample size applied to raw array inputs.

    Returns
    -------
    AnalysisReport
        Ordered mapping from analysis name to outcome.

    Examples
    --------
    >>> report = analyze(
    ...     [('A', [1, 2, 3, 4, 5]), ('B', [2, 3, 4, 5, 6])],
    ...     ['mean', 't-test'],
    ... )
    >>> report['mean'].as_dict()
    {'A': 3.0, 'B': 4.0}
    """
    settings = settings or DEFAULT_SETTINGS
    if not p_values:
        distributions = None
    elif distributions is None:
        distributions = default_distributions()

    items = as_datasets(datasets, min_samples=settings.min_samples, settings=settings)

    runners: dict[str, Callable[[], Outcome]] = {
        'mean': lambda: _per_dataset('mean', items, lambda ds: mean(ds.sample)),
        'sample-std-dev': lambda: _per_dataset(
            'sample-std-dev', items,
            lambda ds: standard_deviation(ds.sample, 'sample'),
        ),
        'population-std-dev': lambda: _per_dataset(
            'population-std-dev', items,
            lambda ds: standard_deviation(ds.sample, 'population'),
        ),
        't-test': lambda: _run_t_test(items, t_test_sd, distributions),
        'anova-one-way': lambda: anova_oneway(
            items, grand_mean=grand_mean, distributions=distributions,
        ),
        'anova-two-way': lambda: anova_twoway(items, distributions=distributions),
    }

    timer = Timer()
    timer.start()

    outcomes: list[tuple[str, Outcome]] = []
    seen: set[str] = set()
    for name in analyses:
        if name in seen:
            continue
        seen.add(name)

        runner = runners.get(name)
        if runner is None:
            outcomes.append((name, AnalysisError(
                kind='UnknownAnalysis',
                reason=f"unknown analysis {name!r}; expected one of {ANALYSES}",
            )))
            continue

        with timer.section(name):
            try:
                outcomes.append((name, runner()))
            except StatCompareError as e:
                outcomes.append((name, AnalysisError.from_exception(e)))

    timer.stop()

    return AnalysisReport(
        outcomes=tuple(outcomes),
        labels=tuple(ds.label for ds in items),
        info={
            't_test_sd': t_test_sd,
            'grand_mean': grand_mean,
            'distributions': distributions.name if distributions is not None else None,
        },
        timing=timer.result(),
    )


def _run_t_test(
    datasets: tuple[Dataset, ...],
    sd_kind: str,
    distributions: DistributionProvider | None,
) -> Outcome:
    check_group_count(len(datasets), "t-test", exactly=2)
    return t_test_from_samples(
        datasets[0], datasets[1],
        sd_kind=sd_kind,
        distributions=distributions,
    )
