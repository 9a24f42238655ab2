"""
Independent two-sample t-test.

    t_test(means, sds, ns)          - from summary statistics
    t_test_from_samples(x, y)       - from two samples

The standard error is the unpooled sqrt(sd1^2/n1 + sd2^2/n2); degrees of
freedom are reported as n1 + n2 - 2 without a Welch-Satterthwaite
correction.

Precondition, not checked: both standard deviations are of the same kind
(both population or both sample). Mixing them gives a meaningless t.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal
import math

from numpy.typing import ArrayLike

from statcompare.core.result import Result
from statcompare.core.compute.timing import Timer
from statcompare.core.distributions import t_pvalue
from statcompare.core.exceptions import ValidationError, UndefinedResultError
from statcompare.core.protocols import DistributionProvider
from statcompare.core.validation import check_group_count
from statcompare.descriptive.design import Dataset, Sample, as_sample
from statcompare.descriptive.solvers import mean, standard_deviation
from statcompare.hypothesis._common import TTestParams, VALID_SD_KINDS
from statcompare.hypothesis.solution import TTestSolution


def _check_summary_inputs(
    means: Sequence[float],
    sds: Sequence[float],
    ns: Sequence[int],
) -> tuple[tuple[float, float], tuple[float, float], tuple[int, int]]:
    for name, seq in (("means", means), ("standard deviations", sds), ("sample sizes", ns)):
        check_group_count(len(seq), f"t-test ({name})", exactly=2)

    try:
        m = tuple(float(v) for v in means)
        s = tuple(float(v) for v in sds)
        n_raw = tuple(float(v) for v in ns)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"t-test: group statistics must be numbers: {e}") from e

    if not all(math.isfinite(v) for v in m + s + n_raw):
        raise ValidationError("t-test: group statistics must be finite")
    if any(v < 0 for v in s):
        raise ValidationError(f"t-test: standard deviations must be non-negative, got {s}")
    if any(not v.is_integer() for v in n_raw):
        raise ValidationError(f"t-test: sample sizes must be integers, got {n_raw}")
    n = tuple(int(v) for v in n_raw)
    if any(v < 1 for v in n):
        raise ValidationError(f"t-test: sample sizes must be at least 1, got {n}")

    return m, s, n


def t_test(
    means: Sequence[float],
    sds: Sequence[float],
    ns: Sequence[int],
    *,
    labels: Sequence[str] | None = None,
    distributions: DistributionProvider | None = None,
    sd_kind: str | None = None,
) -> TTestSolution:
    """
    Independent two-sample t-test from group summary statistics.

    Parameters
    ----------
    means : sequence of 2 floats
    sds : sequence of 2 floats
        Standard deviations, both population or both sample.
    ns : sequence of 2 ints
    labels : sequence of 2 str, optional
        Group labels for display. Defaults to ('Group 1', 'Group 2').
    distributions : DistributionProvider, optional
        If given, a two-sided p-value is attached.
    sd_kind : str, optional
        Recorded in the result for reference.

    Returns
    -------
    TTestSolution

    Raises
    ------
    InvalidArityError
        If any input does not have exactly two entries.
    UndefinedResultError
        If the standard error is zero (both groups constant).

    Examples
    --------
    >>> t_test([3.0, 4.0], [1.5811, 1.5811], [5, 5]).statistic
    -1.0000...
    """
    timer = Timer()
    timer.start()

    (m1, m2), (s1, s2), (n1, n2) = _check_summary_inputs(means, sds, ns)

    if labels is None:
        labels = ("Group 1", "Group 2")
    check_group_count(len(labels), "t-test (labels)", exactly=2)

    with timer.section('statistic'):
        mean_diff = m1 - m2
        std_error = math.sqrt(s1 ** 2 / n1 + s2 ** 2 / n2)
        if std_error == 0.0:
            raise UndefinedResultError(
                "zero standard error: both groups have no variation, "
                "the t statistic is undefined"
            )
        t_stat = mean_diff / std_error
        df = n1 + n2 - 2

    with timer.section('p_value'):
        p_value = t_pvalue(distributions, t_stat, df)

    timer.stop()

    params = TTestParams(
        statistic=t_stat,
        df=df,
        mean_diff=mean_diff,
        std_error=std_error,
        means=(m1, m2),
        sds=(s1, s2),
        ns=(n1, n2),
        sd_kind=sd_kind,
        labels=(str(labels[0]), str(labels[1])),
        p_value=p_value,
    )

    result = Result(
        params=params,
        info={
            'method': 'two_sample_t',
            'sd_kind': sd_kind,
            'distributions': distributions.name if distributions is not None else None,
        },
        timing=timer.result(),
        backend_name='cpu',
    )

    return TTestSolution(_result=result)


def t_test_from_samples(
    x: Dataset | Sample | ArrayLike,
    y: Dataset | Sample | ArrayLike,
    *,
    sd_kind: Literal['population', 'sample'] = 'sample',
    labels: Sequence[str] | None = None,
    distributions: DistributionProvider | None = None,
) -> TTestSolution:
    """
    Independent two-sample t-test from raw observations.

    Group means and standard deviations are computed at full precision and
    passed to t_test().

    Parameters
    ----------
    x, y : Dataset, Sample or array-like
    sd_kind : str
        Which standard deviation to use for both groups: 'sample'
        (default) or 'population'.
    labels : sequence of 2 str, optional
        Defaults to the Dataset labels, else ('Group 1', 'Group 2').
    distributions : DistributionProvider, optional
        If given, a two-sided p-value is attached.
    """
    if sd_kind not in VALID_SD_KINDS:
        raise ValidationError(
            f"sd_kind must be one of {VALID_SD_KINDS}, got {sd_kind!r}"
        )

    if labels is None:
        labels = (
            x.label if isinstance(x, Dataset) else "Group 1",
            y.label if isinstance(y, Dataset) else "Group 2",
        )

    sx = as_sample(x, "x", min_samples=1)
    sy = as_sample(y, "y", min_samples=1)

    return t_test(
        [mean(sx), mean(sy)],
        [standard_deviation(sx, sd_kind), standard_deviation(sy, sd_kind)],
        [sx.n, sy.n],
        labels=labels,
        distributions=distributions,
        sd_kind=sd_kind,
    )
