"""
Descriptive statistics for a single sample.

Provides describe() as the comprehensive entry point, plus the individual
building blocks the inferential tests reuse: mean(),
sum_squared_deviation(), variance(), standard_deviation().

All functions return full-precision floats. Rounding is a presentation
concern (statcompare.core.formatting).
"""

from __future__ import annotations

from typing import Literal
import numpy as np
from numpy.typing import ArrayLike

from statcompare.core.result import Result
from statcompare.core.compute.timing import Timer
from statcompare.core.exceptions import ValidationError, UndefinedResultError
from statcompare.descriptive.design import Dataset, Sample, as_sample
from statcompare.descriptive.solution import DescriptiveParams, DescriptiveSolution


SdKind = Literal['population', 'sample']


def _values(data: Sample | ArrayLike, name: str) -> np.ndarray:
    """Validated 1D array with at least one observation."""
    return as_sample(data, name, min_samples=1).values


def mean(data: Sample | ArrayLike) -> float:
    """
    Arithmetic mean.

    Raises
    ------
    ValidationError
        If data is empty or not numeric.
    """
    return float(np.mean(_values(data, "sample")))


def sum_squared_deviation(data: Sample | ArrayLike) -> float:
    """Sum of squared deviations from the mean, sum((x - mean)^2)."""
    x = _values(data, "sample")
    return float(np.sum((x - np.mean(x)) ** 2))


def variance(data: Sample | ArrayLike, kind: SdKind = 'population') -> float:
    """
    Population (divisor n) or sample (divisor n - 1) variance.

    Raises
    ------
    UndefinedResultError
        For kind='sample' with a single observation.
    """
    x = _values(data, "sample")
    n = x.shape[0]
    ss = float(np.sum((x - np.mean(x)) ** 2))

    if kind == 'population':
        return ss / n
    if kind == 'sample':
        if n == 1:
            raise UndefinedResultError(
                "sample standard deviation undefined for n=1"
            )
        return ss / (n - 1)
    raise ValidationError(
        f"kind must be 'population' or 'sample', got {kind!r}"
    )


def standard_deviation(data: Sample | ArrayLike, kind: SdKind = 'population') -> float:
    """
    Population or sample standard deviation, unrounded.

    Parameters
    ----------
    data : Sample or array-like
    kind : str
        'population' (default, divisor n) or 'sample' (divisor n - 1).

    Returns
    -------
    float
        sqrt(variance). Feed this value, not a rounded one, into t-tests
        and ANOVA.
    """
    return float(np.sqrt(variance(data, kind)))


def describe(
    data: Dataset | Sample | ArrayLike,
    *,
    label: str | None = None,
) -> DescriptiveSolution:
    """
    Compute all descriptive statistics for one sample.

    Parameters
    ----------
    data : Dataset, Sample or array-like
        Array-likes are validated into a Sample (at least
        DEFAULT_SETTINGS.min_samples observations).
    label : str, optional
        Display label. Taken from the Dataset when one is given.

    Returns
    -------
    DescriptiveSolution
    """
    if isinstance(data, Dataset):
        label = data.label if label is None else label
        sample = data.sample
    else:
        sample = as_sample(data, label or "sample")

    timer = Timer()
    timer.start()

    x = sample.values
    n = sample.n

    with timer.section('moments'):
        m = float(np.mean(x))
        ss = float(np.sum((x - m) ** 2))
        sd_pop = float(np.sqrt(ss / n))
        if n > 1:
            sd_samp = float(np.sqrt(ss / (n - 1)))
        else:
            raise UndefinedResultError(
                "sample standard deviation undefined for n=1"
            )

    with timer.section('order_statistics'):
        lo = float(np.min(x))
        hi = float(np.max(x))
        med = float(np.median(x))

    timer.stop()

    params = DescriptiveParams(
        n=n,
        mean=m,
        sd_population=sd_pop,
        sd_sample=sd_samp,
        sum_squared_deviation=ss,
        median=med,
        minimum=lo,
        maximum=hi,
        range=hi - lo,
    )

    result = Result(
        params=params,
        info={'method': 'describe'},
        timing=timer.result(),
        backend_name='cpu',
    )

    return DescriptiveSolution(_result=result, _label=label)
