"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from statcompare.core.result import Result
from statcompare.core.exceptions import ValidationError
from statcompare.core.formatting import format_statistic, round_statistic


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for one Sample.

    Every value is full precision; rounding happens only in
    DescriptiveSolution.rounded() and summary().
    """
    n: int
    mean: float
    sd_population: float
    sd_sample: float
    sum_squared_deviation: float
    median: float
    minimum: float
    maximum: float
    range: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics for one Sample.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _label: str | None = None

    @property
    def label(self) -> str | None:
        return self._label

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def sd_population(self) -> float:
        """Population standard deviation (divisor n)."""
        return self._result.params.sd_population

    @property
    def sd_sample(self) -> float:
        """Sample standard deviation (divisor n - 1)."""
        return self._result.params.sd_sample

    def sd(self, kind: Literal['population', 'sample']) -> float:
        """Standard deviation of the requested kind."""
        if kind == 'population':
            return self.sd_population
        if kind == 'sample':
            return self.sd_sample
        raise ValidationError(
            f"kind must be 'population' or 'sample', got {kind!r}"
        )

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def minimum(self) -> float:
        return self._result.params.minimum

    @property
    def maximum(self) -> float:
        return self._result.params.maximum

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def params(self) -> DescriptiveParams:
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

    def rounded(self, decimals: int | None = None) -> dict[str, float | int]:
        """All statistics rounded for display (n is left as is)."""
        p = self._result.params
        return {
            'n': p.n,
            'mean': round_statistic(p.mean, decimals),
            'sd_population': round_statistic(p.sd_population, decimals),
            'sd_sample': round_statistic(p.sd_sample, decimals),
            'median': round_statistic(p.median, decimals),
            'minimum': round_statistic(p.minimum, decimals),
            'maximum': round_statistic(p.maximum, decimals),
            'range': round_statistic(p.range, decimals),
        }

    def summary(self, decimals: int | None = None) -> str:
        """Descriptive table row in the layout of the results page."""
        p = self._result.params
        title = self._label or "Sample"
        rows = [
            ("Sample Size", str(p.n)),
            ("Mean", format_statistic(p.mean, decimals)),
            ("Median", format_statistic(p.median, decimals)),
            ("Std Dev (sample)", format_statistic(p.sd_sample, decimals)),
            ("Std Dev (population)", format_statistic(p.sd_population, decimals)),
            ("Min", format_statistic(p.minimum, decimals)),
            ("Max", format_statistic(p.maximum, decimals)),
            ("Range", format_statistic(p.range, decimals)),
        ]
        lines = [title, "=" * 40]
        lines.extend(f"{name:<22} {value:>16}" for name, value in rows)
        return "\n".join(lines)

    def __repr__(self) -> str:
        label = f"label={self._label!r}, " if self._label else ""
        return (
            f"DescriptiveSolution({label}n={self.n}, "
            f"mean={self.mean:.4g}, sd_sample={self.sd_sample:.4g})"
        )
