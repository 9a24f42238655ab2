"""
Outcome records for batch analysis.

Every requested analysis name maps to exactly one outcome: a solution
object from the domain subpackages, a StatisticByDataset for the
per-dataset descriptive analyses, or an AnalysisError.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from statcompare.core.exceptions import StatCompareError, ValidationError
from statcompare.core.formatting import format_statistic
from statcompare.hypothesis.solution import TTestSolution
from statcompare.anova.solution import OneWayAnovaSolution, TwoWayAnovaSolution


ANALYSES = (
    'mean',
    'sample-std-dev',
    'population-std-dev',
    't-test',
    'anova-one-way',
    'anova-two-way',
)


@dataclass(frozen=True)
class AnalysisError:
    """
    A failed analysis.

    Attributes:
        kind: Exception class name without the 'Error' suffix,
            e.g. 'InvalidArity', or 'UnknownAnalysis'
        reason: Human-readable message
    """
    kind: str
    reason: str

    @classmethod
    def from_exception(cls, exc: StatCompareError) -> 'AnalysisError':
        name = type(exc).__name__
        return cls(kind=name.removesuffix('Error'), reason=str(exc))

    def summary(self) -> str:
        return f"Error ({self.kind}): {self.reason}"


@dataclass(frozen=True)
class StatisticByDataset:
    """One descriptive statistic evaluated on every dataset, in input order."""
    name: str
    labels: tuple[str, ...]
    values: tuple[float, ...]

    def as_dict(self) -> dict[str, float]:
        """
        Label to value mapping.

        Raises:
            ValidationError: If two datasets share a label; use the
                labels and values tuples instead
        """
        repeated = sorted({label for label in self.labels if self.labels.count(label) > 1})
        if repeated:
            raise ValidationError(
                f"{self.name}: labels {repeated} are used by more than one dataset, "
                f"read labels and values by position instead"
            )
        return dict(zip(self.labels, self.values))

    def summary(self, decimals: int | None = None) -> str:
        width = max((len(label) for label in self.labels), default=0)
        lines = [self.name]
        for label, value in zip(self.labels, self.values):
            lines.append(f"  {label:<{width}}  {format_statistic(value, decimals)}")
        return "\n".join(lines)


Outcome = (
    StatisticByDataset
    | TTestSolution
    | OneWayAnovaSolution
    | TwoWayAnovaSolution
    | AnalysisError
)


@dataclass(frozen=True)
class AnalysisReport(Mapping[str, Outcome]):
    """
    Ordered mapping from analysis name to outcome.

    Iteration follows the order in which analyses were requested.
    """
    outcomes: tuple[tuple[str, Outcome], ...]
    labels: tuple[str, ...]
    info: dict[str, Any]
    timing: dict[str, float] | None = None

    def __getitem__(self, name: str) -> Outcome:
        for key, outcome in self.outcomes:
            if key == name:
                return outcome
        raise KeyError(name)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    @property
    def errors(self) -> dict[str, AnalysisError]:
        """Failed analyses only."""
        return {k: v for k, v in self.outcomes if isinstance(v, AnalysisError)}

    @property
    def succeeded(self) -> bool:
        return not self.errors

    def summary(self, decimals: int | None = None) -> str:
        lines = [
            "Analysis Report",
            "=" * 72,
            f"Datasets: {', '.join(self.labels)}",
        ]
        for name, outcome in self.outcomes:
            lines.append("")
            lines.append(f"[{name}]")
            if isinstance(outcome, AnalysisError):
                lines.append(outcome.summary())
            else:
                lines.append(outcome.summary(decimals))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"AnalysisReport(analyses={list(self)}, errors={len(self.errors)})"
