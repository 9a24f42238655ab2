"""
ANOVA design objects.

Wrap validated groups for ANOVA computation.

    OneWayDesign.from_groups(groups)          - k >= 2 labeled samples
    FactorialDesign.from_datasets(datasets)   - complete balanced 2-factor layout

decompose_factors() is the functional spelling of
FactorialDesign.from_datasets().
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statcompare.core.exceptions import (
    DuplicateCombinationError,
    InsufficientLevelsError,
    MalformedLabelError,
    MissingCombinationError,
    UnbalancedDesignError,
)
from statcompare.core.validation import check_group_count
from statcompare.descriptive.design import Dataset, Sample, as_datasets


GroupInput = Dataset | Sample | ArrayLike | tuple[str, Any]

FACTOR_SEPARATOR = '-'


@dataclass(frozen=True)
class OneWayDesign:
    """
    Validated groups for one-way ANOVA.

    Created via from_groups(), not directly.
    """
    datasets: tuple[Dataset, ...]

    @staticmethod
    def from_groups(groups: Iterable[GroupInput]) -> 'OneWayDesign':
        """
        Create design for one-way ANOVA.

        Args:
            groups: Datasets, Samples, array-likes or (label, data) pairs.
                Raw arrays need only one observation each so that a
                degenerate layout reaches the degrees-of-freedom check.

        Raises:
            InvalidArityError: Fewer than 2 groups
        """
        datasets = as_datasets(groups, min_samples=1)
        check_group_count(len(datasets), "one-way ANOVA", at_least=2)
        return OneWayDesign(datasets=datasets)

    @property
    def k(self) -> int:
        """Number of groups."""
        return len(self.datasets)

    @property
    def n(self) -> int:
        """Total number of observations."""
        return sum(ds.n for ds in self.datasets)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(ds.label for ds in self.datasets)

    @property
    def arrays(self) -> tuple[NDArray[np.floating[Any]], ...]:
        return tuple(ds.values for ds in self.datasets)


def parse_factor_label(label: str) -> tuple[str, str]:
    """
    Split 'LevelA-LevelB' on the first '-'.

    Both parts are trimmed and must be non-empty, so 'Control-Drug-X'
    gives ('Control', 'Drug-X').

    Raises:
        MalformedLabelError: No separator, or an empty part
    """
    text = label.strip()
    head, sep, tail = text.partition(FACTOR_SEPARATOR)
    level_a, level_b = head.strip(), tail.strip()
    if not sep or not level_a or not level_b:
        raise MalformedLabelError(
            f"label {label!r} is not in 'FactorA-FactorB' format "
            f"(e.g. Control-DrugX); two-way ANOVA needs both factor levels",
            label=label,
        )
    return level_a, level_b


@dataclass(frozen=True)
class FactorialDesign:
    """
    Complete, balanced two-factor layout.

    Invariants (checked by from_datasets):
        - every (a, b) in levels_a x levels_b has exactly one Dataset
        - every cell has n_per_cell observations
        - each factor has at least 2 levels

    Levels keep the order in which they first appear in the input.
    """
    levels_a: tuple[str, ...]
    levels_b: tuple[str, ...]
    cells: dict[tuple[str, str], Dataset]
    n_per_cell: int

    @staticmethod
    def from_datasets(datasets: Iterable[GroupInput]) -> 'FactorialDesign':
        """
        Decompose 'FactorA-FactorB' labels into a factorial design.

        Checks run in this order, each raising on the first problem:
            1. every label parses                (MalformedLabelError)
            2. both factors have >= 2 levels     (InsufficientLevelsError)
            3. no cell is labeled twice          (DuplicateCombinationError)
            4. every combination is present      (MissingCombinationError)
            5. all cells have equal size         (UnbalancedDesignError)
        """
        items = as_datasets(datasets, min_samples=1)

        levels_a: list[str] = []
        levels_b: list[str] = []
        assigned: list[tuple[tuple[str, str], Dataset]] = []

        for ds in items:
            a, b = parse_factor_label(ds.label)
            if a not in levels_a:
                levels_a.append(a)
            if b not in levels_b:
                levels_b.append(b)
            assigned.append(((a, b), ds))

        for factor, levels in (('A', levels_a), ('B', levels_b)):
            if len(levels) < 2:
                raise InsufficientLevelsError(
                    f"two-way ANOVA requires at least 2 levels for each factor; "
                    f"factor {factor} has {len(levels)}: {levels}",
                    factor=factor,
                    levels=tuple(levels),
                )

        cells: dict[tuple[str, str], Dataset] = {}
        for key, ds in assigned:
            if key in cells:
                raise DuplicateCombinationError(
                    f"combination {key[0]}-{key[1]} appears more than once; "
                    f"each combination must have exactly one dataset",
                    level_a=key[0],
                    level_b=key[1],
                )
            cells[key] = ds

        for a in levels_a:
            for b in levels_b:
                if (a, b) not in cells:
                    raise MissingCombinationError(
                        f"missing data for combination {a}-{b}; "
                        f"all combinations must be present",
                        level_a=a,
                        level_b=b,
                    )

        first_key = (levels_a[0], levels_b[0])
        n_per_cell = cells[first_key].n
        for a in levels_a:
            for b in levels_b:
                n_cell = cells[(a, b)].n
                if n_cell != n_per_cell:
                    raise UnbalancedDesignError(
                        f"unbalanced design: {a}-{b} has {n_cell} values but "
                        f"{first_key[0]}-{first_key[1]} has {n_per_cell}; "
                        f"every combination needs the same number of values",
                        cell=(a, b),
                        expected_n=n_per_cell,
                        actual_n=n_cell,
                    )

        return FactorialDesign(
            levels_a=tuple(levels_a),
            levels_b=tuple(levels_b),
            cells=cells,
            n_per_cell=n_per_cell,
        )

    @property
    def n(self) -> int:
        """Total number of observations."""
        return self.n_per_cell * len(self.levels_a) * len(self.levels_b)

    def cell(self, level_a: str, level_b: str) -> Dataset:
        return self.cells[(level_a, level_b)]

    def row(self, level_a: str) -> NDArray[np.floating[Any]]:
        """All observations with factor A at level_a."""
        return np.concatenate([self.cells[(level_a, b)].values for b in self.levels_b])

    def column(self, level_b: str) -> NDArray[np.floating[Any]]:
        """All observations with factor B at level_b."""
        return np.concatenate([self.cells[(a, level_b)].values for a in self.levels_a])

    def all_values(self) -> NDArray[np.floating[Any]]:
        return np.concatenate([ds.values for ds in self.cells.values()])


def decompose_factors(datasets: Iterable[GroupInput]) -> FactorialDesign:
    """Validate 'FactorA-FactorB' labeled datasets into a FactorialDesign."""
    return FactorialDesign.from_datasets(datasets)
