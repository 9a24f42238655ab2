"""
Sample and Dataset: validated inputs for every analysis.

Wraps a 1D array of finite observations and an optional display label.
Follows the statcompare Design pattern: construct through factory
classmethods, immutable afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statcompare.core.exceptions import ValidationError
from statcompare.core.settings import DEFAULT_SETTINGS, EngineSettings
from statcompare.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_min_samples,
)


@dataclass(frozen=True, eq=False)
class Sample:
    """
    Ordered, immutable sequence of finite observations.

    The backing array is flagged read-only, so neither the engine nor a
    caller can mutate a Sample after validation.

    Construction:
        Sample.from_values([1.0, 2.5, 3.0])
        Sample.from_text("1, 2.5, 3")
    """
    _values: NDArray[np.floating[Any]]

    @classmethod
    def from_values(
        cls,
        values: ArrayLike,
        *,
        min_samples: int | None = None,
        name: str = "sample",
    ) -> Sample:
        """
        Build a Sample from numbers.

        Parameters
        ----------
        values : array-like
            1D numeric data.
        min_samples : int, optional
            Minimum number of observations. Defaults to
            DEFAULT_SETTINGS.min_samples.
        name : str
            Name used in error messages.
        """
        if min_samples is None:
            min_samples = DEFAULT_SETTINGS.min_samples

        arr = check_array(values, name)
        check_1d(arr, name)
        check_finite(arr, name)
        check_min_samples(arr, min_samples, name)

        arr = arr.copy()
        arr.setflags(write=False)
        return cls(_values=arr)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        on_invalid: Literal['raise', 'drop'] = 'raise',
        settings: EngineSettings | None = None,
    ) -> Sample:
        """Parse delimited text. See statcompare.descriptive.parse_sample."""
        from statcompare.descriptive._parse import parse_sample

        return parse_sample(text, on_invalid=on_invalid, settings=settings)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Observations as a read-only float64 array."""
        return self._values

    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._values.shape[0])

    def tolist(self) -> list[float]:
        return self._values.tolist()

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __array__(self, dtype=None, copy=None) -> NDArray:
        if dtype is None:
            return self._values
        return self._values.astype(dtype)

    def __repr__(self) -> str:
        return f"Sample(n={self.n})"


@dataclass(frozen=True)
class Dataset:
    """
    A labeled Sample.

    The label is free-form display text, except in two-way ANOVA where it
    must read 'FactorA-FactorB'.
    """
    label: str
    sample: Sample

    @classmethod
    def from_text(
        cls,
        label: str,
        text: str,
        *,
        on_invalid: Literal['raise', 'drop'] = 'raise',
        settings: EngineSettings | None = None,
    ) -> Dataset:
        """Build a Dataset from a label and delimited text."""
        return cls(
            label=label.strip(),
            sample=Sample.from_text(text, on_invalid=on_invalid, settings=settings),
        )

    @property
    def n(self) -> int:
        return self.sample.n

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        return self.sample.values


def as_sample(
    data: Sample | ArrayLike,
    name: str = "sample",
    *,
    min_samples: int | None = None,
) -> Sample:
    """Return data unchanged if it is already a Sample, otherwise validate it."""
    if isinstance(data, Sample):
        return data
    if isinstance(data, Dataset):
        return data.sample
    if isinstance(data, str):
        raise ValidationError(
            f"{name}: got text, parse it with Sample.from_text() first"
        )
    return Sample.from_values(data, min_samples=min_samples, name=name)


def as_datasets(
    groups: Iterable[Dataset | Sample | ArrayLike | tuple[str, Any]],
    *,
    min_samples: int | None = None,
    settings: EngineSettings | None = None,
) -> tuple[Dataset, ...]:
    """
    Normalize a collection of groups into Datasets.

    Accepts Datasets, Samples, array-likes, or (label, data) pairs where
    data is a Sample, array-like, or delimited text. Unlabeled groups are
    named 'Dataset 1', 'Dataset 2', ... by position.
    Text is parsed with settings (delimiter and min_samples), defaulting
    to DEFAULT_SETTINGS.
    """
    datasets: list[Dataset] = []
    for i, group in enumerate(groups, start=1):
        default_label = f"Dataset {i}"
        if isinstance(group, Dataset):
            datasets.append(group)
        elif isinstance(group, tuple) and len(group) == 2 and isinstance(group[0], str):
            label, data = group
            label = label.strip() or default_label
            if isinstance(data, str):
                datasets.append(Dataset.from_text(label, data, settings=settings))
            else:
                datasets.append(Dataset(
                    label=label,
                    sample=as_sample(data, label, min_samples=min_samples),
                ))
        else:
            datasets.append(Dataset(
                label=default_label,
                sample=as_sample(group, default_label, min_samples=min_samples),
            ))
    return tuple(datasets)
