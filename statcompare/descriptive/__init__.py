"""
Descriptive statistics module.

Public API:
    parse_sample(text)               - Delimited text to validated Sample
    Sample, Dataset                  - Validated inputs for every analysis
    mean(x)                          - Arithmetic mean
    sum_squared_deviation(x)         - sum((x - mean)^2)
    variance(x, kind)                - Population / sample variance
    standard_deviation(x, kind)      - Population / sample SD, unrounded
    describe(x)                      - All of the above plus order statistics
"""

from statcompare.descriptive.design import Sample, Dataset, as_sample, as_datasets
from statcompare.descriptive._parse import parse_sample
from statcompare.descriptive.solution import DescriptiveParams, DescriptiveSolution
from statcompare.descriptive.solvers import (
    mean,
    sum_squared_deviation,
    variance,
    standard_deviation,
    describe,
)

__all__ = [
    "parse_sample",
    "Sample",
    "Dataset",
    "as_sample",
    "as_datasets",
    "mean",
    "sum_squared_deviation",
    "variance",
    "standard_deviation",
    "describe",
    "DescriptiveParams",
    "DescriptiveSolution",
]
