"""
Batch analysis over labeled datasets.

Public API:
    analyze(datasets, analyses)  - Run named analyses, collect outcomes
    ANALYSES                     - The accepted analysis names
"""

from statcompare.analysis.solvers import analyze
from statcompare.analysis._common import (
    ANALYSES,
    AnalysisError,
    AnalysisReport,
    StatisticByDataset,
)

__all__ = [
    "analyze",
    "ANALYSES",
    "AnalysisError",
    "AnalysisReport",
    "StatisticByDataset",
]
