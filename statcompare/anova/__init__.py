"""
Analysis of Variance (ANOVA).

Public API:
    anova_oneway(groups, ...) -> OneWayAnovaSolution
    anova_twoway(datasets, ...) -> TwoWayAnovaSolution   # main effects only
    decompose_factors(datasets) -> FactorialDesign       # 'A-B' label parsing
"""

from statcompare.anova.solvers import anova_oneway, anova_twoway
from statcompare.anova.design import (
    FactorialDesign,
    OneWayDesign,
    decompose_factors,
    parse_factor_label,
)
from statcompare.anova._common import (
    AnovaTableRow,
    OneWayAnovaParams,
    TwoWayAnovaParams,
)
from statcompare.anova.solution import OneWayAnovaSolution, TwoWayAnovaSolution

__all__ = [
    "anova_oneway",
    "anova_twoway",
    "decompose_factors",
    "parse_factor_label",
    "FactorialDesign",
    "OneWayDesign",
    "AnovaTableRow",
    "OneWayAnovaParams",
    "TwoWayAnovaParams",
    "OneWayAnovaSolution",
    "TwoWayAnovaSolution",
]
