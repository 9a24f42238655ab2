"""
statcompare: descriptive statistics and group comparison tests.

Small, deterministic engine for comparing labeled numeric datasets.
Every statistic is carried at full precision; rounding happens only when
a result is rendered.

Submodules:
    descriptive: Parsing, Sample/Dataset, mean and standard deviations
    hypothesis: Independent two-sample t-test
    anova: One-way ANOVA and two-way main-effects ANOVA
    analysis: Batch runner over named analyses
"""

__version__ = "0.1.0"

from statcompare import descriptive
from statcompare import hypothesis
from statcompare import anova
from statcompare import analysis
from statcompare.analysis import analyze

__all__ = [
    "__version__",
    "descriptive",
    "hypothesis",
    "anova",
    "analysis",
    "analyze",
]
