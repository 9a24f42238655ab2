"""
Hypothesis testing module.

Public API:
    t_test(means, sds, ns)      - Independent two-sample t-test from summaries
    t_test_from_samples(x, y)   - Same, from raw observations
"""

from statcompare.hypothesis.solvers import t_test, t_test_from_samples
from statcompare.hypothesis._common import TTestParams
from statcompare.hypothesis.solution import TTestSolution

__all__ = [
    "t_test",
    "t_test_from_samples",
    "TTestParams",
    "TTestSolution",
]
