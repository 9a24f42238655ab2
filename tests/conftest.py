"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from statcompare.core.distributions import ScipyDistributions


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def scipy_distributions():
    return ScipyDistributions()


@pytest.fixture
def shifted_pair():
    """[1..5] vs [2..6]: means 3 and 4, equal spread."""
    return [1.0, 2.0, 3.0, 4.0, 5.0], [2.0, 3.0, 4.0, 5.0, 6.0]


@pytest.fixture
def three_groups():
    """Three groups of 3 with means 2, 5, 8 and within-group SS of 2 each."""
    return [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]
