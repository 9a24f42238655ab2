"""
Shared fixtures for ANOVA tests.

Provides reusable datasets for one-way and two-way (factorial) scenarios.
"""

import numpy as np
import pytest


# =====================================================================
# One-way fixtures
# =====================================================================


@pytest.fixture
def oneway_small_f():
    """Group means 4, 5, 6 with n=3 each: SSB = 6, SSW = 6, F = 3."""
    return [[3.0, 4.0, 5.0], [4.0, 5.0, 6.0], [5.0, 6.0, 7.0]]


@pytest.fixture
def oneway_unbalanced():
    """3-group unbalanced design (n=5, 10, 15)."""
    rng = np.random.default_rng(123)
    return [
        rng.normal(10.0, 2.0, 5),
        rng.normal(15.0, 2.0, 10),
        rng.normal(20.0, 2.0, 15),
    ]


@pytest.fixture
def oneway_two_groups():
    """2-group design with equal n (should match the t-test)."""
    rng = np.random.default_rng(77)
    return [rng.normal(10.0, 3.0, 20), rng.normal(14.0, 3.0, 20)]


# =====================================================================
# Factorial fixtures
# =====================================================================


@pytest.fixture
def twoway_additive():
    """
    2x2 balanced design, 3 per cell, no interaction.

    Cell means: Control-DrugX 2, Control-Placebo 3, Treated-DrugX 6,
    Treated-Placebo 7. Grand mean 4.5.
    SSA = 48, SSB = 3, SSE = 8, df_error = 8.
    """
    return [
        ('Control-DrugX', [1.0, 2.0, 3.0]),
        ('Control-Placebo', [2.0, 3.0, 4.0]),
        ('Treated-DrugX', [5.0, 6.0, 7.0]),
        ('Treated-Placebo', [6.0, 7.0, 8.0]),
    ]


@pytest.fixture
def twoway_2x3():
    """2x3 balanced factorial design with main effects on both factors."""
    rng = np.random.default_rng(42)
    groups = []
    for a_level, a_shift in (('low', 0.0), ('high', 5.0)):
        for b_level, b_shift in (('X', 0.0), ('Y', 3.0), ('Z', -2.0)):
            groups.append((
                f"{a_level}-{b_level}",
                rng.normal(10.0 + a_shift + b_shift, 2.0, 10),
            ))
    return groups
