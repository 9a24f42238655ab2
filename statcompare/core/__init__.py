"""
Core infrastructure for statcompare.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, hypothesis, anova, analysis).

Key components:
    protocols: DistributionProvider protocol
    distributions: scipy-backed default provider
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    sentinels: INFINITE / UNDEFINED statistic markers
    settings: EngineSettings and DEFAULT_SETTINGS
    formatting: Presentation-boundary rounding and text
"""

from statcompare.core.protocols import DistributionProvider
from statcompare.core.distributions import ScipyDistributions, default_distributions
from statcompare.core.result import Result
from statcompare.core.sentinels import Sentinel, Statistic
from statcompare.core.settings import EngineSettings, DEFAULT_SETTINGS
from statcompare.core.exceptions import (
    StatCompareError,
    ValidationError,
    InvalidArityError,
    FactorialDesignError,
    MalformedLabelError,
    InsufficientLevelsError,
    MissingCombinationError,
    DuplicateCombinationError,
    UnbalancedDesignError,
    NumericalError,
    DegenerateDesignError,
    UndefinedResultError,
)

__all__ = [
    # Protocols
    "DistributionProvider",
    "ScipyDistributions",
    "default_distributions",
    # Result
    "Result",
    "Sentinel",
    "Statistic",
    # Settings
    "EngineSettings",
    "DEFAULT_SETTINGS",
    # Exceptions
    "StatCompareError",
    "ValidationError",
    "InvalidArityError",
    "FactorialDesignError",
    "MalformedLabelError",
    "InsufficientLevelsError",
    "MissingCombinationError",
    "DuplicateCombinationError",
    "UnbalancedDesignError",
    "NumericalError",
    "DegenerateDesignError",
    "UndefinedResultError",
]
