"""
Exception hierarchy for statcompare.

All exceptions inherit from StatCompareError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable and can be shown to a user verbatim
    - Never catch and re-raise with less information
"""


class StatCompareError(Exception):
    """Base exception for all statcompare errors."""
    pass


class ValidationError(StatCompareError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty or
    non-numeric text, too few samples, non-finite values.
    """
    pass


class InvalidArityError(ValidationError):
    """
    Wrong number of groups for the requested test.

    Attributes:
        expected: Human-readable requirement (e.g. 'exactly 2', 'at least 2')
        actual: Number of groups supplied
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class FactorialDesignError(ValidationError):
    """
    Datasets do not form a valid two-factor design.

    Base class for the two-way ANOVA precondition failures.
    """
    pass


class MalformedLabelError(FactorialDesignError):
    """
    Dataset label does not match the 'FactorA-FactorB' pattern.

    Attributes:
        label: The offending label
    """

    def __init__(self, message: str, label: str | None = None):
        super().__init__(message)
        self.label = label


class InsufficientLevelsError(FactorialDesignError):
    """
    A factor has fewer than two distinct levels.

    Attributes:
        factor: 'A' or 'B'
        levels: The levels that were found
    """

    def __init__(
        self,
        message: str,
        factor: str | None = None,
        levels: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.factor = factor
        self.levels = levels


class MissingCombinationError(FactorialDesignError):
    """
    A combination of factor levels has no dataset.

    Attributes:
        level_a: Level of factor A of the first missing cell
        level_b: Level of factor B of the first missing cell
    """

    def __init__(
        self,
        message: str,
        level_a: str | None = None,
        level_b: str | None = None,
    ):
        super().__init__(message)
        self.level_a = level_a
        self.level_b = level_b


class DuplicateCombinationError(FactorialDesignError):
    """
    A combination of factor levels is assigned to more than one dataset.

    Attributes:
        level_a: Level of factor A of the repeated cell
        level_b: Level of factor B of the repeated cell
    """

    def __init__(
        self,
        message: str,
        level_a: str | None = None,
        level_b: str | None = None,
    ):
        super().__init__(message)
        self.level_a = level_a
        self.level_b = level_b


class UnbalancedDesignError(FactorialDesignError):
    """
    Cells of a factorial design have different sample counts.

    Attributes:
        cell: (level_a, level_b) of the first mismatching cell
        expected_n: Sample count of the first cell
        actual_n: Sample count of the mismatching cell
    """

    def __init__(
        self,
        message: str,
        cell: tuple[str, str] | None = None,
        expected_n: int | None = None,
        actual_n: int | None = None,
    ):
        super().__init__(message)
        self.cell = cell
        self.expected_n = expected_n
        self.actual_n = actual_n


class NumericalError(StatCompareError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateDesignError(NumericalError):
    """
    Denominator degrees of freedom are zero or negative.

    Raised when the total number of observations does not exceed the
    number of groups (or cells), so no error variance can be estimated.

    Attributes:
        df: The offending degrees of freedom
    """

    def __init__(self, message: str, df: int | None = None):
        super().__init__(message)
        self.df = df


class UndefinedResultError(NumericalError, ArithmeticError):
    """
    A statistic has a zero denominator and no meaningful value.

    Raised for the sample standard deviation of a single observation and
    for a t statistic with zero standard error. Also an ArithmeticError so
    callers that only know the builtin hierarchy can catch it.
    """
    pass
