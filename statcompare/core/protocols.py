"""
Core protocols for statcompare.

These define structural interfaces for collaborators the engine calls but
does not implement. We use Protocol (structural typing) rather than ABC
(nominal typing) so any object with the right methods can be plugged in.

Design Principles:
    - Minimal contracts: prescribe only what the engine calls
    - Stateless: providers hold no per-run state
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DistributionProvider(Protocol):
    """
    Supplies tail probabilities for computed test statistics.

    The engine's job ends at a statistic and its degrees of freedom; a
    DistributionProvider turns those into p-values. The default
    implementation is statcompare.core.distributions.ScipyDistributions.
    """

    @property
    def name(self) -> str:
        """Provider identifier, recorded in Result.info."""
        ...

    def t_two_sided(self, statistic: float, df: float) -> float:
        """
        Two-sided p-value of a Student-t statistic.

        Args:
            statistic: Observed t
            df: Degrees of freedom (> 0)

        Returns:
            P(|T| >= |statistic|)
        """
        ...

    def f_upper_tail(self, statistic: float, df_num: float, df_den: float) -> float:
        """
        Upper-tail p-value of an F statistic.

        Args:
            statistic: Observed F (>= 0)
            df_num: Numerator degrees of freedom (> 0)
            df_den: Denominator degrees of freedom (> 0)

        Returns:
            P(F >= statistic)
        """
        ...
