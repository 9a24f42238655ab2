"""
Default distribution collaborator backed by scipy.stats.

Also provides the helpers solvers use to attach p-values to statistics
that may be Sentinel values.
"""

from scipy import stats as sp_stats

from statcompare.core.protocols import DistributionProvider
from statcompare.core.sentinels import Sentinel, Statistic


class ScipyDistributions:
    """Tail probabilities from scipy.stats survival functions."""

    @property
    def name(self) -> str:
        return 'scipy'

    def t_two_sided(self, statistic: float, df: float) -> float:
        return float(2.0 * sp_stats.t.sf(abs(statistic), df))

    def f_upper_tail(self, statistic: float, df_num: float, df_den: float) -> float:
        return float(sp_stats.f.sf(statistic, df_num, df_den))


def default_distributions() -> DistributionProvider:
    """Return the provider used when a caller asks for p-values without choosing one."""
    return ScipyDistributions()


def f_pvalue(
    provider: DistributionProvider | None,
    f_value: Statistic,
    df_num: int,
    df_den: int,
) -> float | None:
    """
    p-value for an F statistic, or None if it cannot be computed.

    An INFINITE statistic lies beyond every quantile (p = 0.0); an
    UNDEFINED statistic has no p-value.
    """
    if provider is None or f_value is Sentinel.UNDEFINED:
        return None
    if f_value is Sentinel.INFINITE:
        return 0.0
    return provider.f_upper_tail(f_value, df_num, df_den)


def t_pvalue(
    provider: DistributionProvider | None,
    t_value: float,
    df: int,
) -> float | None:
    """Two-sided p-value for a t statistic, or None without a provider."""
    if provider is None or df <= 0:
        return None
    return provider.t_two_sided(t_value, df)
