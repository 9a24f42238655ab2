"""
Tests for sentinels, settings, formatting and the distribution collaborator.

Validates:
    - ratio() maps zero denominators to INFINITE / UNDEFINED
    - Formatting rounds only at the presentation boundary
    - EngineSettings defaults and overrides
    - ScipyDistributions matches scipy.stats and satisfies the protocol
    - f_pvalue / t_pvalue sentinel and missing-provider handling
"""

from dataclasses import FrozenInstanceError

import pytest
from scipy import stats as sp_stats

from statcompare.core.distributions import (
    ScipyDistributions,
    default_distributions,
    f_pvalue,
    t_pvalue,
)
from statcompare.core.formatting import (
    format_pvalue,
    format_statistic,
    is_significant,
    round_statistic,
)
from statcompare.core.protocols import DistributionProvider
from statcompare.core.sentinels import Sentinel, is_sentinel, ratio
from statcompare.core.settings import DEFAULT_SETTINGS


# =====================================================================
# Sentinels
# =====================================================================


class TestRatio:

    def test_regular(self):
        assert ratio(27.0, 1.0) == 27.0

    def test_positive_over_zero(self):
        assert ratio(3.0, 0.0) is Sentinel.INFINITE

    def test_zero_over_zero(self):
        assert ratio(0.0, 0.0) is Sentinel.UNDEFINED

    def test_zero_numerator(self):
        assert ratio(0.0, 2.0) == 0.0

    def test_str(self):
        assert str(Sentinel.INFINITE) == 'Infinity'
        assert str(Sentinel.UNDEFINED) == 'undefined'

    def test_is_sentinel(self):
        assert is_sentinel(Sentinel.UNDEFINED)
        assert not is_sentinel(float('inf'))


# =====================================================================
# Settings
# =====================================================================


class TestSettings:

    def test_defaults(self):
        assert DEFAULT_SETTINGS.min_samples == 3
        assert DEFAULT_SETTINGS.delimiter == ','
        assert DEFAULT_SETTINGS.display_decimals == 3
        assert DEFAULT_SETTINGS.significance_level == 0.05
        assert DEFAULT_SETTINGS.p_value_floor == 1e-4

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_SETTINGS.min_samples = 2

    def test_with_overrides(self):
        custom = DEFAULT_SETTINGS.with_overrides(delimiter=';', min_samples=2)
        assert custom.delimiter == ';'
        assert custom.min_samples == 2
        assert DEFAULT_SETTINGS.delimiter == ','


# =====================================================================
# Formatting
# =====================================================================


class TestFormatting:

    def test_round_default_decimals(self):
        assert round_statistic(1.41421356) == 1.414

    def test_round_sentinel_passthrough(self):
        assert round_statistic(Sentinel.INFINITE) is Sentinel.INFINITE

    def test_format_statistic(self):
        assert format_statistic(-1.0) == '-1.000'
        assert format_statistic(27.0, 1) == '27.0'

    def test_format_statistic_sentinels(self):
        assert format_statistic(Sentinel.INFINITE) == 'Infinity'
        assert format_statistic(Sentinel.UNDEFINED) == 'undefined'

    def test_format_statistic_none(self):
        assert format_statistic(None) == 'N/A'

    def test_format_pvalue_floor(self):
        assert format_pvalue(1e-7) == '< 0.0001'
        assert format_pvalue(0.0) == '< 0.0001'

    def test_format_pvalue_regular(self):
        assert format_pvalue(0.34659) == '0.3466'

    def test_format_pvalue_missing(self):
        assert format_pvalue(None) == 'N/A'
        assert format_pvalue(float('nan')) == 'N/A'

    def test_is_significant(self):
        assert is_significant(0.01)
        assert not is_significant(0.05)
        assert not is_significant(None)
        assert is_significant(0.08, alpha=0.1)


# =====================================================================
# Distributions
# =====================================================================


class TestDistributions:

    def test_satisfies_protocol(self):
        assert isinstance(ScipyDistributions(), DistributionProvider)
        assert isinstance(default_distributions(), DistributionProvider)

    def test_name(self):
        assert ScipyDistributions().name == 'scipy'

    def test_t_two_sided_matches_scipy(self):
        p = ScipyDistributions().t_two_sided(-1.0, 8)
        assert p == pytest.approx(2 * sp_stats.t.sf(1.0, 8), rel=1e-12)

    def test_t_two_sided_symmetric(self):
        d = ScipyDistributions()
        assert d.t_two_sided(2.0, 10) == pytest.approx(d.t_two_sided(-2.0, 10))

    def test_f_upper_tail_matches_scipy(self):
        p = ScipyDistributions().f_upper_tail(27.0, 2, 6)
        assert p == pytest.approx(sp_stats.f.sf(27.0, 2, 6), rel=1e-12)

    def test_f_pvalue_sentinels(self, scipy_distributions):
        assert f_pvalue(scipy_distributions, Sentinel.INFINITE, 2, 6) == 0.0
        assert f_pvalue(scipy_distributions, Sentinel.UNDEFINED, 2, 6) is None

    def test_no_provider(self):
        assert f_pvalue(None, 3.0, 2, 6) is None
        assert t_pvalue(None, 1.0, 8) is None

    def test_t_pvalue_zero_df(self, scipy_distributions):
        assert t_pvalue(scipy_distributions, 1.0, 0) is None
