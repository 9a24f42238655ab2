"""
Tests for two-way ANOVA (main effects only).

Validates:
    - Hand-computed sums of squares on an additive 2x2 design
    - Degrees of freedom and MS ratios
    - Partition of the total SS when there is no interaction
    - Sentinel F when cells have no within-cell variation
    - p-values from the distribution collaborator
    - Degenerate designs and precondition errors surfacing
    - Grand mean agreement with one-way ANOVA over the same cells
    - Per-factor interpretation in the summary
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from statcompare.anova import anova_oneway, anova_twoway, decompose_factors
from statcompare.core.exceptions import DegenerateDesignError, MissingCombinationError
from statcompare.core.sentinels import Sentinel


class TestAdditiveDesign:

    def test_sums_of_squares(self, twoway_additive):
        result = anova_twoway(twoway_additive)
        p = result.params
        assert p.grand_mean == pytest.approx(4.5)
        assert p.ss_a == pytest.approx(48.0)
        assert p.ss_b == pytest.approx(3.0)
        assert p.ss_error == pytest.approx(8.0)

    def test_degrees_of_freedom(self, twoway_additive):
        result = anova_twoway(twoway_additive)
        assert result.df_a == 1
        assert result.df_b == 1
        assert result.df_error == 8

    def test_f_values(self, twoway_additive):
        result = anova_twoway(twoway_additive)
        assert result.ms_error == pytest.approx(1.0)
        assert result.f_a == pytest.approx(48.0)
        assert result.f_b == pytest.approx(3.0)

    def test_marginal_means(self, twoway_additive):
        p = anova_twoway(twoway_additive).params
        assert p.means_a == pytest.approx({'Control': 2.5, 'Treated': 6.5})
        assert p.means_b == pytest.approx({'DrugX': 4.0, 'Placebo': 5.0})
        assert p.cell_means[('Treated', 'Placebo')] == pytest.approx(7.0)

    def test_partition_without_interaction(self, twoway_additive):
        result = anova_twoway(twoway_additive)
        y = np.concatenate([np.asarray(v) for _, v in twoway_additive])
        sst = np.sum((y - y.mean()) ** 2)
        p = result.params
        np.testing.assert_allclose(p.ss_a + p.ss_b + p.ss_error, sst, rtol=1e-12)

    def test_accepts_design(self, twoway_additive):
        design = decompose_factors(twoway_additive)
        assert anova_twoway(design).f_a == pytest.approx(48.0)

    def test_table(self, twoway_additive):
        table = anova_twoway(twoway_additive).table
        assert [row.term for row in table] == ['Factor A', 'Factor B', 'Error']
        assert table[2].f_value is None
        for row in table:
            np.testing.assert_allclose(row.mean_sq, row.sum_sq / row.df, rtol=1e-12)


class TestGrandMean:

    def test_matches_pooled_oneway(self, twoway_additive):
        oneway = anova_oneway(twoway_additive, grand_mean='pooled')
        twoway = anova_twoway(twoway_additive)
        assert oneway.grand_mean == pytest.approx(twoway.grand_mean)
        assert twoway.grand_mean == pytest.approx(4.5)

    def test_policies_agree_on_balanced_cells(self, twoway_additive):
        unweighted = anova_oneway(twoway_additive, grand_mean='unweighted')
        assert unweighted.grand_mean == pytest.approx(anova_twoway(twoway_additive).grand_mean)

    def test_policies_differ_when_unbalanced(self):
        groups = [[1.0, 2.0, 3.0], [10.0, 11.0, 12.0, 13.0, 14.0]]
        pooled = anova_oneway(groups, grand_mean='pooled')
        unweighted = anova_oneway(groups, grand_mean='unweighted')
        assert pooled.grand_mean == pytest.approx(8.25)
        assert unweighted.grand_mean == pytest.approx(7.0)
        assert not pooled.warnings
        assert len(unweighted.warnings) == 1


class TestPValues:

    def test_p_values_match_f_distribution(self, twoway_2x3, scipy_distributions):
        result = anova_twoway(twoway_2x3, distributions=scipy_distributions)
        assert result.df_a == 1
        assert result.df_b == 2
        assert result.df_error == 60 - 6
        assert result.p_a == pytest.approx(
            sp_stats.f.sf(result.f_a, result.df_a, result.df_error), rel=1e-12
        )
        assert result.p_b == pytest.approx(
            sp_stats.f.sf(result.f_b, result.df_b, result.df_error), rel=1e-12
        )

    def test_no_provider(self, twoway_additive):
        result = anova_twoway(twoway_additive)
        assert result.p_a is None
        assert result.p_b is None


class TestSentinels:

    def test_zero_error_variance(self, scipy_distributions):
        groups = [
            ('A-X', [1.0, 1.0]), ('A-Y', [1.0, 1.0]),
            ('B-X', [2.0, 2.0]), ('B-Y', [2.0, 2.0]),
        ]
        result = anova_twoway(groups, distributions=scipy_distributions)
        assert result.ms_error == 0.0
        assert result.f_a is Sentinel.INFINITE
        assert result.f_b is Sentinel.UNDEFINED
        assert result.p_a == 0.0
        assert result.p_b is None


class TestErrors:

    def test_one_observation_per_cell(self):
        groups = [('A-X', [1.0]), ('A-Y', [2.0]), ('B-X', [3.0]), ('B-Y', [4.0])]
        with pytest.raises(DegenerateDesignError) as exc_info:
            anova_twoway(groups)
        assert exc_info.value.df == 0

    def test_design_errors_propagate(self):
        groups = [('A-X', [1, 2, 3]), ('A-Y', [1, 2, 3]), ('B-X', [1, 2, 3])]
        with pytest.raises(MissingCombinationError):
            anova_twoway(groups)


class TestPresentation:

    def test_summary(self, twoway_additive):
        text = anova_twoway(twoway_additive).summary()
        assert "Factor A levels: Control, Treated" in text
        assert "Factor B levels: DrugX, Placebo" in text
        assert "Interaction term not estimated." in text
        assert "48.000" in text

    def test_rounded(self, twoway_additive):
        rounded = anova_twoway(twoway_additive).rounded()
        assert rounded['F_A'] == 48.0
        assert rounded['F_B'] == 3.0
        assert rounded['df_error'] == 8

    def test_info(self, twoway_additive):
        info = anova_twoway(twoway_additive).info
        assert info['method'] == 'twoway_main_effects'
        assert info['interaction'] is False

    def test_interpretation_per_factor(self, twoway_additive, scipy_distributions):
        text = anova_twoway(twoway_additive, distributions=scipy_distributions).interpretation()
        line_a, line_b = text.split("\n")
        assert line_a.startswith("Factor A: statistically significant main effect (p ")
        assert line_b == "Factor B: no statistically significant main effect (p >= 0.05)."

    def test_interpretation_alpha(self, twoway_additive, scipy_distributions):
        result = anova_twoway(twoway_additive, distributions=scipy_distributions)
        line_b = result.interpretation(alpha=0.2).split("\n")[1]
        assert line_b.startswith("Factor B: statistically significant main effect (p = 0.1")

    def test_interpretation_with_sentinels(self, scipy_distributions):
        groups = [
            ('A-X', [1.0, 1.0]), ('A-Y', [1.0, 1.0]),
            ('B-X', [2.0, 2.0]), ('B-Y', [2.0, 2.0]),
        ]
        text = anova_twoway(groups, distributions=scipy_distributions).interpretation()
        assert text == (
            "Factor A: statistically significant main effect (p < 0.0001).\n"
            "Factor B: no p-value available."
        )

    def test_interpretation_without_provider(self, twoway_additive):
        result = anova_twoway(twoway_additive)
        assert result.interpretation() == "No p-value available."
        assert "Factor A:" not in result.summary()

    def test_summary_includes_interpretation(self, twoway_additive, scipy_distributions):
        result = anova_twoway(twoway_additive, distributions=scipy_distributions)
        text = result.summary()
        assert result.interpretation() in text
        assert text.index("Interaction term not estimated.") < text.index("Factor A: statistically")
