"""
Tests for descriptive statistics.

Validates:
    - mean / sum_squared_deviation / variance / standard_deviation
    - Population vs sample divisor and the n=1 sample SD error
    - Properties: constant sample, shift and scale behavior,
      population variance <= sample variance
    - describe(): full precision values, rounding only on display
"""

import numpy as np
import pytest

from statcompare.core.exceptions import UndefinedResultError, ValidationError
from statcompare.descriptive import (
    Dataset,
    describe,
    mean,
    standard_deviation,
    sum_squared_deviation,
    variance,
)


# =====================================================================
# Scalar statistics
# =====================================================================


class TestScalarStatistics:

    def test_mean(self, shifted_pair):
        x, y = shifted_pair
        assert mean(x) == 3.0
        assert mean(y) == 4.0

    def test_sum_squared_deviation(self):
        assert sum_squared_deviation([1, 2, 3]) == pytest.approx(2.0)

    def test_population_sd(self, shifted_pair):
        x, _ = shifted_pair
        assert standard_deviation(x) == pytest.approx(np.sqrt(2.0), rel=1e-12)
        assert standard_deviation(x) == pytest.approx(np.std(x, ddof=0), rel=1e-12)

    def test_sample_sd(self, shifted_pair):
        x, _ = shifted_pair
        assert standard_deviation(x, 'sample') == pytest.approx(np.sqrt(2.5), rel=1e-12)
        assert standard_deviation(x, 'sample') == pytest.approx(np.std(x, ddof=1), rel=1e-12)

    def test_variance_kinds(self):
        assert variance([2, 4, 6]) == pytest.approx(8.0 / 3.0)
        assert variance([2, 4, 6], 'sample') == pytest.approx(4.0)

    def test_single_observation(self):
        assert mean([5.0]) == 5.0
        assert standard_deviation([5.0], 'population') == 0.0

    def test_sample_sd_undefined_for_one(self):
        with pytest.raises(UndefinedResultError, match="undefined for n=1"):
            standard_deviation([5.0], 'sample')

    def test_sample_sd_error_is_arithmetic(self):
        with pytest.raises(ArithmeticError):
            standard_deviation([5.0], 'sample')

    def test_empty_mean(self):
        with pytest.raises(ValidationError):
            mean([])

    def test_unknown_kind(self):
        with pytest.raises(ValidationError, match="kind"):
            standard_deviation([1, 2, 3], 'unbiased')

    def test_full_precision(self):
        sd = standard_deviation([1.0, 2.0, 4.0])
        assert sd != round(sd, 3)


# =====================================================================
# Properties
# =====================================================================


class TestProperties:

    @pytest.mark.parametrize("c", [0.0, -3.5, 1e6])
    def test_constant_sample(self, c):
        data = [c] * 5
        assert mean(data) == pytest.approx(c)
        assert standard_deviation(data, 'population') == 0.0
        assert standard_deviation(data, 'sample') == 0.0

    def test_population_le_sample(self, rng):
        for n in (2, 3, 10, 50):
            x = rng.normal(0.0, 3.0, n)
            assert variance(x, 'population') <= variance(x, 'sample')

    def test_shift_invariance(self, rng):
        x = rng.normal(10.0, 2.0, 30)
        for kind in ('population', 'sample'):
            assert standard_deviation(x + 123.4, kind) == pytest.approx(
                standard_deviation(x, kind), rel=1e-9
            )

    @pytest.mark.parametrize("scale", [2.0, -0.5, 10.0])
    def test_scale(self, rng, scale):
        x = rng.normal(0.0, 1.0, 20)
        assert standard_deviation(x * scale) == pytest.approx(
            abs(scale) * standard_deviation(x), rel=1e-12
        )


# =====================================================================
# describe()
# =====================================================================


class TestDescribe:

    def test_values(self):
        result = describe([4.0, 1.0, 3.0, 2.0, 5.0])
        assert result.n == 5
        assert result.mean == 3.0
        assert result.median == 3.0
        assert result.minimum == 1.0
        assert result.maximum == 5.0
        assert result.range == 4.0
        assert result.sd_population == pytest.approx(np.sqrt(2.0))
        assert result.sd_sample == pytest.approx(np.sqrt(2.5))
        assert result.params.sum_squared_deviation == pytest.approx(10.0)

    def test_sd_accessor(self):
        result = describe([1, 2, 3, 4, 5])
        assert result.sd('sample') == result.sd_sample
        assert result.sd('population') == result.sd_population
        with pytest.raises(ValidationError):
            result.sd('other')

    def test_rounded(self):
        result = describe([1, 2, 3, 4, 5])
        rounded = result.rounded()
        assert rounded['sd_population'] == 1.414
        assert rounded['sd_sample'] == 1.581
        assert rounded['n'] == 5
        assert result.sd_population != 1.414

    def test_label_from_dataset(self):
        result = describe(Dataset.from_text("Control", "1, 2, 3"))
        assert result.label == "Control"
        assert result.summary().startswith("Control")

    def test_summary_text(self):
        text = describe([1, 2, 3, 4, 5], label="A").summary()
        assert "Sample Size" in text
        assert "1.581" in text
        assert "1.414" in text

    def test_requires_min_samples(self):
        with pytest.raises(ValidationError, match="too few samples"):
            describe([1.0, 2.0])

    def test_info_and_timing(self):
        result = describe([1, 2, 3])
        assert result.info['method'] == 'describe'
        assert 'moments' in result.timing
        assert 'total_seconds' in result.timing
