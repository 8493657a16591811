"""
Unit Tests for the Statistics Module

Reference values come from numpy (var/cov/corrcoef) and from literal vectors
for real and complex sequences.

Run:
    pytest tests/test_stats.py -v
"""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest

from spectral_core import (
    sum as seq_sum,
    mean,
    dot_product,
    variance,
    standard_deviation,
    covariance,
    pearson_correlation,
    normalize_by_size_of_list,
    scale_by_size_of_list,
    approx_equal,
    InvalidArgumentError,
)

EPS = 1e-9

COMPLEX_LIST_1 = [1 + 0j, -1 + 0j, -1 + 0j, 1 + 1j]
COMPLEX_LIST_2 = [-1 + 0j, 1 + 0j, -1 + 0j, 1 + 1j]

DOUBLE_LIST_1 = [10.0, 15.0, 5.0]
DOUBLE_LIST_2 = [10.0, -15.0, 5.0]
DOUBLE_LIST_3 = [1.0, -1.0, -1.0, 1.0]
DOUBLE_LIST_4 = [-1.0, 1.0, -1.0, 1.0]


def random_complex(n, seed=0):
    rng = np.random.default_rng(seed)
    return rng.standard_normal(n) + 1j * rng.standard_normal(n)


class TestComplexStatistics:
    """Statistics over complex sequences."""

    def test_sum(self):
        assert seq_sum(COMPLEX_LIST_1) == 1j
        assert seq_sum(COMPLEX_LIST_2) == 1j

    def test_mean(self):
        assert mean(COMPLEX_LIST_1) == 0.25j
        assert mean(COMPLEX_LIST_2) == 0.25j

    def test_dot_product(self):
        product_ab = dot_product(COMPLEX_LIST_1, COMPLEX_LIST_2)
        assert approx_equal(product_ab, -1 + 2j, EPS)
        assert approx_equal(dot_product(COMPLEX_LIST_2, COMPLEX_LIST_1), -1 + 2j, EPS)
        # Same inputs, same result
        assert dot_product(COMPLEX_LIST_1, COMPLEX_LIST_2) == product_ab

    def test_dot_product_is_bilinear(self):
        assert approx_equal(dot_product([1j], [1j]), -1, EPS)

    def test_variance(self):
        var_a = variance(COMPLEX_LIST_1)
        assert isinstance(var_a, np.floating)
        assert var_a == pytest.approx(1.5833333333333333, abs=EPS)
        assert variance(COMPLEX_LIST_2) == pytest.approx(1.5833333333333333, abs=EPS)
        assert standard_deviation(COMPLEX_LIST_1) ** 2 == pytest.approx(var_a, abs=EPS)

    def test_variance_matches_numpy(self):
        x = random_complex(50)
        assert variance(x) == pytest.approx(np.var(x, ddof=1), abs=EPS)

    def test_standard_deviation(self):
        std_a = standard_deviation(COMPLEX_LIST_1)
        assert std_a == pytest.approx(1.2583057392117916, abs=EPS)
        assert std_a == pytest.approx(np.sqrt(variance(COMPLEX_LIST_1)), abs=EPS)
        assert standard_deviation(COMPLEX_LIST_2) == pytest.approx(1.2583057392117916, abs=EPS)

    def test_covariance(self):
        cov_ab = covariance(COMPLEX_LIST_1, COMPLEX_LIST_2)
        cov_ba = covariance(COMPLEX_LIST_2, COMPLEX_LIST_1)
        assert approx_equal(cov_ab, 0.25, EPS)
        assert approx_equal(cov_ba, 0.25, EPS)
        assert approx_equal(cov_ab, cov_ba, EPS)

    def test_covariance_matches_numpy(self):
        a = random_complex(40, seed=1)
        b = random_complex(40, seed=2)
        assert approx_equal(covariance(a, b), np.cov(a, b)[0, 1], EPS)
        assert approx_equal(covariance(a, a), variance(a), EPS)

    def test_covariance_bilinear(self):
        cov_ab = covariance(COMPLEX_LIST_1, COMPLEX_LIST_2, conjugate=False)
        assert approx_equal(cov_ab, -0.25 + 2j / 3, EPS)
        assert approx_equal(cov_ab, covariance(COMPLEX_LIST_2, COMPLEX_LIST_1, conjugate=False), EPS)

    def test_covariance_argument_order(self):
        """Swapping arguments conjugates the default form; the bilinear form is symmetric."""
        a = random_complex(25, seed=4)
        b = random_complex(25, seed=5)
        cov_ab = covariance(a, b)
        cov_ba = covariance(b, a)
        assert abs(cov_ab.imag) > EPS
        assert approx_equal(cov_ba, np.conj(cov_ab), EPS)
        assert not approx_equal(cov_ba, cov_ab, EPS)

        bilinear_ab = covariance(a, b, conjugate=False)
        bilinear_ba = covariance(b, a, conjugate=False)
        assert approx_equal(bilinear_ab, bilinear_ba, EPS)
        assert not approx_equal(bilinear_ab, cov_ab, EPS)

    def test_pearson_correlation(self):
        corr_ab = pearson_correlation(COMPLEX_LIST_1, COMPLEX_LIST_2)
        corr_ba = pearson_correlation(COMPLEX_LIST_2, COMPLEX_LIST_1)
        assert approx_equal(corr_ab, 0.15789473684210528, EPS)
        assert approx_equal(corr_ba, 0.15789473684210528, EPS)
        assert approx_equal(pearson_correlation(COMPLEX_LIST_1, COMPLEX_LIST_1), 1, EPS)
        assert approx_equal(pearson_correlation(COMPLEX_LIST_2, COMPLEX_LIST_2), 1, EPS)

    def test_pearson_self_correlation_random(self):
        for seed in range(5):
            x = random_complex(20, seed=seed)
            assert approx_equal(pearson_correlation(x, x), 1 + 0j, EPS)

    def test_normalize_by_size_of_list(self):
        normalized = normalize_by_size_of_list(COMPLEX_LIST_1)
        assert len(normalized) == len(COMPLEX_LIST_1)
        for value, original in zip(normalized, COMPLEX_LIST_1):
            assert value == original / len(COMPLEX_LIST_1)

    def test_scale_by_size_of_list(self):
        scaled = scale_by_size_of_list(COMPLEX_LIST_1)
        assert len(scaled) == len(COMPLEX_LIST_1)
        for value, original in zip(scaled, COMPLEX_LIST_1):
            assert value == original * len(COMPLEX_LIST_1)

    def test_complex64_narrows(self):
        x = np.array(COMPLEX_LIST_1, dtype=np.complex64)
        assert isinstance(mean(x), np.complex64)
        assert isinstance(variance(x), np.float32)
        assert normalize_by_size_of_list(x).dtype == np.complex64


class TestRealStatistics:
    """Statistics over real sequences return real scalars."""

    def test_sum(self):
        assert seq_sum(DOUBLE_LIST_1) == pytest.approx(30.0, abs=EPS)
        assert seq_sum(DOUBLE_LIST_2) == pytest.approx(0.0, abs=EPS)
        assert isinstance(seq_sum(DOUBLE_LIST_1), np.floating)

    def test_sum_empty(self):
        assert seq_sum([]) == 0

    def test_mean(self):
        assert mean(DOUBLE_LIST_1) == pytest.approx(10.0, abs=EPS)
        assert mean(DOUBLE_LIST_2) == pytest.approx(0.0, abs=EPS)

    def test_dot_product(self):
        assert dot_product(DOUBLE_LIST_1, DOUBLE_LIST_2) == pytest.approx(-100.0, abs=EPS)
        assert dot_product(DOUBLE_LIST_3, DOUBLE_LIST_4) == pytest.approx(0.0, abs=EPS)
        assert dot_product(DOUBLE_LIST_4, DOUBLE_LIST_3) == pytest.approx(0.0, abs=EPS)
        assert dot_product(DOUBLE_LIST_3, DOUBLE_LIST_3) == pytest.approx(4.0, abs=EPS)
        assert dot_product(DOUBLE_LIST_4, DOUBLE_LIST_4) == pytest.approx(4.0, abs=EPS)

    def test_variance(self):
        assert variance(DOUBLE_LIST_3) == pytest.approx(1.3333333333333333, abs=EPS)
        assert variance(DOUBLE_LIST_4) == pytest.approx(1.3333333333333333, abs=EPS)
        assert standard_deviation(DOUBLE_LIST_3) ** 2 == pytest.approx(variance(DOUBLE_LIST_3), abs=EPS)

    def test_standard_deviation(self):
        assert standard_deviation(DOUBLE_LIST_3) == pytest.approx(1.1547005383792515, abs=EPS)
        assert standard_deviation(DOUBLE_LIST_4) == pytest.approx(1.1547005383792515, abs=EPS)

    def test_covariance(self):
        cov_ab = covariance(DOUBLE_LIST_3, DOUBLE_LIST_4)
        cov_ba = covariance(DOUBLE_LIST_4, DOUBLE_LIST_3)
        assert cov_ab == pytest.approx(0.0, abs=EPS)
        assert cov_ba == pytest.approx(0.0, abs=EPS)
        assert isinstance(cov_ab, np.floating)

    def test_covariance_matches_numpy(self):
        rng = np.random.default_rng(3)
        a = rng.standard_normal(30)
        b = rng.standard_normal(30)
        assert covariance(a, b) == pytest.approx(np.cov(a, b)[0, 1], abs=EPS)
        assert covariance(a, b) == pytest.approx(covariance(b, a), abs=EPS)

    def test_pearson_correlation(self):
        assert pearson_correlation(DOUBLE_LIST_3, DOUBLE_LIST_4) == pytest.approx(0.0, abs=EPS)
        assert pearson_correlation(DOUBLE_LIST_4, DOUBLE_LIST_3) == pytest.approx(0.0, abs=EPS)
        assert pearson_correlation(DOUBLE_LIST_3, DOUBLE_LIST_3) == pytest.approx(1.0, abs=EPS)
        assert pearson_correlation(DOUBLE_LIST_4, DOUBLE_LIST_4) == pytest.approx(1.0, abs=EPS)

    def test_pearson_matches_numpy(self):
        rng = np.random.default_rng(4)
        a = rng.standard_normal(25)
        b = 0.5 * a + rng.standard_normal(25)
        assert pearson_correlation(a, b) == pytest.approx(np.corrcoef(a, b)[0, 1], abs=EPS)

    def test_float32_narrows(self):
        x = np.array(DOUBLE_LIST_3, dtype=np.float32)
        assert isinstance(mean(x), np.float32)
        assert isinstance(variance(x), np.float32)
        assert isinstance(standard_deviation(x), np.float32)
        assert variance(x) == pytest.approx(1.3333333, abs=1e-6)

    def test_integer_input(self):
        assert mean([1, 2, 3, 4]) == pytest.approx(2.5, abs=EPS)
        assert normalize_by_size_of_list([2, 4]).tolist() == [1.0, 2.0]
        assert scale_by_size_of_list([2, 4]).tolist() == [4.0, 8.0]

    def test_empty_scale_and_normalize(self):
        assert len(normalize_by_size_of_list([])) == 0
        assert len(scale_by_size_of_list([])) == 0

    def test_inputs_not_modified(self):
        x = np.array(DOUBLE_LIST_1)
        normalize_by_size_of_list(x)
        scale_by_size_of_list(x)
        assert x.tolist() == DOUBLE_LIST_1


class TestStatisticsErrors:
    """Length contract violations raise InvalidArgumentError."""

    def test_mean_empty(self):
        with pytest.raises(InvalidArgumentError):
            mean([])

    def test_dot_product_mismatch(self):
        with pytest.raises(InvalidArgumentError):
            dot_product(COMPLEX_LIST_1, [])
        with pytest.raises(InvalidArgumentError):
            dot_product(DOUBLE_LIST_3, DOUBLE_LIST_1)

    def test_dot_product_empty(self):
        with pytest.raises(InvalidArgumentError):
            dot_product([], [])

    def test_covariance_mismatch(self):
        with pytest.raises(InvalidArgumentError):
            covariance(COMPLEX_LIST_1, [])
        with pytest.raises(InvalidArgumentError):
            covariance(DOUBLE_LIST_3, DOUBLE_LIST_1)

    def test_insufficient_samples(self):
        with pytest.raises(InvalidArgumentError):
            variance([1.0])
        with pytest.raises(InvalidArgumentError):
            standard_deviation([])
        with pytest.raises(InvalidArgumentError):
            covariance([1.0], [2.0])
        with pytest.raises(InvalidArgumentError):
            pearson_correlation([1.0], [2.0])

    def test_pearson_constant_sequence(self):
        with pytest.raises(InvalidArgumentError):
            pearson_correlation([1.0, 1.0, 1.0], [1.0, 2.0, 3.0])

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            mean([])

    def test_rejects_multidimensional(self):
        with pytest.raises(InvalidArgumentError):
            seq_sum(np.zeros((2, 2)))
