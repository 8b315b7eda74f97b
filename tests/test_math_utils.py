"""Tests for the chi-squared helpers."""

from __future__ import annotations

import numpy as np
import pytest

from shared.math_utils import category_counts, chi_squared_test, uniform_expectation


class TestCategoryCounts:
    def test_counts_aligned_with_categories(self):
        counts = category_counts("abacab", ["a", "b", "c", "d"])
        assert counts.tolist() == [3.0, 2.0, 1.0, 0.0]

    def test_unknown_observation(self):
        with pytest.raises(ValueError, match="outside categories"):
            category_counts("abz", ["a", "b"])


class TestChiSquared:
    def test_perfect_fit(self):
        chi2, p = chi_squared_test(np.array([10.0, 10.0, 10.0]), uniform_expectation(30, 3))
        assert chi2 == 0.0
        assert p == pytest.approx(1.0)

    def test_known_value(self):
        # chi2 = 4.0 with 1 degree of freedom -> p = 0.0455
        chi2, p = chi_squared_test(np.array([60.0, 40.0]), uniform_expectation(100, 2))
        assert chi2 == pytest.approx(4.0)
        assert p == pytest.approx(0.0455, abs=1e-4)

    def test_large_statistic(self):
        chi2, p = chi_squared_test(np.array([100.0, 0.0, 0.0, 0.0]), uniform_expectation(100, 4))
        assert chi2 == pytest.approx(300.0)
        assert p < 1e-10

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            chi_squared_test(np.array([1.0, 2.0]), np.array([1.0, 1.0, 1.0]))

    def test_zero_expectation(self):
        with pytest.raises(ValueError):
            chi_squared_test(np.array([1.0, 2.0]), np.array([0.0, 3.0]))

    def test_uniform_expectation(self):
        assert uniform_expectation(12, 4).tolist() == [3.0, 3.0, 3.0, 3.0]
