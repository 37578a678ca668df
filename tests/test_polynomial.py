"""Tests for sss256.polynomial module."""

from __future__ import annotations

import numpy as np
import pytest

from sss256 import gf256
from sss256.errors import DivisionByZero
from sss256.polynomial import evaluate, evaluate_columns, lagrange_basis_at_zero


class TestEvaluate:
    def test_constant(self):
        assert evaluate([5], 200) == 5

    def test_linear(self):
        assert evaluate([0x41, 1], 3) == 0x41 ^ 3

    def test_quadratic(self):
        assert evaluate([0, 0, 1], 2) == 4
        assert evaluate([1, 1, 1], 2) == 1 ^ 2 ^ 4

    def test_at_zero_is_constant_term(self):
        assert evaluate([9, 200, 13], 0) == 9

    def test_empty_is_zero(self):
        assert evaluate([], 7) == 0


class TestEvaluateColumns:
    def test_rows_are_independent_polynomials(self):
        coeffs = np.array([[0x41, 1], [0x42, 7], [0, 0]], dtype=np.uint8)
        for x in (1, 2, 3, 254):
            got = evaluate_columns(coeffs, x)
            expected = [evaluate([int(c) for c in row], x) for row in coeffs]
            assert got.tolist() == expected

    def test_no_rows(self):
        coeffs = np.zeros((0, 3), dtype=np.uint8)
        assert evaluate_columns(coeffs, 5).size == 0


class TestLagrangeBasis:
    def test_two_points(self):
        # L_0(0) for xs = [1, 2]: x_1 / (x_0 ^ x_1) = 2 / 3
        assert lagrange_basis_at_zero([1, 2], 0) == gf256.divide(2, 3)

    def test_bases_sum_to_one(self):
        """Interpolating the constant 1 must give 1 at x = 0."""
        xs = [3, 17, 99, 250]
        total = 0
        for i in range(len(xs)):
            total ^= lagrange_basis_at_zero(xs, i)
        assert total == 1

    def test_recovers_constant_term(self):
        coeffs = [0x7E, 0x11, 0xC3]
        xs = [4, 9, 200]
        ys = [evaluate(coeffs, x) for x in xs]
        value = 0
        for i, y in enumerate(ys):
            value ^= gf256.multiply(y, lagrange_basis_at_zero(xs, i))
        assert value == 0x7E

    def test_duplicate_x(self):
        with pytest.raises(DivisionByZero):
            lagrange_basis_at_zero([5, 5], 0)
