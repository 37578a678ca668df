"""Polynomial evaluation and Lagrange basis coefficients over GF(256).

Coefficients are stored lowest degree first: coeffs[0] is the constant term.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from sss256 import gf256


def evaluate(coeffs: Sequence[int], x: int) -> int:
    """Evaluate a_0 + a_1*x + ... + a_d*x^d at x.

    Keeps a running power of x rather than using Horner's rule.
    """
    result = 0
    x_power = 1
    for c in coeffs:
        result = gf256.add(result, gf256.multiply(c, x_power))
        x_power = gf256.multiply(x_power, x)
    return result


def evaluate_columns(coeffs: np.ndarray, x: int) -> np.ndarray:
    """Evaluate one independent polynomial per row of coeffs at the same x.

    Args:
        coeffs: uint8 matrix of shape (positions, degree + 1), lowest degree
            in column 0.
        x: Field element to evaluate at.

    Returns:
        uint8 array of length ``positions``; entry k is row k evaluated at x.
    """
    coeffs = np.asarray(coeffs, dtype=np.uint8)
    result = np.zeros(coeffs.shape[0], dtype=np.uint8)
    x_power = 1
    for i in range(coeffs.shape[1]):
        result ^= gf256.multiply_array(coeffs[:, i], x_power)
        x_power = gf256.multiply(x_power, x)
    return result


def lagrange_basis_at_zero(xs: Sequence[int], i: int) -> int:
    """Compute Lagrange basis coefficient L_i(0).

    Returns prod_{j!=i} (0 - x_j) / (x_i - x_j). In characteristic 2 both
    negation and subtraction reduce to XOR, so this is
    prod x_j / prod (x_i ^ x_j).

    Raises:
        DivisionByZero: If some x_j equals x_i for j != i.
    """
    xi = xs[i]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if j == i:
            continue
        num = gf256.multiply(num, xj)
        den = gf256.multiply(den, gf256.add(xi, xj))
    return gf256.divide(num, den)
