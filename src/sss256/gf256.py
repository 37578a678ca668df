"""GF(256) field arithmetic via discrete log / exponent tables.

Field polynomial 0x11D (x^8 + x^4 + x^3 + x^2 + 1), generator 2.
Tables are built once at import and are read-only afterwards.
"""

from __future__ import annotations

import numpy as np

from sss256.errors import DivisionByZero

FIELD_POLYNOMIAL = 0x11D
FIELD_ORDER = 256
LOG_ZERO_SENTINEL = 255  # LOG[0] is undefined; never used as a real log

_GROUP_ORDER = FIELD_ORDER - 1


def _build_tables() -> tuple[np.ndarray, np.ndarray]:
    """Walk the multiplicative group from 1, doubling and reducing mod 0x11D."""
    exp = np.zeros(FIELD_ORDER, dtype=np.uint8)
    log = np.zeros(FIELD_ORDER, dtype=np.uint8)

    x = 1
    for i in range(_GROUP_ORDER):
        exp[i] = x
        log[x] = i
        x <<= 1
        if x & 0x100:
            x ^= FIELD_POLYNOMIAL

    # Mirror so EXP[255] is a valid index for (a + b) % 255 edge cases
    exp[_GROUP_ORDER] = exp[0]
    log[0] = LOG_ZERO_SENTINEL

    exp.flags.writeable = False
    log.flags.writeable = False
    return exp, log


EXP, LOG = _build_tables()


def add(a: int, b: int) -> int:
    """a + b in GF(256), which is XOR. Subtraction is the same operation."""
    return a ^ b


def multiply(a: int, b: int) -> int:
    """a * b in GF(256)."""
    if a == 0 or b == 0:
        return 0
    return int(EXP[(int(LOG[a]) + int(LOG[b])) % _GROUP_ORDER])


def divide(a: int, b: int) -> int:
    """a / b in GF(256).

    Raises:
        DivisionByZero: If b is 0.
    """
    if b == 0:
        raise DivisionByZero("Division by zero in GF(256)")
    if a == 0:
        return 0
    return int(EXP[(int(LOG[a]) - int(LOG[b]) + _GROUP_ORDER) % _GROUP_ORDER])


def multiply_array(values: np.ndarray, b: int) -> np.ndarray:
    """Element-wise values[k] * b for a uint8 array of field elements."""
    values = np.asarray(values, dtype=np.uint8)
    if b == 0:
        return np.zeros_like(values)

    idx = (LOG[values].astype(np.intp) + int(LOG[b])) % _GROUP_ORDER
    return np.where(values == 0, 0, EXP[idx]).astype(np.uint8)
