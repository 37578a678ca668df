"""Random byte sources for polynomial coefficients.

A random source is any callable taking a byte count and returning that many
bytes. Production use requires a CSPRNG; the default is ``secrets.token_bytes``.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable

from sss256.errors import RandomSourceFailure

RandomSource = Callable[[int], bytes]


def system_random_bytes(n: int) -> bytes:
    """n bytes from the operating system CSPRNG."""
    return secrets.token_bytes(n)


def draw(source: RandomSource, n: int) -> bytes:
    """Request exactly n bytes from source.

    Raises:
        RandomSourceFailure: If the source raises or returns the wrong length.
    """
    try:
        data = source(n)
    except Exception as exc:
        raise RandomSourceFailure(f"Random source failed while drawing {n} bytes") from exc

    data = bytes(data)
    if len(data) != n:
        raise RandomSourceFailure(
            f"Random source returned {len(data)} bytes, expected {n}"
        )
    return data
