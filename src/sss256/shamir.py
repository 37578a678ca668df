"""Shamir's (t, n)-threshold secret sharing over GF(256).

Each secret byte gets its own random polynomial of degree t-1 with the byte
as constant term. Any t shares reconstruct; fewer reveal nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from sss256 import gf256
from sss256.errors import (
    DivisionByZero,
    DuplicateShareX,
    InsufficientShares,
    MalformedShares,
    NoShares,
)
from sss256.models import Share, SplitOptions
from sss256.polynomial import evaluate_columns, lagrange_basis_at_zero
from sss256.random_source import RandomSource, draw, system_random_bytes

logger = logging.getLogger(__name__)


class ShamirSecretSharing:
    """(t, n)-threshold secret sharing over GF(256).

    Args:
        random_source: Callable returning n random bytes. Must be a CSPRNG
            outside of tests. Defaults to ``secrets.token_bytes``.
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self.random_source = random_source or system_random_bytes

    def split(self, secret: bytes, min: int, total: int) -> list[Share]:
        """Split secret into ``total`` shares, any ``min`` of which reconstruct.

        Shares are returned in order x = 1..total and all carry
        ``threshold=min``. Consumes exactly ``len(secret) * (min - 1)``
        random bytes.
        """
        options = SplitOptions(min=min, total=total)
        if not isinstance(secret, (bytes, bytearray, memoryview)):
            raise TypeError(f"Secret must be bytes-like, got {type(secret).__name__}")

        coeffs = self._random_polynomials(bytes(secret), options.min - 1)

        shares = []
        for x in range(1, options.total + 1):
            y = evaluate_columns(coeffs, x)
            shares.append(Share(x=x, y=y.tobytes(), threshold=options.min))

        logger.debug(
            "Split %d-byte secret into %d shares (threshold %d)",
            len(secret), options.total, options.min,
        )
        return shares

    def reconstruct(
        self,
        shares: Sequence[Share],
        threshold: int | None = None,
    ) -> bytes:
        """Reconstruct the secret via Lagrange interpolation at x = 0.

        Args:
            shares: At least ``threshold`` shares from one split.
            threshold: Required share count. Defaults to the first share's
                recorded threshold; if neither is known the count check is
                skipped and correctness is the caller's responsibility.

        Returns:
            The secret, with the same length as every share's ``y``.
        """
        shares = list(shares)
        if not shares:
            raise NoShares("Need at least one share to reconstruct")

        recorded = {s.threshold for s in shares if s.threshold is not None}
        if len(recorded) > 1:
            raise MalformedShares(f"Shares disagree on threshold: {sorted(recorded)}")

        required = threshold if threshold is not None else shares[0].threshold
        if required is None:
            logger.debug("No threshold known; skipping share count check")
        elif len(shares) < required:
            raise InsufficientShares(required, len(shares))

        length = len(shares[0].y)
        if any(len(s.y) != length for s in shares):
            lengths = sorted({len(s.y) for s in shares})
            raise MalformedShares(f"Shares have mismatched lengths: {lengths}")

        xs = [s.x for s in shares]
        secret = np.zeros(length, dtype=np.uint8)
        for i, share in enumerate(shares):
            try:
                basis = lagrange_basis_at_zero(xs, i)
            except DivisionByZero as exc:
                raise DuplicateShareX(_first_duplicate(xs)) from exc
            secret ^= gf256.multiply_array(np.frombuffer(share.y, dtype=np.uint8), basis)

        logger.debug("Reconstructed %d-byte secret from %d shares", length, len(shares))
        return secret.tobytes()

    def _random_polynomials(self, secret: bytes, degree: int) -> np.ndarray:
        """One row per secret byte: [byte, r_1, ..., r_degree]."""
        coeffs = np.zeros((len(secret), degree + 1), dtype=np.uint8)
        coeffs[:, 0] = np.frombuffer(secret, dtype=np.uint8)

        n_random = len(secret) * degree
        if n_random:
            random_bytes = draw(self.random_source, n_random)
            coeffs[:, 1:] = np.frombuffer(random_bytes, dtype=np.uint8).reshape(
                len(secret), degree
            )
        return coeffs


def _first_duplicate(xs: list[int]) -> int:
    seen: set[int] = set()
    for x in xs:
        if x in seen:
            return x
        seen.add(x)
    raise ValueError("No duplicate x-coordinate")


def split(
    secret: bytes,
    min: int,
    total: int,
    random_source: RandomSource | None = None,
) -> list[Share]:
    """Convenience: split secret into ``total`` shares with threshold ``min``."""
    sss = ShamirSecretSharing(random_source)
    return sss.split(secret, min, total)


def reconstruct(
    shares: Sequence[Share],
    threshold: int | None = None,
) -> bytes:
    """Convenience: reconstruct secret from shares."""
    sss = ShamirSecretSharing()
    return sss.reconstruct(shares, threshold)
