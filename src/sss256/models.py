"""Data models for shares, split parameters, and custody planning."""

from __future__ import annotations

from dataclasses import dataclass

from sss256.errors import InvalidThreshold, MalformedShares, TooManyShares

# x = 0 holds the secret and x = 255 is left unused
MAX_SHARES = 254


@dataclass(frozen=True)
class Share:
    """A single share: y[k] = f_k(x) for every secret byte position k.

    Attributes:
        x: Evaluation point in [1, MAX_SHARES].
        y: One byte per secret byte.
        threshold: Minimum share count recorded at split time, if known.
    """

    x: int
    y: bytes
    threshold: int | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.x <= MAX_SHARES:
            raise MalformedShares(f"Share x must be in [1, {MAX_SHARES}], got {self.x}")
        if self.threshold is not None and self.threshold < 2:
            raise MalformedShares(f"Share threshold must be >= 2, got {self.threshold}")
        if not isinstance(self.y, (bytes, bytearray, memoryview)):
            raise TypeError(f"Share y must be bytes-like, got {type(self.y).__name__}")
        object.__setattr__(self, "y", bytes(self.y))


@dataclass(frozen=True)
class SplitOptions:
    """Split parameters: ``min`` shares out of ``total`` reconstruct."""

    min: int
    total: int

    def __post_init__(self) -> None:
        if self.min < 2 or self.min > self.total:
            raise InvalidThreshold(
                f"Need 2 <= min <= total, got min={self.min}, total={self.total}"
            )
        if self.total > MAX_SHARES:
            raise TooManyShares(
                f"At most {MAX_SHARES} shares supported, got total={self.total}"
            )


@dataclass(frozen=True)
class CustodianGroup:
    """Share holders with identical loss and compromise behavior.

    Each of the ``count`` shares held by the group is independently lost with
    probability ``p_loss`` and independently copied by an adversary with
    probability ``p_compromise``.
    """

    count: int
    p_loss: float = 0.0
    p_compromise: float = 0.0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if not 0.0 <= self.p_loss <= 1.0:
            raise ValueError(f"p_loss must be in [0, 1], got {self.p_loss}")
        if not 0.0 <= self.p_compromise <= 1.0:
            raise ValueError(f"p_compromise must be in [0, 1], got {self.p_compromise}")

    @property
    def p_survive(self) -> float:
        """Probability a single share is still available to its owner."""
        return 1.0 - self.p_loss


def total_shares(groups: list[CustodianGroup]) -> int:
    return sum(g.count for g in groups)
