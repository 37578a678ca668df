"""Exception hierarchy for sharing and reconstruction failures.

Every error derives from :class:`ShamirError`. Validation errors also derive
from ``ValueError`` so callers that only catch builtin exceptions keep working.
"""

from __future__ import annotations


class ShamirError(Exception):
    """Base class for all sss256 errors."""


class InvalidThreshold(ShamirError, ValueError):
    """Threshold is below 2 or above the total share count."""


class TooManyShares(ShamirError, ValueError):
    """More shares requested than there are nonzero x-coordinates to use."""


class NoShares(ShamirError, ValueError):
    """Reconstruction was attempted with an empty share list."""


class InsufficientShares(ShamirError, ValueError):
    """Fewer shares were supplied than the recorded threshold."""

    def __init__(self, required: int, actual: int) -> None:
        super().__init__(f"Insufficient shares: need {required}, got {actual}")
        self.required = required
        self.actual = actual


class MalformedShares(ShamirError, ValueError):
    """Shares are structurally inconsistent (lengths, thresholds, x range)."""


class DuplicateShareX(ShamirError, ValueError):
    """Two shares carry the same x-coordinate."""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate share x-coordinate: {x}")
        self.x = x


class DivisionByZero(ShamirError, ZeroDivisionError):
    """Division by the zero element of GF(256)."""


class RandomSourceFailure(ShamirError, RuntimeError):
    """The random byte source raised or returned too few bytes."""
