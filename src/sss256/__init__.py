"""Threshold secret sharing over GF(256).

Split a byte secret into n shares so that any t of them reconstruct it
exactly, while fewer than t reveal nothing about it.
"""

from sss256.errors import (
    DivisionByZero,
    DuplicateShareX,
    InsufficientShares,
    InvalidThreshold,
    MalformedShares,
    NoShares,
    RandomSourceFailure,
    ShamirError,
    TooManyShares,
)
from sss256.models import MAX_SHARES, Share, SplitOptions
from sss256.shamir import ShamirSecretSharing, reconstruct, split

__version__ = "0.1.0"

__all__ = [
    "MAX_SHARES",
    "DivisionByZero",
    "DuplicateShareX",
    "InsufficientShares",
    "InvalidThreshold",
    "MalformedShares",
    "NoShares",
    "RandomSourceFailure",
    "ShamirError",
    "ShamirSecretSharing",
    "Share",
    "SplitOptions",
    "TooManyShares",
    "reconstruct",
    "split",
]
