"""Shared test fixtures for the sss256 test suite."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from sss256.models import CustodianGroup


class CountingSource:
    """Deterministic random source that records how many bytes it handed out."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)
        self.calls: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.calls.append(n)
        return self._rng.randbytes(n)

    @property
    def bytes_drawn(self) -> int:
        return sum(self.calls)


@pytest.fixture
def counting_source() -> CountingSource:
    return CountingSource(seed=1234)


@pytest.fixture
def constant_source() -> Callable[[int], bytes]:
    """Every random coefficient is 1, so f(x) = secret ^ x for threshold 2."""
    return lambda n: b"\x01" * n


@pytest.fixture
def reliable_custody() -> list[CustodianGroup]:
    """Five custodians who never lose or leak a share."""
    return [CustodianGroup(count=5)]


@pytest.fixture
def mixed_custody() -> list[CustodianGroup]:
    """Two careful custodians, three careless ones."""
    return [
        CustodianGroup(count=2, p_loss=0.01, p_compromise=0.01),
        CustodianGroup(count=3, p_loss=0.2, p_compromise=0.1),
    ]


@pytest.fixture
def make_source() -> Callable[[int], CountingSource]:
    """Factory for independent sources with a chosen seed."""
    return CountingSource
