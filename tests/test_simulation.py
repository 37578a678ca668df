"""Tests for sss256.simulation module."""

from __future__ import annotations

import pytest

from sss256.models import CustodianGroup
from sss256.probability import exposure_probability
from sss256.simulation import CustodySimulator


class TestCustodySimulator:
    def test_reliable_custody(self, reliable_custody: list[CustodianGroup]):
        sim = CustodySimulator(reliable_custody, seed=42)
        result = sim.run(threshold=3, n_trials=50)
        assert result.recovery_rate == 1.0
        assert result.exposure_rate == 0.0
        assert result.avg_shares_surviving == 5.0

    def test_single_trial(self, reliable_custody: list[CustodianGroup]):
        sim = CustodySimulator(reliable_custody, seed=42)
        outcome = sim.simulate_trial(threshold=3, secret=b"vault key")
        assert outcome.original_secret == b"vault key"
        assert outcome.recovered_secret == b"vault key"
        assert outcome.recovered
        assert not outcome.exposed
        assert len(outcome.surviving_shares) == 5
        assert outcome.lost_count == 0

    def test_loss_reduces_recovery(self):
        sim = CustodySimulator([CustodianGroup(count=6, p_loss=0.5)], seed=42)
        result = sim.run(threshold=5, n_trials=200)
        assert result.recovery_rate < 1.0
        assert result.avg_shares_surviving < 6.0

    def test_below_threshold_fails_cleanly(self):
        sim = CustodySimulator([CustodianGroup(count=3, p_loss=1.0)], seed=1)
        outcome = sim.simulate_trial(threshold=2)
        assert outcome.recovered_secret is None
        assert outcome.lost_count == 3

    def test_exposure_detection(self):
        sim = CustodySimulator([CustodianGroup(count=6, p_compromise=0.5)], seed=42)
        result = sim.run(threshold=2, n_trials=200)
        assert result.avg_shares_compromised > 0
        assert result.exposure_rate > 0

    def test_reproducibility(self, mixed_custody: list[CustodianGroup]):
        r1 = CustodySimulator(mixed_custody, seed=42).run(threshold=2, n_trials=100)
        r2 = CustodySimulator(mixed_custody, seed=42).run(threshold=2, n_trials=100)
        assert r1.n_recovered == r2.n_recovered
        assert r1.n_exposed == r2.n_exposed

    def test_high_redundancy_high_recovery(self):
        """With enough redundancy, recovery should be high even with losses."""
        sim = CustodySimulator([CustodianGroup(count=10, p_loss=0.3)], seed=42)
        result = sim.run(threshold=2, n_trials=500)
        assert result.recovery_rate > 0.95

    def test_agrees_with_analysis(self, mixed_custody: list[CustodianGroup]):
        sim = CustodySimulator(mixed_custody, seed=7, secret_length=4)
        result = sim.run(threshold=2, n_trials=2000)
        predicted = exposure_probability(mixed_custody, 2)
        assert abs(result.exposure_rate - predicted) < 0.03

    def test_invalid_trial_count(self, reliable_custody: list[CustodianGroup]):
        with pytest.raises(ValueError, match="n_trials"):
            CustodySimulator(reliable_custody).run(threshold=2, n_trials=0)
