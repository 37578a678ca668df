"""Monte Carlo simulation of share custody.

Validates empirical recovery/exposure rates against the analytical
predictions in :mod:`sss256.probability`.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from sss256.errors import InsufficientShares
from sss256.models import CustodianGroup, Share, total_shares
from sss256.random_source import RandomSource
from sss256.shamir import ShamirSecretSharing

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Aggregated results from a Monte Carlo simulation run.

    Attributes:
        n_trials: Number of simulation trials.
        n_recovered: Trials where the owner reconstructed the secret.
        n_exposed: Trials where the adversary reconstructed the secret.
        recovery_rate: Empirical P[owner recovers].
        exposure_rate: Empirical P[adversary recovers].
        avg_shares_surviving: Mean number of shares still held.
        avg_shares_compromised: Mean number of shares copied by the adversary.
    """

    n_trials: int
    n_recovered: int
    n_exposed: int
    recovery_rate: float
    exposure_rate: float
    avg_shares_surviving: float
    avg_shares_compromised: float


@dataclass
class TrialOutcome:
    """Outcome of a single simulation trial."""

    surviving_shares: list[Share]
    compromised_shares: list[Share]
    lost_count: int
    recovered_secret: bytes | None
    exposed_secret: bytes | None
    original_secret: bytes

    @property
    def recovered(self) -> bool:
        return self.recovered_secret == self.original_secret

    @property
    def exposed(self) -> bool:
        return self.exposed_secret == self.original_secret


class CustodySimulator:
    """Monte Carlo engine for shares handed out to custodian groups.

    Args:
        groups: Custody layout; shares are dealt to groups in order.
        seed: RNG seed for custody events and random secrets.
        random_source: Coefficient source passed to the splitter. Defaults to
            the system CSPRNG, so only custody events depend on ``seed``.
        secret_length: Length of randomly generated secrets.
    """

    def __init__(
        self,
        groups: list[CustodianGroup],
        seed: int | None = None,
        random_source: RandomSource | None = None,
        secret_length: int = 16,
    ) -> None:
        self.groups = groups
        self.sss = ShamirSecretSharing(random_source)
        self.rng = random.Random(seed)
        self.secret_length = secret_length
        self.n_total = total_shares(groups)

    def simulate_trial(
        self,
        threshold: int,
        secret: bytes | None = None,
    ) -> TrialOutcome:
        """Run a single custody trial.

        Args:
            threshold: Reconstruction threshold used for the split.
            secret: Secret to share (random if None).

        Returns:
            TrialOutcome with per-trial details.
        """
        if secret is None:
            secret = self.rng.randbytes(self.secret_length)

        shares = self.sss.split(secret, threshold, self.n_total)

        surviving: list[Share] = []
        compromised: list[Share] = []
        lost_count = 0

        share_idx = 0
        for group in self.groups:
            for _ in range(group.count):
                share = shares[share_idx]
                share_idx += 1

                if self.rng.random() < group.p_compromise:
                    compromised.append(share)
                if self.rng.random() < group.p_loss:
                    lost_count += 1
                else:
                    surviving.append(share)

        return TrialOutcome(
            surviving_shares=surviving,
            compromised_shares=compromised,
            lost_count=lost_count,
            recovered_secret=self._try_reconstruct(surviving),
            exposed_secret=self._try_reconstruct(compromised),
            original_secret=secret,
        )

    def _try_reconstruct(self, shares: list[Share]) -> bytes | None:
        if not shares:
            return None
        try:
            return self.sss.reconstruct(shares)
        except InsufficientShares:
            return None

    def run(
        self,
        threshold: int,
        n_trials: int = 1000,
    ) -> SimulationResult:
        """Run multiple simulation trials and aggregate results.

        Args:
            threshold: Reconstruction threshold used for every split.
            n_trials: Number of Monte Carlo trials.

        Returns:
            SimulationResult with empirical statistics.
        """
        if n_trials <= 0:
            raise ValueError(f"n_trials must be positive, got {n_trials}")

        n_recovered = 0
        n_exposed = 0
        total_surviving = 0
        total_compromised = 0

        for _ in range(n_trials):
            outcome = self.simulate_trial(threshold)

            if outcome.recovered:
                n_recovered += 1
            if outcome.exposed:
                n_exposed += 1

            total_surviving += len(outcome.surviving_shares)
            total_compromised += len(outcome.compromised_shares)

        result = SimulationResult(
            n_trials=n_trials,
            n_recovered=n_recovered,
            n_exposed=n_exposed,
            recovery_rate=n_recovered / n_trials,
            exposure_rate=n_exposed / n_trials,
            avg_shares_surviving=total_surviving / n_trials,
            avg_shares_compromised=total_compromised / n_trials,
        )
        logger.info(
            "Simulated %d trials (n=%d, t=%d): recovery %.4f, exposure %.4f",
            n_trials, self.n_total, threshold,
            result.recovery_rate, result.exposure_rate,
        )
        return result
