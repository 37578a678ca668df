"""PMF of sums of binomials via convolution, tail probs, and threshold search.

Used to plan a threshold for a custody layout (X_S = shares that survive,
X_E = shares an adversary collects).
"""

from __future__ import annotations

import numpy as np
from scipy.stats import binom

from sss256.models import MAX_SHARES, CustodianGroup, total_shares

MIN_THRESHOLD = 2


def pmf_sum_binomials(n_vec: list[int], p_vec: list[float]) -> np.ndarray:
    """PMF of sum of independent Bin(n_j, p_j) via sequential convolution."""
    if len(n_vec) != len(p_vec):
        raise ValueError("n_vec and p_vec must have the same length")

    pmf = np.array([1.0])

    for n_j, p_j in zip(n_vec, p_vec, strict=True):
        if n_j == 0:
            continue
        pmf = np.convolve(pmf, binom.pmf(np.arange(n_j + 1), n_j, p_j))

    return pmf


def tail_prob(pmf: np.ndarray, t: int) -> float:
    """P[X >= t] from PMF array."""
    if t <= 0:
        return 1.0
    if t >= len(pmf):
        return 0.0
    return float(np.sum(pmf[t:]))


def surviving_pmf(groups: list[CustodianGroup]) -> np.ndarray:
    """PMF of the number of shares still held by their custodians."""
    return pmf_sum_binomials([g.count for g in groups], [g.p_survive for g in groups])


def compromised_pmf(groups: list[CustodianGroup]) -> np.ndarray:
    """PMF of the number of shares copied by the adversary."""
    return pmf_sum_binomials([g.count for g in groups], [g.p_compromise for g in groups])


def recovery_probability(groups: list[CustodianGroup], threshold: int) -> float:
    """P[at least ``threshold`` shares survive]."""
    return tail_prob(surviving_pmf(groups), threshold)


def exposure_probability(groups: list[CustodianGroup], threshold: int) -> float:
    """P[the adversary collects at least ``threshold`` shares]."""
    return tail_prob(compromised_pmf(groups), threshold)


def find_t_sec(pmf_eve: np.ndarray, tau: float) -> int | None:
    """Find the smallest threshold t >= 2 such that P[X_E >= t] <= tau.

    This is the minimum threshold that keeps the secret confidential: the
    adversary collects t or more shares with probability at most tau.

    Args:
        pmf_eve: PMF of X_E (shares copied by the adversary).
        tau: Maximum allowed exposure probability.

    Returns:
        Smallest valid t, or None if no such t exists.
    """
    n = len(pmf_eve) - 1
    for t in range(MIN_THRESHOLD, n + 1):
        if tail_prob(pmf_eve, t) <= tau:
            return t
    return None


def find_t_rel(pmf_owner: np.ndarray, sigma: float) -> int | None:
    """Find the largest threshold t >= 2 such that P[X_S >= t] >= sigma.

    This is the maximum threshold that keeps the secret recoverable: at least
    t shares survive with probability at least sigma.

    Args:
        pmf_owner: PMF of X_S (shares that survive custody).
        sigma: Minimum required recovery probability.

    Returns:
        Largest valid t, or None if no such t exists.
    """
    n = len(pmf_owner) - 1
    for t in range(n, MIN_THRESHOLD - 1, -1):
        if tail_prob(pmf_owner, t) >= sigma:
            return t
    return None


def find_feasible_threshold(
    groups: list[CustodianGroup],
    sigma: float,
    tau: float,
) -> tuple[bool, int | None]:
    """Search for a threshold meeting both recovery and exposure targets.

    Computes t_sec and t_rel from the distributions of X_E and X_S.
    A feasible threshold t exists iff t_sec <= t_rel.

    Args:
        groups: Custody layout; the share total is the sum of group counts.
        sigma: Recovery target, P[recover] >= sigma.
        tau: Confidentiality target, P[adversary recovers] <= tau.

    Returns:
        (feasible, t) where t is the canonical threshold t_sec if feasible.
    """
    if not 0.0 < sigma <= 1.0:
        raise ValueError(f"sigma must be in (0, 1], got {sigma}")
    if not 0.0 < tau < 1.0:
        raise ValueError(f"tau must be in (0, 1), got {tau}")

    n = total_shares(groups)
    if not MIN_THRESHOLD <= n <= MAX_SHARES:
        return False, None

    t_sec = find_t_sec(compromised_pmf(groups), tau)
    t_rel = find_t_rel(surviving_pmf(groups), sigma)

    if t_sec is None or t_rel is None:
        return False, None

    if t_sec <= t_rel:
        return True, t_sec
    return False, None
