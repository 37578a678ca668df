#!/usr/bin/env python3
"""Quick start example: threshold secret sharing in 50 lines.

Demonstrates the core workflow:
  1. Split a secret into shares
  2. Reconstruct it from any threshold-sized subset
  3. Plan a threshold for a custody layout
  4. Validate the plan with Monte Carlo simulation
"""

import itertools

from sss256 import InsufficientShares, reconstruct, split
from sss256.models import CustodianGroup
from sss256.probability import (
    exposure_probability,
    find_feasible_threshold,
    recovery_probability,
)
from sss256.simulation import CustodySimulator

# --- 1. Split ---
secret = b"correct horse battery staple"
shares = split(secret, min=3, total=5)
print(f"Split {len(secret)}-byte secret into {len(shares)} shares (threshold 3)")
for share in shares:
    print(f"  x={share.x}  y={share.y.hex()[:24]}...")

# --- 2. Reconstruct from every 3-subset ---
for subset in itertools.combinations(shares, 3):
    assert reconstruct(list(subset)) == secret
print("Every 3-share subset reconstructs the secret")

try:
    reconstruct(shares[:2])
except InsufficientShares as exc:
    print(f"Two shares are not enough: {exc}")

# --- 3. Plan a threshold ---
custody = [
    CustodianGroup(count=2, p_loss=0.01, p_compromise=0.01),  # safe deposit boxes
    CustodianGroup(count=3, p_loss=0.20, p_compromise=0.10),  # friends and family
]
sigma, tau = 0.90, 0.05  # 90% recovery, 5% max exposure
feasible, t = find_feasible_threshold(custody, sigma=sigma, tau=tau)
print(f"\nFeasible: {feasible}, threshold={t} (sigma={sigma}, tau={tau})")
assert t is not None
print(f"  P[recover] = {recovery_probability(custody, t):.4f}")
print(f"  P[exposed] = {exposure_probability(custody, t):.4f}")

# --- 4. Validate with Monte Carlo simulation ---
sim = CustodySimulator(custody, seed=42)
result = sim.run(threshold=t, n_trials=5_000)

print(f"\nMonte Carlo validation (5k trials, t={t}):")
print(f"  Recovery rate:   {result.recovery_rate:.4f}  (target >= {sigma})")
print(f"  Exposure rate:   {result.exposure_rate:.4f}  (target <= {tau})")
print(f"  Avg surviving:   {result.avg_shares_surviving:.2f}")
print(f"  Avg compromised: {result.avg_shares_compromised:.2f}")
