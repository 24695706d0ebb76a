"""Cluster sizing tables and table validation.

This module holds the static lookup tables used by the recommenders:
- Total size tiers and file count tiers for worker sizing
- Worker node counts indexed by tier score
- Storage cluster byte buckets for median-based sizing
- Guardrails that reject unsorted or unterminated tables
"""
import math
from typing import Sequence

from cluster_size_suggestion.models.recommendation import Tier

KIB = 1024
MIB = KIB * 1024
GIB = MIB * 1024
TIB = GIB * 1024

SIZE_TIERS = (
    Tier(200 * MIB, "under 200 MB"),
    Tier(1 * GIB, "200 MB to 1 GB"),
    Tier(5 * GIB, "1 GB to 5 GB"),
    Tier(20 * GIB, "5 GB to 20 GB"),
    Tier(100 * GIB, "20 GB to 100 GB"),
    Tier(500 * GIB, "100 GB to 500 GB"),
    Tier(2 * TIB, "500 GB to 2 TB"),
    Tier(math.inf, "over 2 TB"),
)

FILE_TIERS = (
    Tier(2_000, "under 2k files"),
    Tier(10_000, "2k to 10k files"),
    Tier(50_000, "10k to 50k files"),
    Tier(200_000, "50k to 200k files"),
    Tier(1_000_000, "200k to 1M files"),
    Tier(5_000_000, "1M to 5M files"),
    Tier(20_000_000, "5M to 20M files"),
    Tier(math.inf, "over 20M files"),
)

# worker nodes, indexed by max(size tier, file tier)
CLUSTER_SIZES = (1, 2, 3, 4, 6, 8, 12, 16)

# 4 KiB .. 1 MiB, doubling
CLUSTER_BUCKETS = tuple(4 * KIB * 2**i for i in range(9))

# p75 / p25 at or above this marks a heterogeneous distribution
HETEROGENEITY_RATIO = 4


def validate_tiers(tiers: Sequence[Tier]) -> Sequence[Tier]:
    """Check that a tier table ascends strictly and ends with an unbounded tier."""
    if not tiers:
        raise ValueError("Tier table must not be empty.")
    bounds = [tier.upper_bound for tier in tiers]
    if any(lower >= upper for lower, upper in zip(bounds, bounds[1:])):
        raise ValueError(f"Tier bounds must be strictly ascending: {bounds}")
    if not math.isinf(bounds[-1]):
        raise ValueError("Tier table must end with an unbounded sentinel tier.")
    return tiers


def validate_buckets(values: Sequence[int], name: str = "buckets") -> Sequence[int]:
    if not values:
        raise ValueError(f"{name} must not be empty.")
    if any(value <= 0 for value in values):
        raise ValueError(f"{name} must be positive: {list(values)}")
    if any(lower >= upper for lower, upper in zip(values, values[1:])):
        raise ValueError(f"{name} must be strictly ascending: {list(values)}")
    return values
