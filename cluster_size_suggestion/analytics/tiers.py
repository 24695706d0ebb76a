from typing import Sequence

from cluster_size_suggestion.config.cluster_profiles import CLUSTER_SIZES
from cluster_size_suggestion.config.cluster_profiles import FILE_TIERS
from cluster_size_suggestion.config.cluster_profiles import SIZE_TIERS
from cluster_size_suggestion.config.cluster_profiles import validate_buckets
from cluster_size_suggestion.config.cluster_profiles import validate_tiers
from cluster_size_suggestion.models.recommendation import Tier
from cluster_size_suggestion.models.recommendation import TierMatch
from cluster_size_suggestion.models.recommendation import WorkerRecommendation
from cluster_size_suggestion.models.scan_stats import ScanStats

from .base import BaseClusterStrategy


def pick_tier(value: float, tiers: Sequence[Tier]) -> TierMatch:
    """Return the first tier whose upper bound strictly exceeds ``value``."""
    for index, tier in enumerate(tiers):
        if value < tier.upper_bound:
            return TierMatch(
                index=index, label=tier.label, upper_bound=tier.upper_bound
            )
    last = tiers[-1]
    return TierMatch(
        index=len(tiers) - 1, label=last.label, upper_bound=last.upper_bound
    )


def recommend_worker_count(
    total_bytes: int,
    file_count: int,
    size_tiers: Sequence[Tier] = SIZE_TIERS,
    file_tiers: Sequence[Tier] = FILE_TIERS,
    cluster_sizes: Sequence[int] = CLUSTER_SIZES,
) -> WorkerRecommendation:
    """
    Recommends a worker node count from the total size and file count.

    The larger of the two tier indices is the score; the node count is read
    from ``cluster_sizes`` at that score, clamped to the last entry.
    """
    size_tier = pick_tier(total_bytes, size_tiers)
    file_tier = pick_tier(file_count, file_tiers)
    score = max(size_tier.index, file_tier.index)
    cluster_size = cluster_sizes[min(score, len(cluster_sizes) - 1)]

    if size_tier.index == file_tier.index:
        driver = "size and file count are equal"
    elif size_tier.index > file_tier.index:
        driver = "size drives the recommendation"
    else:
        driver = "file count drives the recommendation"

    return WorkerRecommendation(
        cluster_size=cluster_size,
        score=score,
        size_tier=size_tier,
        file_tier=file_tier,
        driver=driver,
    )


class WorkerTierStrategy(BaseClusterStrategy):
    """
    Sizes a worker cluster from total bytes and file count tiers.
    """

    name = "workers"
    needs_size_distribution = False

    def __init__(
        self,
        size_tiers: Sequence[Tier] = SIZE_TIERS,
        file_tiers: Sequence[Tier] = FILE_TIERS,
        cluster_sizes: Sequence[int] = CLUSTER_SIZES,
    ):
        self.size_tiers = validate_tiers(size_tiers)
        self.file_tiers = validate_tiers(file_tiers)
        self.cluster_sizes = validate_buckets(cluster_sizes, name="cluster sizes")

    def generate_recommendation(self, stats: ScanStats) -> WorkerRecommendation:
        return recommend_worker_count(
            stats.total_bytes,
            stats.file_count,
            size_tiers=self.size_tiers,
            file_tiers=self.file_tiers,
            cluster_sizes=self.cluster_sizes,
        )
