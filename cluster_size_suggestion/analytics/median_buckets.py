"""Median-based storage cluster sizing.

Picks a cluster (block) byte size from a doubling list of buckets:
- The median file size selects the point recommendation
- p25 and p75 detect a heterogeneous spread (p75 / p25 >= 4)
- A heterogeneous spread crossing buckets also yields a suggested range
"""
import math
from typing import Optional
from typing import Sequence

from cluster_size_suggestion.config.cluster_profiles import CLUSTER_BUCKETS
from cluster_size_suggestion.config.cluster_profiles import HETEROGENEITY_RATIO
from cluster_size_suggestion.config.cluster_profiles import validate_buckets
from cluster_size_suggestion.models.recommendation import ClusterRange
from cluster_size_suggestion.models.recommendation import ClusterRecommendation
from cluster_size_suggestion.models.scan_stats import ScanStats
from cluster_size_suggestion.utils.conversions import format_bytes

from .base import BaseClusterStrategy


def pick_cluster_index(
    value: Optional[float], buckets: Sequence[int] = CLUSTER_BUCKETS
) -> int:
    """Return the index of the largest bucket not above ``value``.

    Non-positive or non-finite values map to 0 and values beyond every
    bucket map to the last index.
    """
    if value is None or not math.isfinite(value) or value <= 0:
        return 0
    for index, bucket in enumerate(buckets):
        if bucket == value:
            return index
        if bucket > value:
            return max(index - 1, 0)
    return len(buckets) - 1


def _spread_ratio(p25_bytes: float, p75_bytes: float) -> Optional[float]:
    if p25_bytes > 0 and p75_bytes > 0:
        return p75_bytes / p25_bytes
    return None


def recommend_cluster_size(
    median_bytes: float,
    p25_bytes: float,
    p75_bytes: float,
    buckets: Sequence[int] = CLUSTER_BUCKETS,
    heterogeneity_ratio: float = HETEROGENEITY_RATIO,
) -> ClusterRecommendation:
    """
    Recommends a storage cluster byte size from the file size distribution.
    """
    cluster_index = pick_cluster_index(median_bytes, buckets)
    cluster_bytes = buckets[cluster_index]

    ratio = _spread_ratio(p25_bytes, p75_bytes)
    heterogeneous = ratio is not None and ratio >= heterogeneity_ratio

    cluster_range = None
    if heterogeneous:
        low_index = pick_cluster_index(p25_bytes, buckets)
        high_index = pick_cluster_index(p75_bytes, buckets)
        if low_index != high_index:
            cluster_range = ClusterRange(
                low_bytes=buckets[low_index], high_bytes=buckets[high_index]
            )

    if median_bytes is None or median_bytes <= 0:
        driver = "no files found; using the smallest cluster size"
    else:
        driver = (
            f"median file size {format_bytes(median_bytes)} maps to the "
            f"{format_bytes(cluster_bytes)} cluster bucket"
        )
        if heterogeneous and cluster_range:
            driver += f"; sizes are heterogeneous (p75 is {ratio:.1f}x p25), consider the range"
        elif heterogeneous:
            driver += f"; sizes are heterogeneous (p75 is {ratio:.1f}x p25) but share one bucket"

    return ClusterRecommendation(
        cluster_bytes=cluster_bytes,
        cluster_index=cluster_index,
        median_bytes=median_bytes,
        p25_bytes=p25_bytes,
        p75_bytes=p75_bytes,
        spread_ratio=ratio,
        heterogeneous=heterogeneous,
        range=cluster_range,
        driver=driver,
    )


class MedianBucketStrategy(BaseClusterStrategy):
    """
    Sizes a storage cluster from the median file size.
    """

    name = "bytes"
    needs_size_distribution = True

    def __init__(
        self,
        buckets: Sequence[int] = CLUSTER_BUCKETS,
        heterogeneity_ratio: float = HETEROGENEITY_RATIO,
    ):
        self.buckets = validate_buckets(buckets, name="cluster buckets")
        self.heterogeneity_ratio = heterogeneity_ratio

    def generate_recommendation(self, stats: ScanStats) -> ClusterRecommendation:
        return recommend_cluster_size(
            stats.median_bytes,
            stats.p25_bytes,
            stats.p75_bytes,
            buckets=self.buckets,
            heterogeneity_ratio=self.heterogeneity_ratio,
        )
