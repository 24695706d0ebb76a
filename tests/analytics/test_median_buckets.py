import pytest

from cluster_size_suggestion.analytics.median_buckets import MedianBucketStrategy
from cluster_size_suggestion.analytics.median_buckets import pick_cluster_index
from cluster_size_suggestion.analytics.median_buckets import recommend_cluster_size
from cluster_size_suggestion.config.cluster_profiles import CLUSTER_BUCKETS
from cluster_size_suggestion.config.cluster_profiles import KIB
from cluster_size_suggestion.config.cluster_profiles import MIB
from cluster_size_suggestion.models.recommendation import ClusterRange
from cluster_size_suggestion.models.scan_stats import ScanStats


def test_buckets_double_from_4k_to_1m():
    assert CLUSTER_BUCKETS[0] == 4 * KIB
    assert CLUSTER_BUCKETS[-1] == MIB
    assert len(CLUSTER_BUCKETS) == 9


@pytest.mark.parametrize("index", range(9))
def test_exact_bucket_match_returns_its_index(index):
    assert pick_cluster_index(CLUSTER_BUCKETS[index]) == index


@pytest.mark.parametrize("value", [0, -1, -4096, None, float("nan"), float("inf")])
def test_invalid_values_return_zero(value):
    assert pick_cluster_index(value) == 0


def test_values_between_buckets_round_down():
    assert pick_cluster_index(1) == 0
    assert pick_cluster_index(5000) == 0
    assert pick_cluster_index(9 * KIB) == 1
    assert pick_cluster_index(MIB - 1) == len(CLUSTER_BUCKETS) - 2


def test_values_beyond_all_buckets_return_last_index():
    assert pick_cluster_index(50 * MIB) == len(CLUSTER_BUCKETS) - 1


def test_homogeneous_distribution_has_no_range():
    rec = recommend_cluster_size(64 * KIB, 40 * KIB, 100 * KIB)
    assert rec.cluster_bytes == 64 * KIB
    assert rec.cluster_index == 4
    assert rec.spread_ratio == pytest.approx(2.5)
    assert not rec.heterogeneous
    assert rec.range is None
    assert rec.driver == "median file size 64.0 KB maps to the 64.0 KB cluster bucket"


def test_heterogeneous_distribution_reports_range():
    rec = recommend_cluster_size(32 * KIB, 8 * KIB, 512 * KIB)
    assert rec.cluster_bytes == 32 * KIB
    assert rec.heterogeneous
    assert rec.range == ClusterRange(low_bytes=8 * KIB, high_bytes=512 * KIB)
    assert "consider the range" in rec.driver


def test_heterogeneous_distribution_within_one_bucket_has_no_range():
    # both quartiles sit above the largest bucket
    rec = recommend_cluster_size(5 * MIB, 2 * MIB, 10 * MIB)
    assert rec.heterogeneous
    assert rec.range is None
    assert rec.cluster_bytes == MIB
    assert "share one bucket" in rec.driver


def test_ratio_of_exactly_four_is_heterogeneous():
    rec = recommend_cluster_size(16 * KIB, 4 * KIB, 16 * KIB)
    assert rec.heterogeneous
    assert rec.range == ClusterRange(low_bytes=4 * KIB, high_bytes=16 * KIB)


def test_zero_quartiles_skip_spread_check():
    rec = recommend_cluster_size(300, 0, 600)
    assert rec.spread_ratio is None
    assert not rec.heterogeneous


def test_no_files_uses_smallest_bucket():
    rec = recommend_cluster_size(0, 0, 0)
    assert rec.cluster_bytes == 4 * KIB
    assert rec.driver == "no files found; using the smallest cluster size"


def test_strategy_reads_percentiles_from_stats():
    stats = ScanStats(
        target_path="/data",
        file_count=3,
        total_bytes=1300,
        median_bytes=300,
        p25_bytes=200,
        p75_bytes=600,
    )
    strategy = MedianBucketStrategy()
    assert strategy.needs_size_distribution
    rec = strategy.generate_recommendation(stats)
    assert rec.cluster_bytes == 4 * KIB
    assert rec.range is None


def test_strategy_accepts_custom_buckets():
    strategy = MedianBucketStrategy(buckets=[512, 1024, 2048])
    stats = ScanStats(target_path="/data", file_count=1, median_bytes=1500)
    assert strategy.generate_recommendation(stats).cluster_bytes == 1024


def test_strategy_rejects_unsorted_buckets():
    with pytest.raises(ValueError):
        MedianBucketStrategy(buckets=[8192, 4096])
