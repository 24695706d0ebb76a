from cluster_size_suggestion import analyze_target
from cluster_size_suggestion.exceptions import ClusterSizeError
from cluster_size_suggestion.utils.conversions import format_bytes

# --- Example 1: Storage cluster size from the median file size ---
try:
    print("--- Analyzing /var/log for a storage cluster size ---")
    results = analyze_target("/var/log")

    stats = results.stats
    recommendation = results.recommendation
    print(f"Files: {stats.file_count}, total: {format_bytes(stats.total_bytes)}")
    print(f"Median file size: {format_bytes(stats.median_bytes)}")
    print(f"Suggested cluster size: {format_bytes(recommendation.cluster_bytes)}")
    if recommendation.range:
        print(
            f"Suggested range: {format_bytes(recommendation.range.low_bytes)}"
            f" to {format_bytes(recommendation.range.high_bytes)}"
        )

except ClusterSizeError as e:
    print(f"An error occurred: {e}")

# --- Example 2: Worker node count from total size and file count ---
try:
    print("\n--- Analyzing /usr/share for a worker cluster size ---")
    results = analyze_target("/usr/share", strategy="workers")

    recommendation = results.recommendation
    print(f"Suggested worker nodes: {recommendation.cluster_size}")
    print(f"Size tier: {recommendation.size_tier.label}")
    print(f"File tier: {recommendation.file_tier.label}")
    print(f"Reason: {recommendation.driver}")

except ClusterSizeError as e:
    print(f"An error occurred: {e}")
