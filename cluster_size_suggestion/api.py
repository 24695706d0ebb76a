from typing import Dict
from typing import Type
from typing import Union

from cluster_size_suggestion.analytics.base import BaseClusterStrategy
from cluster_size_suggestion.analytics.median_buckets import MedianBucketStrategy
from cluster_size_suggestion.analytics.tiers import WorkerTierStrategy
from cluster_size_suggestion.analyzer_service import AnalyzerService
from cluster_size_suggestion.collectors.filesystem import FileSystemScanner
from cluster_size_suggestion.models.recommendation import AnalysisResults

STRATEGIES: Dict[str, Type[BaseClusterStrategy]] = {
    MedianBucketStrategy.name: MedianBucketStrategy,
    WorkerTierStrategy.name: WorkerTierStrategy,
}
DEFAULT_STRATEGY = MedianBucketStrategy.name


def get_strategy(strategy: Union[str, BaseClusterStrategy]) -> BaseClusterStrategy:
    if isinstance(strategy, BaseClusterStrategy):
        return strategy
    try:
        return STRATEGIES[strategy]()
    except KeyError:
        raise ValueError(
            f"Unknown strategy '{strategy}'. Expected one of: {', '.join(STRATEGIES)}"
        ) from None


def analyze_target(
    target_path: str,
    strategy: Union[str, BaseClusterStrategy] = DEFAULT_STRATEGY,
) -> AnalysisResults:
    """
    A high-level function to scan a path and recommend a cluster size.

    This function simplifies programmatic access by handling the initialization
    of all necessary components.

    :param target_path: File or directory to scan.
    :param strategy: ``"bytes"`` for a storage cluster byte size (default),
                    ``"workers"`` for a worker node count, or a strategy instance.
    :return: An AnalysisResults object with the scan statistics and recommendation.
    """
    # 1. Pick the recommendation strategy
    cluster_strategy = get_strategy(strategy)

    # 2. Only collect per-file sizes when percentiles are needed
    source = FileSystemScanner(collect_sizes=cluster_strategy.needs_size_distribution)

    # 3. Scan and recommend
    analyzer = AnalyzerService(source, cluster_strategy)
    return analyzer.analyze(target_path)
