from cluster_size_suggestion.analytics.base import BaseClusterStrategy
from cluster_size_suggestion.collectors.datasource import IDataSource
from cluster_size_suggestion.models.recommendation import AnalysisResults
from cluster_size_suggestion.utils.logging import get_logger

logger = get_logger(__name__)


class AnalyzerService:
    """Orchestrates the scan of a target and the cluster size recommendation."""

    def __init__(self, datasource: IDataSource, strategy: BaseClusterStrategy):
        self.datasource = datasource
        self.strategy = strategy

    def analyze(self, target_path: str) -> AnalysisResults:
        """
        Scans the target, runs the strategy and returns both results together.
        """
        stats = self.datasource.scan(target_path)
        recommendation = self.strategy.generate_recommendation(stats)
        logger.debug(
            "recommendation_generated",
            strategy=self.strategy.name,
            driver=recommendation.driver,
        )
        return AnalysisResults(stats=stats, recommendation=recommendation)
