from abc import ABC
from abc import abstractmethod
from typing import Union

from cluster_size_suggestion.models.recommendation import ClusterRecommendation
from cluster_size_suggestion.models.recommendation import WorkerRecommendation
from cluster_size_suggestion.models.scan_stats import ScanStats


class BaseClusterStrategy(ABC):
    """Abstract base class for all cluster size recommendation strategies."""

    name: str = ""
    # whether the scan must collect every file size for percentiles
    needs_size_distribution: bool = False

    @abstractmethod
    def generate_recommendation(
        self, stats: ScanStats
    ) -> Union[ClusterRecommendation, WorkerRecommendation]:
        """Generates a cluster size recommendation from scan statistics."""
        pass
