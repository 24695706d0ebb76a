from abc import ABC
from abc import abstractmethod

from cluster_size_suggestion.models.scan_stats import ScanStats


class IDataSource(ABC):
    """
    Interface for data sources that produce scan statistics for a target.
    """

    @abstractmethod
    def scan(self, target_path: str) -> ScanStats:
        """Scan the target and return its aggregate statistics."""
        pass
