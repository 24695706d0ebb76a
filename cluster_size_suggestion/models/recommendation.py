from dataclasses import asdict
from dataclasses import dataclass
from typing import Any
from typing import Dict
from typing import Optional
from typing import Union

from cluster_size_suggestion.models.scan_stats import ScanStats


@dataclass(frozen=True)
class Tier:
    """One entry of an ordered lookup table."""

    upper_bound: float
    label: str


@dataclass(frozen=True)
class TierMatch:
    index: int
    label: str
    upper_bound: float


@dataclass(frozen=True)
class ClusterRange:
    low_bytes: int
    high_bytes: int


@dataclass
class ClusterRecommendation:
    """
    Storage cluster (block) size derived from the median file size.
    """

    cluster_bytes: int
    cluster_index: int
    median_bytes: float
    p25_bytes: float
    p75_bytes: float
    spread_ratio: Optional[float]
    heterogeneous: bool
    range: Optional[ClusterRange]
    driver: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class WorkerRecommendation:
    """
    Worker node count derived from the total size and file count tiers.
    """

    cluster_size: int
    score: int
    size_tier: TierMatch
    file_tier: TierMatch
    driver: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class AnalysisResults:
    stats: ScanStats
    recommendation: Union[ClusterRecommendation, WorkerRecommendation]
