"""Data models for filesystem scan results.

This module contains the accumulator produced by a single scan:
- ScanStats: counts, byte totals, largest file and size percentiles
"""

from dataclasses import asdict
from dataclasses import dataclass
from typing import Any
from typing import Dict


@dataclass
class ScanStats:
    """Aggregate statistics for one scanned target.

    Populated incrementally by the traversal loop that owns it and left
    untouched once the scan returns. The percentile fields are only
    meaningful when ``file_count > 0``.
    """

    target_path: str
    file_count: int = 0
    dir_count: int = 0
    total_bytes: int = 0
    largest_file_bytes: int = 0
    largest_file_path: str = ""
    skipped_symlinks: int = 0
    unreadable_entries: int = 0
    median_bytes: float = 0.0
    p25_bytes: float = 0.0
    p75_bytes: float = 0.0

    @property
    def average_bytes(self) -> int:
        if self.file_count <= 0:
            return 0
        return round(self.total_bytes / self.file_count)

    def add_file(self, path: str, size: int) -> None:
        """Fold one regular file into the running totals."""
        self.file_count += 1
        self.total_bytes += size
        # strict comparison: first file wins ties
        if size > self.largest_file_bytes:
            self.largest_file_bytes = size
            self.largest_file_path = path

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data["average_bytes"] = self.average_bytes
        return data
