"""Filesystem traversal and aggregation.

Walks a root path depth-first with an explicit stack of pending
directories. Symbolic links are never followed. Only the lookup of the
root can fail the scan; errors below it are counted in
``unreadable_entries`` and the walk carries on.
"""
import errno
import os
import stat as statmod
from typing import List

from cluster_size_suggestion.analytics.percentiles import median
from cluster_size_suggestion.analytics.percentiles import percentile
from cluster_size_suggestion.exceptions import InvalidTargetTypeError
from cluster_size_suggestion.exceptions import TargetNotFoundError
from cluster_size_suggestion.models.scan_stats import ScanStats
from cluster_size_suggestion.utils.logging import get_logger

from .datasource import IDataSource

logger = get_logger(__name__)


def _apply_size_distribution(stats: ScanStats, sizes: List[int]) -> None:
    sizes.sort()
    stats.p25_bytes = percentile(sizes, 0.25)
    stats.median_bytes = median(sizes)
    stats.p75_bytes = percentile(sizes, 0.75)


def _walk_directory(
    stats: ScanStats, root: str, sizes: List[int], collect_sizes: bool
):
    stack = [root]
    while stack:
        current_dir = stack.pop()
        stats.dir_count += 1

        try:
            with os.scandir(current_dir) as it:
                entries = list(it)
        except OSError as e:
            stats.unreadable_entries += 1
            logger.debug("directory_unreadable", path=current_dir, error=str(e))
            continue

        for entry in entries:
            try:
                if entry.is_symlink():
                    stats.skipped_symlinks += 1
                    continue
                if entry.is_dir(follow_symlinks=False):
                    stack.append(entry.path)
                    continue
                if not entry.is_file(follow_symlinks=False):
                    continue
                size = entry.stat(follow_symlinks=False).st_size
            except OSError as e:
                stats.unreadable_entries += 1
                logger.debug("entry_unreadable", path=entry.path, error=str(e))
                continue

            stats.add_file(entry.path, size)
            if collect_sizes:
                sizes.append(size)


def scan_target(target_path: str, collect_sizes: bool = True) -> ScanStats:
    """
    Scan a file or directory and return its aggregate statistics.

    :param target_path: Root path to scan. It is reported as given.
    :param collect_sizes: Keep every file size so p25, median and p75 can be
                    computed once the walk completes.
    :raises TargetNotFoundError: The root path could not be looked up.
    :raises InvalidTargetTypeError: The root is neither a file nor a directory.
    """
    stats = ScanStats(target_path=target_path)

    try:
        root_stat = os.lstat(target_path)
    except OSError as e:
        raise TargetNotFoundError(
            target_path, code=errno.errorcode.get(e.errno) if e.errno else None
        ) from e

    mode = root_stat.st_mode
    if statmod.S_ISLNK(mode):
        stats.skipped_symlinks += 1
        return stats

    sizes: List[int] = []
    if statmod.S_ISREG(mode):
        stats.add_file(target_path, root_stat.st_size)
        sizes.append(root_stat.st_size)
    elif statmod.S_ISDIR(mode):
        _walk_directory(stats, target_path, sizes, collect_sizes)
    else:
        raise InvalidTargetTypeError(target_path)

    if collect_sizes:
        _apply_size_distribution(stats, sizes)

    logger.info(
        "scan_completed",
        target=target_path,
        files=stats.file_count,
        dirs=stats.dir_count,
        total_bytes=stats.total_bytes,
        unreadable=stats.unreadable_entries,
        skipped_symlinks=stats.skipped_symlinks,
    )
    return stats


class FileSystemScanner(IDataSource):
    """
    Data source that walks the local filesystem.
    """

    def __init__(self, collect_sizes: bool = True):
        self.collect_sizes = collect_sizes

    def scan(self, target_path: str) -> ScanStats:
        return scan_target(target_path, collect_sizes=self.collect_sizes)
