# cli.py
import argparse
import os
import sys
from typing import List
from typing import NoReturn
from typing import Optional
from typing import Tuple

from rich.console import Console
from rich.markup import escape

from cluster_size_suggestion.api import analyze_target
from cluster_size_suggestion.exceptions import ClusterSizeError
from cluster_size_suggestion.models.recommendation import AnalysisResults
from cluster_size_suggestion.models.recommendation import ClusterRecommendation
from cluster_size_suggestion.utils.conversions import format_bytes
from cluster_size_suggestion.utils.conversions import format_count
from cluster_size_suggestion.utils.logging import configure_logging
from cluster_size_suggestion.utils.logging import get_logger

console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

logger = get_logger(__name__)

DESCRIPTIONS = {
    "bytes": "Suggest a cluster size based on median file size.",
    "workers": "Suggest a worker cluster size based on total size and file count.",
}


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        _exit_with_error(message)


def build_parser(prog: str, strategy: str) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description=(
            f"{DESCRIPTIONS[strategy]} "
            "If no path is provided, the current directory is used."
        ),
        epilog="Use -- to end option parsing, e.g. when the path starts with a dash.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File or directory to scan (default: current directory)",
    )
    return parser


def split_arguments(argv: List[str]) -> Tuple[bool, List[str], List[str]]:
    """Split argv into (help requested, unknown options, positionals).

    Every dash token before ``--`` is an option; everything after it is
    positional.
    """
    wants_help = False
    unknown: List[str] = []
    positionals: List[str] = []
    for index, arg in enumerate(argv):
        if arg == "--":
            positionals.extend(argv[index + 1 :])
            break
        if arg in ("-h", "--help"):
            wants_help = True
        elif arg.startswith("-"):
            unknown.append(arg)
        else:
            positionals.append(arg)
    return wants_help, unknown, positionals


def _exit_with_error(message: str) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    sys.exit(1)


def _largest_file_text(results: AnalysisResults) -> str:
    stats = results.stats
    if not stats.largest_file_path:
        return "N/A"
    return f"{format_bytes(stats.largest_file_bytes)} ({escape(stats.largest_file_path)})"


def render_report(results: AnalysisResults) -> List[str]:
    """Build the report lines (rich markup) for a finished analysis."""
    stats = results.stats
    recommendation = results.recommendation
    has_files = stats.file_count > 0

    lines = [
        f"[cyan]Target:[/] {escape(stats.target_path)}",
        f"[cyan]Files scanned:[/] {format_count(stats.file_count)} "
        f"(dirs: {format_count(stats.dir_count)}, "
        f"unreadable: {format_count(stats.unreadable_entries)}, "
        f"skipped symlinks: {format_count(stats.skipped_symlinks)})",
        f"[cyan]Total size:[/] {format_bytes(stats.total_bytes)}",
    ]

    if isinstance(recommendation, ClusterRecommendation):
        median_text = format_bytes(stats.median_bytes) if has_files else "N/A"
        lines.append(f"[cyan]Median file size:[/] {median_text}")

    average_text = format_bytes(stats.average_bytes) if has_files else "N/A"
    lines.append(f"[cyan]Average file size:[/] {average_text}")
    lines.append(f"[cyan]Largest file:[/] {_largest_file_text(results)}")
    lines.append("")

    if isinstance(recommendation, ClusterRecommendation):
        cluster_text = format_bytes(recommendation.cluster_bytes)
        if recommendation.range:
            cluster_text += (
                f" (range {format_bytes(recommendation.range.low_bytes)} "
                f"to {format_bytes(recommendation.range.high_bytes)})"
            )
        reason = recommendation.driver
    else:
        nodes = recommendation.cluster_size
        cluster_text = f"{nodes} node{'s' if nodes != 1 else ''}"
        reason = (
            f"{recommendation.driver} (size tier: {recommendation.size_tier.label}, "
            f"file tier: {recommendation.file_tier.label})"
        )

    lines.append(f"[bold green]Suggested cluster size:[/] {cluster_text}")
    lines.append(f"[cyan]Reason:[/] {escape(reason)}")
    return lines


def main(
    argv: Optional[List[str]] = None,
    strategy: str = "bytes",
    prog: str = "cluster-size-suggestion",
):
    configure_logging()
    argv = list(sys.argv[1:] if argv is None else argv)

    parser = build_parser(prog, strategy)
    wants_help, unknown, positionals = split_arguments(argv)
    if wants_help:
        parser.print_help()
        sys.exit(0)
    if unknown:
        _exit_with_error(f"Unknown option(s): {', '.join(unknown)}")

    # only the first positional is the target; the rest are ignored
    args = parser.parse_args(["--", *positionals[:1]])

    target_path = os.path.abspath(args.path or ".")
    logger.debug("cli_started", target=target_path, strategy=strategy)

    try:
        with err_console.status(f"[bold green]Scanning {escape(target_path)}..."):
            results = analyze_target(target_path, strategy=strategy)
    except ClusterSizeError as e:
        _exit_with_error(str(e))

    for line in render_report(results):
        console.print(line)


def main_workers(argv: Optional[List[str]] = None):
    main(argv, strategy="workers", prog="cluster-worker-suggestion")


if __name__ == "__main__":
    main()
