"""Scan a filesystem path and suggest a cluster size from its file statistics."""

from cluster_size_suggestion.api import analyze_target

__version__ = "0.1.0"

__all__ = ["analyze_target", "__version__"]
