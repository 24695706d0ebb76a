from typing import Optional


class ClusterSizeError(ValueError):
    """Base class for errors that abort a scan."""


class TargetNotFoundError(ClusterSizeError):
    """The root path could not be looked up."""

    def __init__(self, target_path: str, code: Optional[str] = None):
        super().__init__(f"Target not found: {target_path}")
        self.target_path = target_path
        self.code = code


class InvalidTargetTypeError(ClusterSizeError):
    """The root path exists but is neither a file, a directory nor a symlink."""

    def __init__(self, target_path: str):
        super().__init__("Target must be a file or directory.")
        self.target_path = target_path
