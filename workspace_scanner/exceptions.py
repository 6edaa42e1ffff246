"""Exception classes for the workspace scanner."""

from pathlib import Path


class WorkspaceScannerError(Exception):
    """Base exception for all workspace-scanner errors."""
    pass


class ConfigurationError(WorkspaceScannerError):
    """Raised when search clauses or a workspace file are malformed."""
    pass


class ProjectNotFoundError(WorkspaceScannerError):
    """Raised when a requested project does not exist in the workspace."""
    pass


class UniquenessViolationError(WorkspaceScannerError):
    """Raised when two directories in the workspace share the same BSN.

    The error is raised the moment the second directory is discovered.
    The scanner that raised it refuses any further scanning.
    """

    def __init__(self, bsn: str, first: Path, second: Path):
        self.bsn = bsn
        self.first = first
        self.second = second
        super().__init__(
            f"project {bsn} appears in two places in the workspace "
            f"{first.absolute()} and {second.absolute()}"
        )
