"""Workspace facade over the project scanner.

The Workspace is the entry point for build orchestration code: it turns a
configuration into a scanner, keeps that scanner for its whole lifetime so
repeated lookups stay cheap, and reports missing projects as exceptions.
"""

from pathlib import Path
from typing import Iterable

from workspace_scanner.config import WorkspaceConfig, load_config
from workspace_scanner.discovery.scanner import OfflineWorkspaceScanner
from workspace_scanner.exceptions import ProjectNotFoundError
from workspace_scanner.models import PROJECT_MARKER, ProjectRecord, SearchClause
from workspace_scanner.observability.audit import AuditSink


class Workspace:
    """A workspace directory tree and the projects within it.

    Example:
        >>> workspace = Workspace.from_config(Path("workspace.yaml"))
        >>> project = workspace.get_project("P1")
        >>> print(project.path)
        >>> for record in workspace.list_projects():
        ...     print(record.bsn)
    """

    def __init__(
        self,
        base_dir: Path,
        clauses: Iterable[SearchClause],
        marker: str = PROJECT_MARKER,
        audit_sink: AuditSink | None = None,
    ):
        """Initialize the workspace.

        Args:
            base_dir: Workspace base directory; relative clause roots are
                      resolved against it
            clauses: Search clauses, in the order roots are explored
            marker: Name of the file marking a project directory
            audit_sink: Optional AuditSink receiving scanner events
        """
        self.base_dir = Path(base_dir).expanduser()
        self.clauses = list(clauses)
        self.marker = marker
        self._scanner = OfflineWorkspaceScanner(
            self.clauses,
            self.base_dir,
            marker=marker,
            audit_sink=audit_sink,
        )

    @classmethod
    def from_config(cls, path: str | Path, audit_sink: AuditSink | None = None) -> "Workspace":
        """Create a Workspace from a YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing or malformed
        """
        config: WorkspaceConfig = load_config(path)
        return cls(
            config.base_dir,
            config.project_search,
            marker=config.marker,
            audit_sink=audit_sink,
        )

    @property
    def scanner(self) -> OfflineWorkspaceScanner:
        return self._scanner

    @property
    def visited_count(self) -> int:
        return self._scanner.visited_count

    def find_project(self, bsn: str) -> Path | None:
        """Return the directory of the project, or None when it does not exist."""
        return self._scanner.find_project(bsn)

    def get_project(self, bsn: str) -> ProjectRecord:
        """Return the project with the given BSN.

        Raises:
            ProjectNotFoundError: If no project has that BSN
            UniquenessViolationError: If a BSN collision is found while
                                      scanning
        """
        record = self._scanner.find_record(bsn)
        if record is None:
            raise ProjectNotFoundError(
                f"Project '{bsn}' not found in workspace {self.base_dir}. "
                f"Searched: {', '.join(map(str, self.clauses)) or 'nothing'}"
            )
        return record

    def list_projects(self) -> list[ProjectRecord]:
        """Return every project in the workspace, in discovery order."""
        self._scanner.find_projects()
        return self._scanner.projects
