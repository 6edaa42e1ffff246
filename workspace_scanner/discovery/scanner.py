"""Incremental, cached scanning of a workspace for projects.

The scanner assumes that the workspace structure does not change while it is
in use. That allows scanning in incremental fashion: each query performs only
the directory reads needed to answer it, and every discovered project is
cached for later queries.

The directory tree is traversed depth first, search roots in configured
order, sibling directories in lexicographical order of their names.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Iterable

from workspace_scanner.discovery.traversal import TraversalFrame
from workspace_scanner.exceptions import UniquenessViolationError
from workspace_scanner.models import (
    PROJECT_MARKER,
    AuditEvent,
    ProjectRecord,
    SearchClause,
)
from workspace_scanner.observability.audit import AuditSink

TRACE = 5

logger = logging.getLogger(__name__)


class WorkspaceScanner(ABC):
    """Locates projects within a workspace."""

    @abstractmethod
    def find_project(self, bsn: str) -> Path | None:
        """Find the project with the specified BSN.

        Args:
            bsn: Bundle symbolic name of the project

        Returns:
            Project directory, or None when not found
        """
        pass

    @abstractmethod
    def find_projects(self) -> list[str]:
        """Find all projects within the workspace.

        Returns:
            List of project BSNs
        """
        pass


class OfflineWorkspaceScanner(WorkspaceScanner):
    """WorkspaceScanner for offline builds (command line, CI).

    Project BSNs must be unique across the workspace. When a duplicate BSN is
    encountered, UniquenessViolationError is raised by find_project() or
    find_projects(). Because scanning is incremental, the error is raised only
    when the BSN is encountered for the second time. After that the scanner
    is unusable and every query raises the same error again.

    A directory that is a project is never descended into. A directory deeper
    than its clause's depth below the clause root is never checked.

    Instances are not thread-safe.

    Example:
        >>> clauses = parse_clauses("root1;depth=2,root2;depth=1")
        >>> scanner = OfflineWorkspaceScanner(clauses, Path("workspace"))
        >>> scanner.find_project("P1")
        PosixPath('workspace/root1/a/P1')
        >>> scanner.find_projects()
        ['P1', 'P2', 'P3', 'P4', 'P5']
    """

    def __init__(
        self,
        clauses: Iterable[SearchClause],
        base_dir: Path,
        marker: str = PROJECT_MARKER,
        audit_sink: AuditSink | None = None,
    ):
        """Initialize the scanner.

        Nothing is read from disk until the first query.

        Args:
            clauses: Search clauses in the order roots are explored
            base_dir: Directory that relative clause roots are resolved against
            marker: Name of the file whose presence marks a project directory
            audit_sink: Optional AuditSink for discovery and collision events
        """
        self._base_dir = Path(base_dir).expanduser()
        self._clauses = iter(list(clauses))
        self._marker = marker
        self._audit_sink = audit_sink

        self._current_clause: SearchClause | None = None
        self._stack: list[TraversalFrame] = []
        self._cache: dict[str, ProjectRecord] = {}
        self._num_visited = 0
        self._exhausted = False
        self._failure: UniquenessViolationError | None = None

    @property
    def visited_count(self) -> int:
        """Number of directories checked for a project marker so far."""
        return self._num_visited

    @property
    def exhausted(self) -> bool:
        """True once the whole configured search space has been scanned."""
        return self._exhausted

    @property
    def projects(self) -> list[ProjectRecord]:
        """Projects discovered so far, in discovery order."""
        return list(self._cache.values())

    def find_record(self, bsn: str) -> ProjectRecord | None:
        """Find the ProjectRecord with the specified BSN.

        Cached projects are returned without touching the filesystem.
        Otherwise scanning resumes where the previous query stopped, until
        the project is found or the search space is exhausted.
        """
        self._check_usable()

        record = self._cache.get(bsn)
        if record is not None:
            return record

        while True:
            record = self.next_project()
            if record is None:
                return None
            if record.bsn == bsn:
                return record

    def find_project(self, bsn: str) -> Path | None:
        record = self.find_record(bsn)
        if record is None:
            return None
        return record.path

    def find_projects(self) -> list[str]:
        self._check_usable()
        while self.next_project() is not None:
            pass
        return list(self._cache)

    def next_project(self) -> ProjectRecord | None:
        """Find the next project in the workspace.

        Traverses the minimum number of directories needed to discover one
        new project.

        Returns:
            The newly discovered ProjectRecord, or None when the search space
            is exhausted. Once None is returned, it is returned on every
            later call.

        Raises:
            UniquenessViolationError: If the discovered project's BSN is
                                      already taken by another directory
            OSError: If a directory cannot be listed
        """
        self._check_usable()
        if self._exhausted:
            return None

        while True:
            if not self._stack:
                clause = next(self._clauses, None)
                if clause is None:
                    self._finish()
                    return None
                self._enter(clause)
                continue

            frame = self._stack[-1]
            if not frame.has_next():
                self._stack.pop()
                continue

            directory = frame.next()
            if self._is_project(directory):
                record = self._register(ProjectRecord.from_dir(directory))
                if record is not None:
                    return record
                continue

            if len(self._stack) < self._current_clause.depth:
                self._stack.append(TraversalFrame(directory))

    def _is_project(self, directory: Path) -> bool:
        """Check if a directory contains the project marker file.

        Every call counts as one visited directory.
        """
        self._num_visited += 1
        found = (directory / self._marker).exists()
        logger.log(TRACE, "Visited %s (project=%s)", directory, found)
        return found

    def _enter(self, clause: SearchClause) -> None:
        clause = clause.resolve(self._base_dir)
        if not clause.root.is_dir():
            logger.warning("Search root %s does not exist, skipping", clause.root)
            return

        logger.debug("Scanning search root %s", clause)
        self._current_clause = clause
        self._stack.append(TraversalFrame(clause.root))

    def _register(self, record: ProjectRecord) -> ProjectRecord | None:
        """Cache a newly found project.

        Returns None when the directory was already found through an
        overlapping search root.
        """
        previous = self._cache.get(record.bsn)
        if previous is not None and previous.path.resolve() == record.path.resolve():
            logger.debug("Project %s at %s already found, skipping", record.bsn, record.path)
            return None
        if previous is not None:
            self._failure = UniquenessViolationError(record.bsn, previous.path, record.path)
            logger.error("%s", self._failure)
            self._audit(
                "collision",
                record,
                detail={"first": str(previous.path.absolute())},
            )
            raise self._failure

        self._cache[record.bsn] = record
        logger.debug("Found project %s at %s", record.bsn, record.path)
        self._audit("discover", record, detail={"visited": self._num_visited})
        return record

    def _finish(self) -> None:
        self._exhausted = True
        self._current_clause = None
        logger.debug(
            "Workspace scan complete: %d projects, %d directories visited",
            len(self._cache),
            self._num_visited,
        )
        self._audit(
            "exhausted",
            detail={"projects": len(self._cache), "visited": self._num_visited},
        )

    def _check_usable(self) -> None:
        if self._failure is not None:
            raise self._failure

    def _audit(self, kind: str, record: ProjectRecord | None = None, detail: dict | None = None) -> None:
        if self._audit_sink is None:
            return
        self._audit_sink.log(
            AuditEvent(
                ts=datetime.now(),
                kind=kind,
                project=record.bsn if record else None,
                path=str(record.path.absolute()) if record else None,
                detail=detail or {},
            )
        )
