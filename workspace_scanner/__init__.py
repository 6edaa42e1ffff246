"""Workspace Scanner - incremental, cached location of projects in a workspace.

This library finds build projects (directories holding a marker file) under a
set of search roots, scanning only as much of the tree as each query needs and
caching every project it discovers.
"""

from workspace_scanner.exceptions import (
    WorkspaceScannerError,
    ConfigurationError,
    ProjectNotFoundError,
    UniquenessViolationError,
)

from workspace_scanner.models import (
    PROJECT_MARKER,
    AuditEvent,
    ProjectRecord,
    SearchClause,
)

from workspace_scanner.config import WorkspaceConfig, load_config
from workspace_scanner.discovery import OfflineWorkspaceScanner, TraversalFrame, WorkspaceScanner
from workspace_scanner.observability import AuditSink, JSONLAuditSink, StdoutAuditSink
from workspace_scanner.parsing import parse_clauses, parse_parameters
from workspace_scanner.runtime import Workspace

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "WorkspaceScannerError",
    "ConfigurationError",
    "ProjectNotFoundError",
    "UniquenessViolationError",
    # Models
    "PROJECT_MARKER",
    "AuditEvent",
    "ProjectRecord",
    "SearchClause",
    # Configuration
    "WorkspaceConfig",
    "load_config",
    "parse_clauses",
    "parse_parameters",
    # Scanning
    "OfflineWorkspaceScanner",
    "TraversalFrame",
    "WorkspaceScanner",
    "Workspace",
    # Observability
    "AuditSink",
    "JSONLAuditSink",
    "StdoutAuditSink",
]
