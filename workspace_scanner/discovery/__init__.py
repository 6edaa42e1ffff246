"""Discovery module for workspace scanning."""

from workspace_scanner.discovery.scanner import OfflineWorkspaceScanner, WorkspaceScanner
from workspace_scanner.discovery.traversal import TraversalFrame

__all__ = ["OfflineWorkspaceScanner", "WorkspaceScanner", "TraversalFrame"]
