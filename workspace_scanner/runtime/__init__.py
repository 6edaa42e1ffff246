"""Runtime module for workspace access."""

from workspace_scanner.runtime.workspace import Workspace

__all__ = ["Workspace"]
