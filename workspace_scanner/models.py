"""Data models for the workspace scanner."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Mapping

from workspace_scanner.exceptions import ConfigurationError

PROJECT_MARKER = "bnd.bnd"
SEARCH_DEPTH_ATTRIBUTE = "depth"


@dataclass(frozen=True)
class SearchClause:
    """One root directory to search, and how many levels below it to look."""
    root: Path
    depth: int = 1

    def __post_init__(self):
        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 1:
            raise ConfigurationError(
                f"Search depth for {self.root} must be a positive integer, got {self.depth!r}"
            )
        object.__setattr__(self, "root", Path(self.root))

    @classmethod
    def from_attributes(cls, root: str | Path, attributes: Mapping[str, str]) -> "SearchClause":
        """Build a clause from a root name and its parsed attribute map.

        Args:
            root: Root directory, usually relative to the workspace base dir
            attributes: Clause attributes; only ``depth`` is recognised

        Returns:
            SearchClause with depth 1 when the attribute is absent

        Raises:
            ConfigurationError: If depth is not a positive integer
        """
        if SEARCH_DEPTH_ATTRIBUTE not in attributes:
            return cls(root=Path(root))

        raw = str(attributes[SEARCH_DEPTH_ATTRIBUTE]).strip()
        try:
            depth = int(raw)
        except ValueError:
            raise ConfigurationError(
                f"Search depth for {root} must be a positive integer, got {raw!r}"
            ) from None
        return cls(root=Path(root), depth=depth)

    def resolve(self, base_dir: Path) -> "SearchClause":
        """Return a copy with the root joined onto base_dir, with ~ expanded."""
        return replace(self, root=Path(base_dir).expanduser() / self.root.expanduser())

    def __str__(self) -> str:
        return f"{self.root};depth={self.depth}"


@dataclass(frozen=True)
class ProjectRecord:
    """A discovered project: its BSN and the directory holding it."""
    bsn: str
    path: Path

    @classmethod
    def from_dir(cls, path: Path) -> "ProjectRecord":
        """Project name == BSN convention is encoded here."""
        return cls(bsn=path.name, path=path)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "bsn": self.bsn,
            "path": str(self.path.absolute()),
        }

    def __str__(self) -> str:
        return f"{self.bsn} {self.path.absolute()}"


@dataclass
class AuditEvent:
    """Record of a scanner event."""
    ts: datetime
    kind: str  # "discover", "collision", "exhausted"
    project: str | None = None
    path: str | None = None
    detail: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "ts": self.ts.isoformat(),
            "kind": self.kind,
            "project": self.project,
            "path": self.path,
            "detail": self.detail,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AuditEvent":
        """Deserialize from dict."""
        return cls(
            ts=datetime.fromisoformat(data["ts"]),
            kind=data["kind"],
            project=data.get("project"),
            path=data.get("path"),
            detail=data.get("detail", {}),
        )
