"""Loading of workspace configuration files."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from workspace_scanner.exceptions import ConfigurationError
from workspace_scanner.models import PROJECT_MARKER, SearchClause
from workspace_scanner.parsing.clauses import parse_clauses

logger = logging.getLogger(__name__)


@dataclass
class WorkspaceConfig:
    """Where to look for projects and how to recognise them."""

    base_dir: Path
    project_search: list[SearchClause] = field(default_factory=list)
    marker: str = PROJECT_MARKER


def _parse_project_search(raw) -> list[SearchClause]:
    if isinstance(raw, str):
        return parse_clauses(raw)

    if not isinstance(raw, list):
        raise ConfigurationError(
            f"project_search must be a string or a list, got {type(raw).__name__}"
        )

    clauses = []
    for entry in raw:
        if isinstance(entry, str):
            entry = {"root": entry}
        if not isinstance(entry, dict) or not entry.get("root"):
            raise ConfigurationError(f"project_search entry needs a root: {entry!r}")
        attributes = {k: str(v) for k, v in entry.items() if k != "root"}
        clauses.append(SearchClause.from_attributes(str(entry["root"]), attributes))

    roots = [clause.root for clause in clauses]
    if len(set(roots)) != len(roots):
        raise ConfigurationError("project_search lists the same root more than once")
    return clauses


def load_config(path: str | Path) -> WorkspaceConfig:
    """Load and validate a workspace configuration from a YAML file.

    A relative ``base_dir`` is resolved against the directory containing the
    file; when absent, that directory itself is the base dir.

    Args:
        path: Filesystem path to the YAML configuration file

    Returns:
        A fully populated WorkspaceConfig

    Raises:
        ConfigurationError: If the file does not exist, is not valid YAML,
            or project_search is missing or malformed
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")

    with open(config_path, encoding='utf-8') as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {path} must contain a YAML mapping")

    if not raw.get("project_search"):
        raise ConfigurationError("project_search is required")

    base_dir = config_path.parent / str(raw.get("base_dir") or ".")
    marker = raw.get("marker") or PROJECT_MARKER
    clauses = _parse_project_search(raw["project_search"])

    logger.debug("Loaded config from %s", path)
    logger.debug("base_dir=%s clauses=%s", base_dir, ", ".join(map(str, clauses)))

    return WorkspaceConfig(
        base_dir=base_dir,
        project_search=clauses,
        marker=str(marker),
    )
