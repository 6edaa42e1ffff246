"""Pytest configuration and shared fixtures."""

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from workspace_scanner.log_setup import LOGGER_NAME
from workspace_scanner.models import PROJECT_MARKER


def make_project(path: Path) -> Path:
    """Create a project directory holding the marker file."""
    path.mkdir(parents=True, exist_ok=True)
    (path / PROJECT_MARKER).write_text("Bundle-Version: 1.0.0\n")
    return path


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging() during a test."""
    yield
    logging.getLogger(LOGGER_NAME).handlers.clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def multilevel_workspace(temp_dir: Path) -> Path:
    """Create a workspace searched with "root1;depth=2,root2;depth=1".

    Layout (projects marked with *):

        root1/
            README.txt
            a/P1*  a/P2*
            b/P3*  b/P3/P7*    (below a project, never visited)
            c/d/P8*            (deeper than depth 2, never visited)
        root2/
            P4*  P5*
            sub/P6*            (deeper than depth 1, never visited)

    Directories within the depth bounds, in visiting order:
    a P1 P2 b P3 c d | P4 P5 sub (10 in total).
    """
    base = temp_dir / "scanner"
    root1 = base / "root1"
    root2 = base / "root2"

    root1.mkdir(parents=True)
    (root1 / "README.txt").write_text("Not a directory")
    make_project(root1 / "a" / "P1")
    make_project(root1 / "a" / "P2")
    make_project(root1 / "b" / "P3")
    make_project(root1 / "b" / "P3" / "P7")
    make_project(root1 / "c" / "d" / "P8")

    make_project(root2 / "P4")
    make_project(root2 / "P5")
    make_project(root2 / "sub" / "P6")

    return base


@pytest.fixture
def name_clash_workspace(temp_dir: Path) -> Path:
    """Create a workspace where root1/X and root2/X are both projects.

    root1 also holds project A before X, root2 holds project B before X.
    """
    base = temp_dir / "name-clash"
    make_project(base / "root1" / "A")
    make_project(base / "root1" / "X")
    make_project(base / "root2" / "B")
    make_project(base / "root2" / "X")
    return base
