"""Integration tests for OfflineWorkspaceScanner over fixture workspaces."""

from pathlib import Path

import pytest

from workspace_scanner.discovery import OfflineWorkspaceScanner
from workspace_scanner.exceptions import UniquenessViolationError
from workspace_scanner.parsing import parse_clauses


@pytest.fixture
def scanner(multilevel_workspace: Path) -> OfflineWorkspaceScanner:
    clauses = parse_clauses("root1;depth=2,root2;depth=1")
    return OfflineWorkspaceScanner(clauses, multilevel_workspace)


@pytest.fixture
def clash_scanner(name_clash_workspace: Path) -> OfflineWorkspaceScanner:
    clauses = parse_clauses("root1;depth=1,root2;depth=1")
    return OfflineWorkspaceScanner(clauses, name_clash_workspace)


def test_find_all_projects_in_order(scanner: OfflineWorkspaceScanner):
    assert scanner.find_projects() == ["P1", "P2", "P3", "P4", "P5"]


def test_find_all_projects_is_deterministic(multilevel_workspace: Path):
    results = []
    for _ in range(3):
        clauses = parse_clauses("root1;depth=2,root2;depth=1")
        results.append(OfflineWorkspaceScanner(clauses, multilevel_workspace).find_projects())

    assert results[0] == results[1] == results[2]


def test_minimal_traversal(scanner: OfflineWorkspaceScanner):
    scanner.find_project("P1")
    assert scanner.visited_count == 2
    scanner.find_project("P2")
    assert scanner.visited_count == 3
    scanner.find_project("P3")
    assert scanner.visited_count == 5

    scanner.find_project("P1")
    assert scanner.visited_count == 5
    scanner.find_project("P2")
    assert scanner.visited_count == 5
    scanner.find_project("P3")
    assert scanner.visited_count == 5


def test_find_project_returns_location(scanner: OfflineWorkspaceScanner, multilevel_workspace: Path):
    assert scanner.find_project("P3") == multilevel_workspace / "root1" / "b" / "P3"
    assert scanner.find_project("P5") == multilevel_workspace / "root2" / "P5"


def test_projects_beyond_depth_are_not_found(scanner: OfflineWorkspaceScanner):
    projects = scanner.find_projects()

    # root1/c/d/P8 is at depth 3, root2/sub/P6 at depth 2
    assert "P8" not in projects
    assert "P6" not in projects
    assert scanner.find_project("P8") is None
    assert scanner.find_project("P6") is None


def test_projects_at_exact_depth_are_found(scanner: OfflineWorkspaceScanner):
    # root1/a/P1 is at depth 2, root2/P4 at depth 1
    assert scanner.find_project("P1") is not None
    assert scanner.find_project("P4") is not None


def test_projects_inside_projects_are_pruned(scanner: OfflineWorkspaceScanner):
    assert scanner.find_project("P7") is None
    assert scanner.visited_count == 10


def test_not_found_visits_whole_search_space(scanner: OfflineWorkspaceScanner):
    assert scanner.find_project("DOES-NOT-EXIST") is None
    assert scanner.visited_count == 10
    assert scanner.exhausted


def test_find_all_is_idempotent(scanner: OfflineWorkspaceScanner):
    first = scanner.find_projects()
    visited = scanner.visited_count

    second = scanner.find_projects()

    assert first == second
    assert scanner.visited_count == visited


def test_find_all_resumes_after_find_one(scanner: OfflineWorkspaceScanner):
    scanner.find_project("P3")
    assert scanner.visited_count == 5

    assert scanner.find_projects() == ["P1", "P2", "P3", "P4", "P5"]
    assert scanner.visited_count == 10


def test_find_one_after_find_all_does_no_work(scanner: OfflineWorkspaceScanner):
    scanner.find_projects()

    assert scanner.find_project("P4") is not None
    assert scanner.find_project("unknown") is None
    assert scanner.visited_count == 10


def test_clause_order_determines_discovery_order(multilevel_workspace: Path):
    clauses = parse_clauses("root2;depth=1,root1;depth=2")
    scanner = OfflineWorkspaceScanner(clauses, multilevel_workspace)

    assert scanner.find_projects() == ["P4", "P5", "P1", "P2", "P3"]


def test_name_clash_fails_find_all(clash_scanner: OfflineWorkspaceScanner):
    with pytest.raises(UniquenessViolationError):
        clash_scanner.find_projects()


def test_name_clash_raised_only_on_second_occurrence(
    clash_scanner: OfflineWorkspaceScanner, name_clash_workspace: Path
):
    # First occurrence of X, and B before the second one, are fine
    assert clash_scanner.find_project("X") == name_clash_workspace / "root1" / "X"
    assert clash_scanner.find_project("B") == name_clash_workspace / "root2" / "B"
    assert clash_scanner.visited_count == 3

    with pytest.raises(UniquenessViolationError):
        clash_scanner.find_project("Z")
    assert clash_scanner.visited_count == 4

    with pytest.raises(UniquenessViolationError):
        clash_scanner.find_project("X")
