"""Parsing module for project search clauses."""

from workspace_scanner.parsing.clauses import parse_clauses, parse_parameters

__all__ = ["parse_clauses", "parse_parameters"]
