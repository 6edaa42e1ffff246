"""Command-line interface for the workspace scanner.

This module provides a CLI for locating projects in a workspace without
writing code.

Commands:
    list: Display all projects in the workspace
    find: Display the location of one or more projects

Example:
    $ workspace-scanner list --base-dir ./workspace --search "root1;depth=2,root2"
    $ workspace-scanner find P1 P3 --config workspace.yaml --stats
    $ workspace-scanner list --config workspace.yaml --format json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import NoReturn

from workspace_scanner.config import load_config
from workspace_scanner.exceptions import ConfigurationError, WorkspaceScannerError
from workspace_scanner.log_setup import setup_logging
from workspace_scanner.models import PROJECT_MARKER
from workspace_scanner.observability.audit import JSONLAuditSink
from workspace_scanner.parsing.clauses import parse_clauses
from workspace_scanner.runtime.workspace import Workspace


def _add_workspace_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML workspace file declaring base_dir, marker and project_search",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=Path("."),
        help="Workspace base directory (default: current directory)",
    )
    parser.add_argument(
        "--search",
        help='Search clauses, e.g. "root1;depth=2,root2" (required without --config)',
    )
    parser.add_argument(
        "--marker",
        help=f"File marking a project directory (default: {PROJECT_MARKER})",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Report the number of directories visited on stderr",
    )
    parser.add_argument(
        "--audit-log",
        type=Path,
        help="Append scanner events to this JSONL file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log scan progress to stderr",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every directory visited to stderr",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="workspace-scanner",
        description="Locate projects in a workspace",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser(
        "list",
        help="List all projects",
        description="Display every project found under the search roots",
    )
    _add_workspace_arguments(list_parser)

    find_parser = subparsers.add_parser(
        "find",
        help="Locate projects by BSN",
        description="Display the directory of each requested project",
    )
    find_parser.add_argument(
        "bsn",
        nargs="+",
        help="Bundle symbolic name of a project",
    )
    _add_workspace_arguments(find_parser)

    return parser


def open_workspace(args: argparse.Namespace) -> Workspace:
    """Build a Workspace from parsed command-line arguments.

    Raises:
        ConfigurationError: If neither --config nor --search is given, or
                            either one is malformed
    """
    if args.config:
        config = load_config(args.config)
        base_dir, clauses, marker = config.base_dir, config.project_search, config.marker
    elif args.search is not None:
        base_dir, clauses, marker = args.base_dir, parse_clauses(args.search), PROJECT_MARKER
    else:
        raise ConfigurationError("Either --config or --search is required")

    audit_sink = JSONLAuditSink(args.audit_log) if args.audit_log else None
    return Workspace(base_dir, clauses, marker=args.marker or marker, audit_sink=audit_sink)


def _print_stats(workspace: Workspace) -> None:
    print(f"Directories visited: {workspace.visited_count}", file=sys.stderr)


def cmd_list(args: argparse.Namespace) -> int:
    """Execute the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        workspace = open_workspace(args)
        projects = workspace.list_projects()

        if args.format == "json":
            print(json.dumps([p.to_dict() for p in projects], indent=2))
        elif not projects:
            print("No projects found.")
        else:
            print(f"Found {len(projects)} project(s):\n")
            for project in projects:
                print(f"  {project.bsn}")
                print(f"    Location: {project.path.absolute()}")

        if args.stats:
            _print_stats(workspace)
        return 0

    except WorkspaceScannerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Filesystem error: {e}", file=sys.stderr)
        return 1


def cmd_find(args: argparse.Namespace) -> int:
    """Execute the find command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when every project was found, 1 otherwise)
    """
    try:
        workspace = open_workspace(args)

        found = {}
        for bsn in args.bsn:
            path = workspace.find_project(bsn)
            found[bsn] = str(path.absolute()) if path is not None else None

        if args.format == "json":
            print(json.dumps(found, indent=2))
        else:
            for bsn, location in found.items():
                print(f"{bsn}: {location if location else 'not found'}")

        if args.stats:
            _print_stats(workspace)

        missing = [bsn for bsn, location in found.items() if location is None]
        if missing:
            print(f"Error: project(s) not found: {', '.join(missing)}", file=sys.stderr)
            return 1
        return 0

    except WorkspaceScannerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Filesystem error: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for the CLI.

    Parses command-line arguments and dispatches to the command handler.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    setup_logging(debug=args.debug, trace=args.trace)

    if args.command == "list":
        exit_code = cmd_list(args)
    else:
        exit_code = cmd_find(args)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
