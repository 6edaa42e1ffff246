"""Logging configuration for the workspace-scanner command line."""

import logging
import sys

TRACE = 5
LOGGER_NAME = "workspace_scanner"

logging.addLevelName(TRACE, "TRACE")

_CONSOLE_FMT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(*, debug: bool = False, trace: bool = False) -> logging.Logger:
    """Configure the package logger with a single stderr handler.

    The library never calls this itself; it is for applications such as the
    CLI. Calling it again replaces the previous handler.

    Args:
        debug: Log scan progress (roots entered, projects found)
        trace: Also log every directory checked for a project marker

    Returns:
        The configured package logger
    """
    root = logging.getLogger(LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(TRACE)

    console = logging.StreamHandler(sys.stderr)
    if trace:
        console.setLevel(TRACE)
    elif debug:
        console.setLevel(logging.DEBUG)
    else:
        console.setLevel(logging.WARNING)
    console.setFormatter(logging.Formatter(_CONSOLE_FMT))
    root.addHandler(console)

    return root
