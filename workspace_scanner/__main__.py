"""Entry point for running workspace-scanner as a module.

This allows the package to be executed as:
    python -m workspace_scanner

It delegates to the CLI main function.
"""

from workspace_scanner.cli.main import main

if __name__ == "__main__":
    main()
