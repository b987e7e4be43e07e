"""CLI commands for sandboxctl.

This package contains all subcommand implementations.
"""

from sandboxctl.cli.commands import delete, scan

__all__ = ["delete", "scan"]
