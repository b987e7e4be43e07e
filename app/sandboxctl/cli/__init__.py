"""CLI package for sandboxctl.

This package contains the Typer application and all subcommands.
"""

from sandboxctl.cli.main import app

__all__ = ["app"]
