"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from sandboxctl import __version__
from sandboxctl.cli.commands import delete, scan
from sandboxctl.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="sandboxctl",
    help="Locate and clean up sandboxed application containers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"sandboxctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """sandboxctl - Locate and clean up sandboxed application containers.

    Each container under the containers root is identified by the single
    entry in its Data/Library/Application Scripts directory.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose)


# Register commands
app.command(name="scan")(scan.scan_containers)
app.command(name="delete")(delete.delete_containers)


if __name__ == "__main__":
    app()
