"""Scan command implementation.

Lists the marker entry of every sandbox container below the containers root.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from sandboxctl.containers.errors import ContainersRootError
from sandboxctl.containers.scanner import ContainerScanner
from sandboxctl.core.settings import load_settings
from sandboxctl.utils.formatting import console, print_error, print_warning


class OutputFormat(str, Enum):
    """Output format options."""

    PLAIN = "plain"
    JSON = "json"


def scan_containers(
    ctx: typer.Context,
    system: Annotated[
        bool,
        typer.Option(
            "--system",
            "-s",
            help="Also show entries starting with com.apple.",
        ),
    ] = False,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            "-r",
            help="Containers root directory (default: ~/Library/Containers).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: plain or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.PLAIN,
) -> None:
    """List the marker entry path of every container.

    Prints one absolute path per line, in scan order.

    Examples:
        sandboxctl scan                     # Hide com.apple.* entries
        sandboxctl scan --system            # Include com.apple.* entries
        sandboxctl scan --root /tmp/ctrs    # Scan another root
        sandboxctl scan --format json       # Output as JSON
    """
    settings = load_settings()
    containers_root = settings.resolve_root(root)
    include_system = system or settings.containers.include_system
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))

    scanner = ContainerScanner(containers_root, include_system=include_system)
    paths: list[str] = []
    skipped = 0

    try:
        for visit in scanner.visit():
            if visit.entry_path is not None:
                if output_format == OutputFormat.PLAIN:
                    typer.echo(visit.entry_path)
                paths.append(visit.entry_path)
            elif visit.error is not None:
                skipped += 1
                if verbose:
                    print_warning(escape(f"Skipped {visit.directory}: {visit.error}"))
    except ContainersRootError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(paths))

    if verbose and skipped:
        print_warning(f"{skipped} inaccessible director(ies) skipped.")
