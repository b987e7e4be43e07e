"""Delete command implementation.

Removes the containers whose marker entry matches the given names.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from sandboxctl.containers.errors import ContainersRootError, PartialDeletionError
from sandboxctl.containers.models import ContainerActionResult, DeletionSummary
from sandboxctl.containers.operator import ContainerOperator, split_target_names
from sandboxctl.containers.scanner import require_root
from sandboxctl.core.settings import load_settings
from sandboxctl.utils.formatting import console, print_error, print_success


def delete_containers(
    ctx: typer.Context,
    names: Annotated[
        list[str],
        typer.Argument(
            help="Marker entry names; each argument may hold several space-separated names.",
        ),
    ],
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            "-r",
            help="Containers root directory (default: ~/Library/Containers).",
        ),
    ] = None,
) -> None:
    """Delete the containers holding the given marker entries.

    Deletion is permanent. Each name is processed independently; a
    failure does not stop the remaining names.

    Examples:
        sandboxctl delete com.vendor.app1
        sandboxctl delete "com.vendor.app1 com.vendor.app2"
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    containers_root = load_settings().resolve_root(root)

    try:
        require_root(containers_root)
    except ContainersRootError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    operator = ContainerOperator(containers_root)
    summary = DeletionSummary()

    for result in operator.iter_delete(split_target_names(names)):
        summary.results.append(result)
        if not quiet:
            _print_progress(result)

    _print_summary(summary)

    try:
        summary.raise_for_failures()
    except PartialDeletionError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


# === Private helper functions ===


def _print_progress(result: ContainerActionResult) -> None:
    """Display the outcome for a single name."""
    name = escape(result.name)
    console.print(f"\nProcessing: [bold]{name}[/]")
    if result.container is not None:
        console.print(f"  Found container: [path]{escape(result.container)}[/]")
    if result.success:
        console.print("  [success]Deleted[/]")
    else:
        console.print(f"  [error]Failed:[/] {escape(result.error or 'unknown error')}")


def _print_summary(summary: DeletionSummary) -> None:
    """Display the batch summary and itemized failures."""
    failures = summary.failures
    if not failures:
        print_success(f"\nDeletion complete: {summary.success_count} deleted")
        return

    console.print(
        f"\nDeletion complete: [success]{summary.success_count} deleted[/], "
        f"[error]{len(failures)} failed[/]"
    )
    console.print("\nFailures:")
    for name, reason in failures:
        console.print(f"  {escape(name)}: [muted]{escape(reason)}[/]")
