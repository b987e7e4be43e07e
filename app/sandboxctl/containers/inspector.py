"""Marker directory inspection.

A marker directory is expected to hold exactly one entry. Only the first
entry of the sorted listing is ever examined; additional entries are
ignored rather than treated as an error.
"""

import logging
from pathlib import Path

from sandboxctl.containers.models import SYSTEM_PREFIX, DirectoryVisit, VisitStatus

logger = logging.getLogger(__name__)


def first_entry_name(directory: str | Path) -> str | None:
    """Return the name of the first entry in a directory.

    Entries are ordered by name so the result is stable across runs.

    Args:
        directory: Directory to list.

    Returns:
        Name of the first entry, or None if the directory is empty.

    Raises:
        OSError: If the directory cannot be listed.
    """
    names = sorted(entry.name for entry in Path(directory).iterdir())
    return names[0] if names else None


def is_system_name(name: str) -> bool:
    """Check if an entry name belongs to the system vendor."""
    return name.startswith(SYSTEM_PREFIX)


def inspect_directory(directory: str | Path, include_system: bool = False) -> DirectoryVisit:
    """Inspect a marker directory and classify its first entry.

    Args:
        directory: Marker directory to inspect.
        include_system: If True, system-named entries are reported too.

    Returns:
        DirectoryVisit describing the outcome. Listing failures produce
        an UNREADABLE visit instead of raising.
    """
    dir_str = str(directory)
    try:
        name = first_entry_name(directory)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", dir_str, e)
        return DirectoryVisit(directory=dir_str, status=VisitStatus.UNREADABLE, error=str(e))

    if name is None:
        return DirectoryVisit(directory=dir_str, status=VisitStatus.EMPTY)

    if is_system_name(name) and not include_system:
        return DirectoryVisit(directory=dir_str, status=VisitStatus.FILTERED)

    return DirectoryVisit(
        directory=dir_str,
        status=VisitStatus.MATCHED,
        entry_path=str(Path(directory) / name),
    )


def inspect(directory: str | Path, include_system: bool = False) -> str | None:
    """Return the full path of a marker directory's qualifying entry.

    Args:
        directory: Marker directory to inspect.
        include_system: If True, system-named entries are reported too.

    Returns:
        Full entry path, or None if the directory is empty, unreadable,
        or its first entry was filtered out.
    """
    return inspect_directory(directory, include_system).entry_path
