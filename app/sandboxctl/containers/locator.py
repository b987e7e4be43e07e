"""Locate the container that owns a marker entry.

Only direct children of the containers root are considered; each of them
is one container by definition.
"""

import logging
import os
from pathlib import Path

from sandboxctl.containers.errors import ContainerNotFoundError, ContainersRootError
from sandboxctl.containers.inspector import first_entry_name
from sandboxctl.containers.models import MARKER_SUBPATH

logger = logging.getLogger(__name__)


def marker_path(container: str | Path) -> Path:
    """Build the marker directory path inside a container."""
    return Path(container).joinpath(*MARKER_SUBPATH)


def _list_containers(root: Path) -> list[Path]:
    """List direct child directories of the root in name order.

    Symlinks are not followed.

    Raises:
        ContainersRootError: If the root cannot be listed.
    """
    try:
        with os.scandir(root) as it:
            entries = [Path(e.path) for e in it if e.is_dir(follow_symlinks=False)]
    except OSError as e:
        raise ContainersRootError(str(root), f"Cannot read containers directory ({e})") from e
    return sorted(entries)


def locate_container(root: str | Path, file_name: str) -> Path:
    """Find the first container whose marker entry equals file_name.

    System-named entries are matched like any other name.

    Args:
        root: Containers root directory.
        file_name: Marker entry name to look for (exact match).

    Returns:
        Path of the matching container directory.

    Raises:
        ContainerNotFoundError: If no container matches.
        ContainersRootError: If the root cannot be listed.
    """
    for container in _list_containers(Path(root)):
        marker = marker_path(container)
        try:
            name = first_entry_name(marker)
        except (FileNotFoundError, NotADirectoryError):
            continue
        except OSError as e:
            logger.debug("Skipping unreadable marker directory %s: %s", marker, e)
            continue

        if name == file_name:
            logger.debug("Marker entry %s found in %s", file_name, container)
            return container

    raise ContainerNotFoundError(file_name)
