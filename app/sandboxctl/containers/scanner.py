"""Container scanner for marker entries.

Walks the whole tree below the containers root and inspects every
directory whose path ends with the marker subpath. Subtrees that cannot
be entered are reported as UNREADABLE visits and the walk continues
with their siblings. A root that cannot be listed aborts the scan.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from sandboxctl.containers.errors import ContainersRootError
from sandboxctl.containers.inspector import inspect_directory
from sandboxctl.containers.models import MARKER_SUFFIX, DirectoryVisit, VisitStatus

logger = logging.getLogger(__name__)


def require_root(root: str | Path) -> Path:
    """Validate that the containers root is a directory that can be listed.

    Args:
        root: Containers root directory.

    Returns:
        The root as a Path.

    Raises:
        ContainersRootError: If the root is missing, not a directory, or
            cannot be read.
    """
    path = Path(root)
    try:
        exists = path.exists()
        is_dir = exists and path.is_dir()
    except OSError as e:
        raise ContainersRootError(str(path), f"Cannot access directory ({e})") from e

    if not exists:
        raise ContainersRootError(str(path), "Directory does not exist")
    if not is_dir:
        raise ContainersRootError(str(path), "Not a directory")

    try:
        with os.scandir(path):
            pass
    except OSError as e:
        raise ContainersRootError(str(path), f"Cannot read directory ({e})") from e
    return path


def is_marker_directory(path: str) -> bool:
    """Check if a path textually ends with the marker subpath.

    The comparison runs on the forward-slash normalized path string, so a
    deeper directory that happens to end with the same segments matches
    as well.
    """
    return path.replace(os.sep, "/").endswith(MARKER_SUFFIX)


class ContainerScanner:
    """Scans a containers root for marker entries.

    Args:
        root: Containers root directory.
        include_system: If True, system-named marker entries are reported.
    """

    def __init__(self, root: str | Path, *, include_system: bool = False) -> None:
        self._root = Path(root)
        self._include_system = include_system

    @property
    def root(self) -> Path:
        """Containers root directory being scanned."""
        return self._root

    def visit(self) -> Iterator[DirectoryVisit]:
        """Walk the tree and yield a visit per marker directory.

        Directories are traversed depth first, top-down, with siblings in
        name order. Symlinked directories are not followed. Every subtree
        below the root that the walk fails to list yields an UNREADABLE
        visit; failing to list the root itself is fatal.

        Yields:
            DirectoryVisit for each marker directory and each skipped subtree.

        Raises:
            ContainersRootError: If the root is missing, not a directory, or
                cannot be read.
        """
        require_root(self._root)

        walk_errors: list[OSError] = []
        for dirpath, dirnames, _filenames in os.walk(self._root, onerror=walk_errors.append):
            yield from self._drain(walk_errors)
            dirnames.sort()

            if is_marker_directory(dirpath):
                yield inspect_directory(dirpath, self._include_system)

        yield from self._drain(walk_errors)

    def scan(self) -> Iterator[str]:
        """Yield the full path of every qualifying marker entry.

        Yields:
            Absolute entry paths in scan order.

        Raises:
            ContainersRootError: If the root is missing, not a directory, or
                cannot be read.
        """
        for visit in self.visit():
            if visit.entry_path is not None:
                yield visit.entry_path

    def _drain(self, walk_errors: list[OSError]) -> Iterator[DirectoryVisit]:
        """Convert collected walk errors into UNREADABLE visits.

        Raises:
            ContainersRootError: If the error concerns the root itself.
        """
        while walk_errors:
            error = walk_errors.pop(0)
            if error.filename is not None and str(error.filename) == str(self._root):
                raise ContainersRootError(
                    str(self._root), f"Cannot read directory ({error})"
                ) from error
            directory = str(error.filename) if error.filename else "<unknown>"
            logger.debug("Skipping inaccessible subtree %s: %s", directory, error)
            yield DirectoryVisit(
                directory=directory,
                status=VisitStatus.UNREADABLE,
                error=error.strerror or str(error),
            )
