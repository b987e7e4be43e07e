"""Container deletion operator.

Resolves requested marker entry names to their containers and removes
each container recursively. Failures are isolated per name and collected
into a summary; deletions that already succeeded are never rolled back.
"""

import logging
import shutil
from collections.abc import Iterable, Iterator
from pathlib import Path

from sandboxctl.containers.errors import ContainerRemovalError, SandboxError
from sandboxctl.containers.locator import locate_container
from sandboxctl.containers.models import ContainerActionResult, DeletionSummary

logger = logging.getLogger(__name__)


def split_target_names(values: Iterable[str]) -> list[str]:
    """Split raw target arguments into individual names.

    Each value may hold several whitespace-separated names. Order and
    duplicates are preserved; blank values contribute nothing.

    Args:
        values: Raw target arguments.

    Returns:
        Flat list of names.
    """
    names: list[str] = []
    for value in values:
        names.extend(value.split())
    return names


class ContainerOperator:
    """Handles deletion of containers identified by marker entry name.

    Attributes:
        _root: Containers root directory.
    """

    def __init__(self, root: str | Path) -> None:
        """Initialize the ContainerOperator.

        Args:
            root: Containers root directory.
        """
        self._root = Path(root)

    def iter_delete(self, names: Iterable[str]) -> Iterator[ContainerActionResult]:
        """Delete the container of each name, yielding results as they happen.

        Names are trimmed; names that are empty after trimming are skipped
        without producing a result.

        Args:
            names: Marker entry names, processed in order.

        Yields:
            ContainerActionResult for each non-blank name.
        """
        for raw_name in names:
            name = raw_name.strip()
            if not name:
                continue
            yield self._delete_single(name)

    def delete(self, names: Iterable[str]) -> DeletionSummary:
        """Delete the containers of all names and summarize the outcome.

        Args:
            names: Marker entry names, processed in order.

        Returns:
            DeletionSummary with one result per non-blank name.
        """
        return DeletionSummary(results=list(self.iter_delete(names)))

    def _delete_single(self, name: str) -> ContainerActionResult:
        """Locate and remove the container for a single name.

        Args:
            name: Trimmed marker entry name.

        Returns:
            ContainerActionResult indicating success or failure.
        """
        try:
            container = locate_container(self._root, name)
        except SandboxError as e:
            logger.info("Cannot delete %s: %s", name, e)
            return ContainerActionResult(name=name, success=False, error=str(e))

        try:
            self._remove(container)
        except ContainerRemovalError as e:
            logger.warning("Removal of %s failed: %s", container, e.reason)
            return ContainerActionResult(
                name=name,
                success=False,
                container=str(container),
                error=e.reason,
            )

        logger.info("Deleted container %s for %s", container, name)
        return ContainerActionResult(name=name, success=True, container=str(container))

    @staticmethod
    def _remove(container: Path) -> None:
        """Remove a container directory and all of its contents.

        Raises:
            ContainerRemovalError: If removal fails. The directory may be
                partially deleted.
        """
        try:
            shutil.rmtree(container)
        except OSError as e:
            raise ContainerRemovalError(str(container), str(e)) from e
