"""Exception hierarchy for container scanning and deletion."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sandboxctl.containers.models import DeletionSummary


class SandboxError(Exception):
    """Base class for all sandboxctl errors."""


class ContainersRootError(SandboxError):
    """The containers root is missing, not a directory, or unreadable.

    Raised before any scan or deletion work starts and aborts the run.
    """

    def __init__(self, root: str, reason: str) -> None:
        self.root = root
        self.reason = reason
        super().__init__(f"{reason}: {root}")


class ContainerNotFoundError(SandboxError):
    """No container holds a marker entry with the requested name."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"no container found containing file '{file_name}'")


class ContainerRemovalError(SandboxError):
    """Recursive removal of a container directory failed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to remove {path}: {reason}")


class PartialDeletionError(SandboxError):
    """At least one target name of a deletion batch failed.

    Successful deletions of the same batch are not rolled back.
    """

    def __init__(self, summary: DeletionSummary) -> None:
        self.summary = summary
        super().__init__(
            f"{len(summary.failures)} of {len(summary.results)} deletion(s) failed"
        )
