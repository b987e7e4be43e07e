"""Container domain models.

This module defines the constants that identify a sandbox container
and the data structures produced while scanning and deleting them.
"""

from dataclasses import dataclass, field
from enum import Enum

from sandboxctl.containers.errors import PartialDeletionError

# Relative path inside a container where the application's script
# bundle lives. Compared case-sensitively as a forward-slash suffix.
MARKER_SUBPATH: tuple[str, ...] = ("Data", "Library", "Application Scripts")
MARKER_SUFFIX: str = "/".join(MARKER_SUBPATH)

# Marker entries with this prefix belong to the operating system vendor.
SYSTEM_PREFIX: str = "com.apple."


class VisitStatus(str, Enum):
    """Outcome of inspecting a single marker directory.

    Attributes:
        MATCHED: The first entry qualifies and its path is reported.
        EMPTY: The directory has no entries.
        FILTERED: The first entry is system-named and was suppressed.
        UNREADABLE: The directory could not be listed and was skipped.
    """

    MATCHED = "matched"
    EMPTY = "empty"
    FILTERED = "filtered"
    UNREADABLE = "unreadable"


@dataclass(frozen=True, slots=True)
class DirectoryVisit:
    """Tagged result of visiting one directory during a scan.

    Attributes:
        directory: Directory that was visited.
        status: Classification of the visit.
        entry_path: Full path of the marker entry (MATCHED only).
        error: Reason the directory was skipped (UNREADABLE only).
    """

    directory: str
    status: VisitStatus
    entry_path: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate that entry_path is set exactly for matched visits."""
        if (self.status == VisitStatus.MATCHED) != (self.entry_path is not None):
            msg = f"entry_path must be set only for matched visits, got {self.status.value}"
            raise ValueError(msg)

    @property
    def matched(self) -> bool:
        """Check if the visit produced a reportable path."""
        return self.status == VisitStatus.MATCHED


@dataclass(frozen=True, slots=True)
class ContainerActionResult:
    """Result of processing a single deletion target name.

    Attributes:
        name: Target marker entry name as requested (trimmed).
        success: Whether the matching container was removed.
        container: Path of the located container, None if not found.
        error: Failure reason, None on success.
    """

    name: str
    success: bool
    container: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if processing this name failed."""
        return not self.success


@dataclass(slots=True)
class DeletionSummary:
    """Aggregate outcome of a deletion batch, in input order."""

    results: list[ContainerActionResult] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        """Number of containers removed."""
        return sum(1 for r in self.results if r.success)

    @property
    def failures(self) -> list[tuple[str, str]]:
        """Failed target names paired with their reasons."""
        return [(r.name, r.error or "unknown error") for r in self.results if r.failed]

    @property
    def failed(self) -> bool:
        """Check if any target name failed."""
        return any(r.failed for r in self.results)

    def raise_for_failures(self) -> None:
        """Raise PartialDeletionError if any target name failed.

        Raises:
            PartialDeletionError: If the batch contains failures.
        """
        if self.failed:
            raise PartialDeletionError(self)
