"""Sandbox container scanning and deletion.

This module locates per-application containers by the marker entry at
their fixed marker subpath, lists those entries, and removes containers
by marker entry name.
"""

from sandboxctl.containers.errors import (
    ContainerNotFoundError,
    ContainerRemovalError,
    ContainersRootError,
    PartialDeletionError,
    SandboxError,
)
from sandboxctl.containers.inspector import inspect, inspect_directory
from sandboxctl.containers.locator import locate_container
from sandboxctl.containers.models import (
    MARKER_SUBPATH,
    SYSTEM_PREFIX,
    ContainerActionResult,
    DeletionSummary,
    DirectoryVisit,
    VisitStatus,
)
from sandboxctl.containers.operator import ContainerOperator, split_target_names
from sandboxctl.containers.scanner import ContainerScanner, require_root

__all__ = [
    "MARKER_SUBPATH",
    "SYSTEM_PREFIX",
    "ContainerActionResult",
    "ContainerNotFoundError",
    "ContainerOperator",
    "ContainerRemovalError",
    "ContainerScanner",
    "ContainersRootError",
    "DeletionSummary",
    "DirectoryVisit",
    "PartialDeletionError",
    "SandboxError",
    "VisitStatus",
    "inspect",
    "inspect_directory",
    "locate_container",
    "require_root",
    "split_target_names",
]
