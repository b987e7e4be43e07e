"""User settings for sandboxctl.

Settings are read from ~/.config/sandboxctl/config.toml:

    [containers]
    root = "~/Library/Containers"
    include_system = false

Command-line options take precedence over values from the file.
"""

import logging
import sys
import tomllib
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sandboxctl.core.paths import get_default_containers_root, get_settings_path

logger = logging.getLogger(__name__)


class ContainersSettings(BaseModel):
    """Settings for the [containers] section.

    Attributes:
        root: Containers root directory (None for ~/Library/Containers).
        include_system: Report system-named marker entries when scanning.
    """

    model_config = ConfigDict(extra="forbid")

    root: Annotated[Path | None, Field(description="Containers root directory")] = None
    include_system: Annotated[bool, Field(description="Show system-named entries")] = False

    @field_validator("root", mode="after")
    @classmethod
    def expand_root(cls, v: Path | None) -> Path | None:
        """Expand ~ in the configured root."""
        return v.expanduser() if v is not None else None


class Settings(BaseModel):
    """Top-level sandboxctl settings."""

    model_config = ConfigDict(extra="forbid")

    containers: ContainersSettings = Field(default_factory=ContainersSettings)

    def resolve_root(self, override: Path | None = None) -> Path:
        """Resolve the containers root.

        Args:
            override: Root given on the command line, if any.

        Returns:
            Absolute path of the override, else the configured root, else
            ~/Library/Containers.
        """
        if override is not None:
            return override.expanduser().absolute()
        if self.containers.root is not None:
            return self.containers.root.absolute()
        return get_default_containers_root()


def read_toml_file(path: Path) -> dict[str, Any] | None:
    """Read a TOML file.

    Parse errors are reported on stderr.

    Returns:
        The parsed document, or None if the file is missing, unreadable
        or malformed.
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse %s: %s", path, e)
        print(f"Warning: Failed to parse {path}: {e}", file=sys.stderr)
        return None
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        return None


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing file yields defaults. An unreadable or invalid file is
    reported on stderr and also yields defaults.

    Args:
        path: Settings file to read. Defaults to get_settings_path().

    Returns:
        Validated Settings instance.
    """
    if path is None:
        path = get_settings_path()

    data = read_toml_file(path)
    if data is None:
        return Settings()

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        logger.warning("Settings validation failed, using defaults: %s", e)
        print(f"Warning: Invalid settings in {path}: {e}", file=sys.stderr)
        return Settings()
