"""Theme management for sandboxctl CLI.

Colors come from the bundled data/theme.toml, with any value overridable
in ~/.config/sandboxctl/theme.toml.
"""

import logging
import re
import sys
from functools import cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from sandboxctl.core.paths import get_config_dir
from sandboxctl.core.settings import read_toml_file

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Colors for the styles used in command output (#RGB or #RRGGBB)."""

    model_config = ConfigDict(extra="forbid")

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    muted: str = "#b2bec3"
    path: str = "#69B9A1"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object) -> str:
        if not isinstance(v, str) or not _HEX_COLOR.fullmatch(v.strip()):
            msg = f"invalid hex color {v!r}"
            raise ValueError(msg)
        return v.strip()


def get_user_theme_path() -> Path:
    """Get the user theme path (~/.config/sandboxctl/theme.toml)."""
    return get_config_dir() / "theme.toml"


def get_bundled_theme_path() -> Path:
    """Get the path of the bundled default theme."""
    return Path(str(resources.files("sandboxctl.data").joinpath("theme.toml")))


def _read_colors(path: Path) -> dict[str, object]:
    data = read_toml_file(path) or {}
    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring invalid 'colors' section in %s", path)
        return {}
    return colors


def load_theme() -> ThemeColors:
    """Load theme colors, user values overriding bundled ones.

    An invalid merged configuration is reported on stderr and replaced by
    the built-in defaults.
    """
    colors = {**_read_colors(get_bundled_theme_path()), **_read_colors(get_user_theme_path())}
    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        print(f"Warning: Invalid theme configuration: {e}", file=sys.stderr)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme, loading colors if not given."""
    if colors is None:
        colors = load_theme()

    return Theme(
        {
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "muted": colors.muted,
            "path": f"bold {colors.path}",
        }
    )


@cache
def get_theme() -> Theme:
    """Get the Rich theme, loaded once per process."""
    return get_rich_theme()
