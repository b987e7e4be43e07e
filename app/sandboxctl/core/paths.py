"""XDG-compliant path management for sandboxctl.

This module provides the configuration paths following the XDG Base
Directory Specification, and the default location of the sandbox
containers root.

XDG defaults:
- Config: ~/.config/sandboxctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "sandboxctl"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/sandboxctl/ (or XDG_CONFIG_HOME/sandboxctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/sandboxctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_default_containers_root() -> Path:
    """Get the default sandbox containers root.

    Returns:
        Path to ~/Library/Containers.
    """
    return Path.home() / "Library" / "Containers"
