"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

MARKER = ("Data", "Library", "Application Scripts")

ContainerFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    yield config_home


@pytest.fixture
def containers_root(tmp_path: Path) -> Path:
    """Empty containers root directory."""
    root = tmp_path / "Containers"
    root.mkdir()
    return root


@pytest.fixture
def make_container(containers_root: Path) -> ContainerFactory:
    """Factory creating a container with the given marker entries.

    Entries are created as empty files. Pass ``marker=False`` to create a
    container without the marker directory.
    """

    def _make(name: str, *entries: str, marker: bool = True) -> Path:
        container = containers_root / name
        container.mkdir(parents=True)
        if marker:
            marker_dir = container.joinpath(*MARKER)
            marker_dir.mkdir(parents=True)
            for entry in entries:
                (marker_dir / entry).write_text("")
        (container / "Data" / "payload.bin").parent.mkdir(parents=True, exist_ok=True)
        (container / "Data" / "payload.bin").write_bytes(b"\x00" * 16)
        return container

    return _make


@pytest.fixture
def vendor_and_system(make_container: ContainerFactory) -> tuple[Path, Path]:
    """Containers A (com.vendor.app1) and B (com.apple.helper)."""
    a = make_container("A", "com.vendor.app1")
    b = make_container("B", "com.apple.helper")
    return a, b


@pytest.fixture
def deny_access() -> Callable[[Path], AbstractContextManager[None]]:
    """Factory making stat and listing calls below a path fail with EPERM."""

    @contextmanager
    def _deny(locked: Path) -> Iterator[None]:
        prefix = str(locked)

        def _wrap(real: Callable[..., Any]) -> Callable[..., Any]:
            def _guarded(path: Any, *args: Any, **kwargs: Any) -> Any:
                name = os.fspath(path) if isinstance(path, str | os.PathLike) else ""
                if str(name).startswith(prefix):
                    raise PermissionError(1, "Operation not permitted", name)
                return real(path, *args, **kwargs)

            return _guarded

        with (
            patch("os.stat", _wrap(os.stat)),
            patch("os.listdir", _wrap(os.listdir)),
            patch("os.scandir", _wrap(os.scandir)),
        ):
            yield

    return _deny
