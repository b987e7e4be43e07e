"""Tests for marker directory inspection."""

from pathlib import Path
from unittest.mock import patch

import pytest
from sandboxctl.containers.inspector import (
    first_entry_name,
    inspect,
    inspect_directory,
    is_system_name,
)
from sandboxctl.containers.models import VisitStatus


class TestFirstEntryName:
    """Tests for first_entry_name."""

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Empty directories have no first entry."""
        assert first_entry_name(tmp_path) is None

    def test_single_entry(self, tmp_path: Path) -> None:
        """The sole entry is returned."""
        (tmp_path / "com.vendor.app1").mkdir()
        assert first_entry_name(tmp_path) == "com.vendor.app1"

    def test_multiple_entries_returns_first_by_name(self, tmp_path: Path) -> None:
        """With several entries only the first in name order is returned."""
        for name in ("zeta", "alpha", "mid"):
            (tmp_path / name).write_text("")
        assert first_entry_name(tmp_path) == "alpha"

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """Listing errors propagate as OSError."""
        with pytest.raises(OSError):
            first_entry_name(tmp_path / "missing")


class TestIsSystemName:
    """Tests for is_system_name."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("com.apple.helper", True),
            ("com.apple.", True),
            ("com.applesauce.app", False),
            ("com.vendor.app1", False),
            ("COM.APPLE.helper", False),
        ],
    )
    def test_prefix_match(self, name: str, expected: bool) -> None:
        """Only the exact, case-sensitive prefix counts as system-named."""
        assert is_system_name(name) is expected


class TestInspectDirectory:
    """Tests for inspect_directory tagged results."""

    def test_matched(self, tmp_path: Path) -> None:
        """A non-system entry yields a matched visit with its full path."""
        (tmp_path / "com.vendor.app1").write_text("")

        visit = inspect_directory(tmp_path)

        assert visit.status == VisitStatus.MATCHED
        assert visit.entry_path == str(tmp_path / "com.vendor.app1")
        assert visit.directory == str(tmp_path)

    def test_empty(self, tmp_path: Path) -> None:
        """An empty directory yields an EMPTY visit."""
        visit = inspect_directory(tmp_path)
        assert visit.status == VisitStatus.EMPTY
        assert visit.entry_path is None

    def test_system_entry_filtered(self, tmp_path: Path) -> None:
        """System-named entries are filtered by default."""
        (tmp_path / "com.apple.helper").write_text("")

        visit = inspect_directory(tmp_path)

        assert visit.status == VisitStatus.FILTERED
        assert visit.entry_path is None

    def test_system_entry_included(self, tmp_path: Path) -> None:
        """System-named entries are reported when requested."""
        (tmp_path / "com.apple.helper").write_text("")

        visit = inspect_directory(tmp_path, include_system=True)

        assert visit.status == VisitStatus.MATCHED
        assert visit.entry_path == str(tmp_path / "com.apple.helper")

    def test_only_first_entry_is_filtered(self, tmp_path: Path) -> None:
        """A system-named first entry hides later non-system entries."""
        (tmp_path / "com.apple.helper").write_text("")
        (tmp_path / "com.vendor.app1").write_text("")

        assert inspect_directory(tmp_path).status == VisitStatus.FILTERED

    def test_unreadable(self, tmp_path: Path) -> None:
        """Listing failures yield an UNREADABLE visit instead of raising."""
        with patch.object(Path, "iterdir", side_effect=PermissionError(13, "Permission denied")):
            visit = inspect_directory(tmp_path)

        assert visit.status == VisitStatus.UNREADABLE
        assert visit.error is not None
        assert "Permission denied" in visit.error

    def test_not_a_directory(self, tmp_path: Path) -> None:
        """A file path is treated as unreadable."""
        target = tmp_path / "file.txt"
        target.write_text("")
        assert inspect_directory(target).status == VisitStatus.UNREADABLE


class TestInspect:
    """Tests for the inspect convenience function."""

    def test_returns_path(self, tmp_path: Path) -> None:
        """Matched directories return the entry path."""
        (tmp_path / "com.vendor.app1").write_text("")
        assert inspect(tmp_path, False) == str(tmp_path / "com.vendor.app1")

    def test_returns_none_otherwise(self, tmp_path: Path) -> None:
        """Filtered, empty, and missing directories return None."""
        assert inspect(tmp_path, False) is None
        (tmp_path / "com.apple.helper").write_text("")
        assert inspect(tmp_path, False) is None
        assert inspect(tmp_path / "missing", True) is None
