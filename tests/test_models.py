"""Tests for core data models."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from itemfinder.models import FileEntry, FileInfo


class TestFileEntry:
    """Test FileEntry dataclass."""

    def test_from_path_in_subfolder(self) -> None:
        """Should record the folder relative to the root."""
        root = Path("/data")
        entry = FileEntry.from_path(root, root / "Characters" / "a.json")

        assert entry.name == "a.json"
        assert entry.absolute_path == Path("/data/Characters/a.json")
        assert entry.relative_path == Path("Characters/a.json")
        assert entry.folder == "Characters"

    def test_from_path_at_root(self) -> None:
        """Should use an empty folder for files at the root."""
        root = Path("/data")
        entry = FileEntry.from_path(root, root / "top.json")

        assert entry.folder == ""
        assert entry.api_path == "/api/json/top.json"

    def test_nested_folder_uses_forward_slashes(self) -> None:
        """Should join nested folders with '/'."""
        root = Path("/data")
        entry = FileEntry.from_path(root, root / "Items" / "Rare" / "x.json")

        assert entry.folder == "Items/Rare"
        assert entry.api_path == "/api/json/Items/Rare/x.json"

    def test_entry_is_immutable(self) -> None:
        """Should reject attribute assignment."""
        entry = FileEntry.from_path(Path("/data"), Path("/data/a.json"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.name = "b.json"  # type: ignore[misc]


class TestFileInfo:
    """Test FileInfo dataclass."""

    def test_equality(self) -> None:
        """Should compare by value."""
        info1 = FileInfo(name="a.json", folder="", path="/api/json/a.json")
        info2 = FileInfo(name="a.json", folder="", path="/api/json/a.json")

        assert info1 == info2
