"""Core ItemFinder data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

API_JSON_PREFIX = "/api/json"


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A JSON file discovered under the data root.

    ``folder`` is the POSIX parent of ``relative_path`` and the empty string
    when the file sits directly in the root.
    """

    name: str
    absolute_path: Path
    relative_path: Path
    folder: str

    @classmethod
    def from_path(cls, root: Path, path: Path) -> FileEntry:
        relative = path.relative_to(root)
        parent = relative.parent.as_posix()
        return cls(
            name=path.name,
            absolute_path=path,
            relative_path=relative,
            folder="" if parent == "." else parent,
        )

    @property
    def api_path(self) -> str:
        if self.folder:
            return f"{API_JSON_PREFIX}/{self.folder}/{self.name}"
        return f"{API_JSON_PREFIX}/{self.name}"


@dataclass(slots=True)
class FileInfo:
    """Lightweight descriptor returned by the list operation."""

    name: str
    folder: str
    path: str
