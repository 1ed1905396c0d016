"""Directory indexing of JSON records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from itemfinder.config import DEFAULT_EXTENSION
from itemfinder.models import FileEntry
from itemfinder.utils.files import iter_files

LOGGER = logging.getLogger(__name__)


def find_json_files(
    root: Path,
    *,
    extension: str = DEFAULT_EXTENSION,
    logger: logging.Logger | None = None,
) -> list[FileEntry]:
    """Find all JSON files under ``root`` as :class:`FileEntry` objects."""
    root = Path(root)
    return [
        FileEntry.from_path(root, path)
        for path in iter_files(root, suffix=extension, logger=logger)
    ]


@dataclass(slots=True)
class IndexStats:
    files: int = 0
    folders: list[str] = field(default_factory=list)

    def add(self, entry: FileEntry) -> None:
        self.files += 1
        if entry.folder not in self.folders:
            self.folders.append(entry.folder)


class Indexer:
    """Walks the data directory on every scan; nothing is cached."""

    def __init__(
        self,
        root: Path,
        *,
        extension: str = DEFAULT_EXTENSION,
        logger: logging.Logger | None = None,
    ) -> None:
        self.root = Path(root)
        self.extension = extension
        self.logger = logger or LOGGER

    def scan(self) -> list[FileEntry]:
        entries = find_json_files(self.root, extension=self.extension, logger=self.logger)
        self.logger.info("Found %d JSON files in %s", len(entries), self.root)
        return entries

    @staticmethod
    def stats(entries: Sequence[FileEntry]) -> IndexStats:
        stats = IndexStats()
        for entry in entries:
            stats.add(entry)
        return stats
