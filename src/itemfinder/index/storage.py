"""Read access to the JSON records under the data directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, List

from itemfinder.config import DEFAULT_EXTENSION
from itemfinder.index.indexer import Indexer
from itemfinder.models import FileEntry, FileInfo
from itemfinder.utils.files import JSON_READ_ERRORS, read_json

LOGGER = logging.getLogger(__name__)


class RecordError(Exception):
    """Base class for record access errors."""


class RecordNotFound(RecordError):
    """The record is missing, unreadable or not valid JSON."""


class InvalidRecordPath(RecordError):
    """No path segment was supplied."""


class JsonRecordStore:
    """List and fetch JSON records below a root directory."""

    def __init__(
        self,
        root: Path,
        *,
        extension: str = DEFAULT_EXTENSION,
        logger: logging.Logger | None = None,
    ) -> None:
        self.root = Path(root)
        self.logger = logger or LOGGER
        self.indexer = Indexer(self.root, extension=extension, logger=self.logger)

    def entries(self) -> List[FileEntry]:
        return self.indexer.scan()

    def list_files(self) -> List[FileInfo]:
        """Describe every record without reading its content."""
        return [
            FileInfo(name=entry.name, folder=entry.folder, path=entry.api_path)
            for entry in self.entries()
        ]

    def resolve(self, folder: str | None, filename: str | None) -> Path:
        """Map a folder/filename pair to a path inside the root.

        With a single segment it is taken as a filename directly under the
        root.
        """
        segments = [segment for segment in (folder, filename) if segment]
        if not segments:
            raise InvalidRecordPath("Invalid path")

        # Lexical check only: symlinked records listed under the root stay reachable.
        target = self.root.joinpath(*segments)
        root = Path(os.path.normpath(os.path.abspath(self.root)))
        normalized = Path(os.path.normpath(os.path.abspath(target)))
        if normalized == root or root not in normalized.parents:
            self.logger.warning("Rejected path outside data directory: %s", target)
            raise RecordNotFound("File not found")
        return target

    def fetch(self, folder: str | None, filename: str | None) -> Any:
        """Read and parse one record."""
        path = self.resolve(folder, filename)
        try:
            return read_json(path)
        except JSON_READ_ERRORS as exc:
            self.logger.error("Error reading %s: %s", path, exc)
            raise RecordNotFound("File not found") from exc

    def load(self, entry: FileEntry) -> Any:
        return read_json(entry.absolute_path)
