"""Brute-force search across all JSON records."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping

from itemfinder.index.storage import JsonRecordStore
from itemfinder.models import FileEntry
from itemfinder.utils.files import JSON_READ_ERRORS

LOGGER = logging.getLogger(__name__)

GENERAL = "general"
LIGHTCONE = "lightcone"

LIGHTCONE_FOLDER_HINTS = ("lightcone", "cono")
# 0 and 0.0 compare equal to False.
FALSY_FIELD_VALUES = (None, False, "")


@dataclass(slots=True)
class SearchResult:
    file: str
    folder: str
    data: Any


def _as_text(data: Any) -> str:
    # Same shape as JSON.stringify: no whitespace, non-ASCII kept as is.
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def matches_query(data: Any, query: str) -> bool:
    """Case-insensitive substring match over the whole serialized record."""
    return query.lower() in _as_text(data).lower()


def is_lightcone(entry: FileEntry, data: Any) -> bool:
    """Classify a record as a lightcone from its fields or its folder name."""
    if data is None:
        # A null record has no fields to inspect.
        return False
    if isinstance(data, Mapping):
        if data.get("Refinements") not in FALSY_FIELD_VALUES:
            return True
        rarity = data.get("Rarity")
        if isinstance(rarity, str) and "Lightcone" in rarity:
            return True
    folder = entry.folder.lower()
    return any(hint in folder for hint in LIGHTCONE_FOLDER_HINTS)


class Searcher:
    """Scans every record on each query; results keep traversal order."""

    def __init__(self, store: JsonRecordStore, *, logger: logging.Logger | None = None) -> None:
        self.store = store
        self.logger = logger or LOGGER

    def search(self, query: str | None = "", *, mode: str | None = None) -> List[SearchResult]:
        lightcone = mode == LIGHTCONE
        query = query or ""
        results: List[SearchResult] = []
        for entry in self.store.entries():
            try:
                data = self.store.load(entry)
            except JSON_READ_ERRORS as exc:
                self.logger.debug("Skipping %s: %s", entry.absolute_path, exc)
                continue

            matched = is_lightcone(entry, data) if lightcone else matches_query(data, query)
            if matched:
                results.append(SearchResult(file=entry.name, folder=entry.folder, data=data))

        self.logger.info(
            "Search (%s) matched %d records", LIGHTCONE if lightcone else GENERAL, len(results)
        )
        return results
