"""Utility helpers for working with files."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterator

LOGGER = logging.getLogger(__name__)

# Anything that makes a record unreadable or malformed.
JSON_READ_ERRORS = (OSError, UnicodeDecodeError, json.JSONDecodeError)


def _list_dir(path: Path) -> list[os.DirEntry[str]]:
    with os.scandir(path) as it:
        return list(it)


def iter_files(
    root: Path, *, suffix: str = ".json", logger: logging.Logger | None = None
) -> Iterator[Path]:
    """Yield files ending in ``suffix`` anywhere under ``root``, depth first.

    Entries are visited in directory listing order and a subdirectory is
    walked completely as soon as it is reached. Directories that cannot be
    read are logged and skipped; a missing root yields nothing.
    """
    log = logger or LOGGER
    root = Path(root)
    try:
        top = _list_dir(root)
    except (FileNotFoundError, NotADirectoryError):
        log.debug("Data directory %s does not exist", root)
        return
    except OSError as exc:
        log.warning("Unable to read directory %s: %s", root, exc)
        return

    stack: list[Iterator[os.DirEntry[str]]] = [iter(top)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        if entry.is_dir(follow_symlinks=False):
            try:
                children = _list_dir(Path(entry.path))
            except OSError as exc:
                log.warning("Unable to read directory %s: %s", entry.path, exc)
                continue
            stack.append(iter(children))
        elif entry.name.endswith(suffix):
            yield Path(entry.path)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not part of JSON.
    raise json.JSONDecodeError(f"Invalid constant {name}", name, 0)


def read_json(path: Path) -> Any:
    """Read a whole file as UTF-8 text and parse it as strict JSON."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return json.load(handle, parse_constant=_reject_constant)
