"""Shared fixtures for the ItemFinder test-suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A small data directory shaped like the game records it serves."""
    root = tmp_path / "Datos"
    (root / "Characters").mkdir(parents=True)
    (root / "Lightcones").mkdir()
    (root / "Characters" / "a.json").write_text(json.dumps({"Rarity": "4"}), encoding="utf-8")
    (root / "Lightcones" / "b.json").write_text(
        json.dumps({"Rarity": "Lightcone 5"}), encoding="utf-8"
    )
    return root
