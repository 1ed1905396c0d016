"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DATA_DIR_ENV = "ITEMFINDER_DATA_DIR"
DEFAULT_DATA_DIR = Path("Datos")
DEFAULT_EXTENSION = ".json"


def _get_default_data_dir() -> Path:
    """Get the data directory from the environment, falling back to ``Datos``."""
    env_dir = os.getenv(DATA_DIR_ENV, "").strip()
    if env_dir:
        return Path(env_dir).expanduser()
    return DEFAULT_DATA_DIR


@dataclass(slots=True)
class AppConfig:
    data_dir: Path | None = None
    extension: str = DEFAULT_EXTENSION
    host: str = "127.0.0.1"
    port: int = 3000

    def __post_init__(self) -> None:
        if self.data_dir is None:
            self.data_dir = _get_default_data_dir()

    def resolve_data_dir(self, base_dir: Path | None = None) -> Path:
        if self.data_dir is None:
            self.data_dir = _get_default_data_dir()
        if Path(self.data_dir).is_absolute() or base_dir is None:
            return Path(self.data_dir)
        return base_dir / self.data_dir
