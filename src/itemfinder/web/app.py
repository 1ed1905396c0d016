"""FastAPI application exposing the JSON records."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from itemfinder import __version__
from itemfinder.config import AppConfig
from itemfinder.index.search import LIGHTCONE, Searcher, SearchResult
from itemfinder.index.storage import InvalidRecordPath, JsonRecordStore, RecordNotFound
from itemfinder.models import FileInfo

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="ItemFinder", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class SearchPayload(BaseModel):
    # Any JSON value; only general searches read it.
    query: Any = ""
    type: str | None = None


def configure_app(config: AppConfig) -> FastAPI:
    """Attach a configuration to the module level app."""
    app.state.config = config
    return app


def get_config(request: Request) -> AppConfig:
    config = getattr(request.app.state, "config", None)
    return config if config is not None else AppConfig()


def _resolve_data_dir(config: AppConfig) -> Path:
    return config.resolve_data_dir(Path.cwd())


def _build_store(config: AppConfig) -> JsonRecordStore:
    return JsonRecordStore(_resolve_data_dir(config), extension=config.extension)


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/api/health")
async def health(config: AppConfig = Depends(get_config)) -> Dict[str, str]:
    return {"status": "ok", "data_dir": str(_resolve_data_dir(config))}


@app.get("/api/files")
async def list_files(config: AppConfig = Depends(get_config)) -> List[FileInfo]:
    """List every JSON record with its retrieval path."""
    store = _build_store(config)
    try:
        return await asyncio.to_thread(store.list_files)
    except Exception as exc:  # pragma: no cover - defensive
        LOGGER.exception("Listing files failed: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to list files") from exc


async def _fetch(config: AppConfig, folder: str | None, filename: str | None) -> Any:
    store = _build_store(config)
    try:
        return await asyncio.to_thread(store.fetch, folder, filename)
    except InvalidRecordPath as exc:
        raise HTTPException(status_code=400, detail="Invalid path") from exc
    except RecordNotFound as exc:
        raise HTTPException(status_code=404, detail="File not found") from exc


@app.get("/api/json")
@app.get("/api/json/")
async def missing_record_path(config: AppConfig = Depends(get_config)) -> Any:
    return await _fetch(config, None, None)


@app.get("/api/json/{folder:path}/{filename}")
async def get_record(folder: str, filename: str, config: AppConfig = Depends(get_config)) -> Any:
    return await _fetch(config, folder, filename)


@app.get("/api/json/{filename}")
async def get_root_record(filename: str, config: AppConfig = Depends(get_config)) -> Any:
    return await _fetch(config, None, filename)


@app.post("/api/search")
async def search_records(
    payload: SearchPayload, config: AppConfig = Depends(get_config)
) -> List[SearchResult]:
    query = payload.query
    if payload.type != LIGHTCONE:
        if query is None:
            query = ""
        elif not isinstance(query, str):
            raise HTTPException(status_code=400, detail="Query must be a string")

    searcher = Searcher(_build_store(config))
    try:
        return await asyncio.to_thread(searcher.search, query, mode=payload.type)
    except Exception as exc:  # pragma: no cover - defensive
        LOGGER.exception("Search failed: %s", exc)
        raise HTTPException(status_code=500, detail="Search failed") from exc
