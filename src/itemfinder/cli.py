"""Command line interface for ItemFinder."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from itemfinder.config import AppConfig
from itemfinder.index.indexer import Indexer
from itemfinder.index.search import LIGHTCONE, Searcher
from itemfinder.index.storage import InvalidRecordPath, JsonRecordStore, RecordNotFound
from itemfinder.web.app import app as web_app
from itemfinder.web.app import configure_app


console = Console()
app = typer.Typer(help="ItemFinder - browse and search JSON item records")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_config(data_dir: Optional[Path]) -> AppConfig:
    return AppConfig(data_dir=data_dir)


def _split_record_path(record_path: str) -> tuple[str | None, str | None]:
    """Split ``Folder/Sub/name.json`` into a folder and a filename."""
    cleaned = record_path.strip().strip("/")
    if cleaned.startswith("api/json/"):
        cleaned = cleaned[len("api/json/") :]
    folder, _, filename = cleaned.rpartition("/")
    return (folder or None, filename or None)


@app.command("files")
def list_files(
    data_dir: Path = typer.Option(None, "--data-dir", help="Directory holding the JSON records"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List every JSON record."""
    _setup_logging(verbose)
    config = _build_config(data_dir)
    root = config.resolve_data_dir(Path.cwd())
    store = JsonRecordStore(root, extension=config.extension)

    entries = store.entries()
    if not entries:
        console.print("[yellow]No JSON files found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name")
    table.add_column("Folder")
    table.add_column("Path")
    for entry in entries:
        table.add_row(entry.name, entry.folder, entry.api_path)

    console.print(table)
    stats = Indexer.stats(entries)
    console.print(f"{stats.files} files in {len(stats.folders)} folders")


@app.command()
def show(
    record_path: str = typer.Argument(..., help="Record path, e.g. Characters/a.json"),
    data_dir: Path = typer.Option(None, "--data-dir", help="Directory holding the JSON records"),
) -> None:
    """Print one record as JSON."""
    config = _build_config(data_dir)
    store = JsonRecordStore(config.resolve_data_dir(Path.cwd()), extension=config.extension)

    folder, filename = _split_record_path(record_path)
    try:
        data = store.fetch(folder, filename)
    except InvalidRecordPath as exc:
        raise typer.BadParameter("Invalid path") from exc
    except RecordNotFound:
        console.print(f"[red]File not found: {record_path}[/red]")
        raise typer.Exit(code=1)

    console.print_json(json.dumps(data, ensure_ascii=False))


@app.command()
def search(
    query: str = typer.Argument("", help="Text to look for"),
    type_: Optional[str] = typer.Option(
        None, "--type", help=f"Search mode; '{LIGHTCONE}' ignores the query"
    ),
    data_dir: Path = typer.Option(None, "--data-dir", help="Directory holding the JSON records"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search every record."""
    _setup_logging(verbose)
    config = _build_config(data_dir)
    store = JsonRecordStore(config.resolve_data_dir(Path.cwd()), extension=config.extension)
    searcher = Searcher(store)

    results = searcher.search(query, mode=type_)
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("File")
    table.add_column("Folder")
    table.add_column("Snippet")
    for result in results:
        snippet = json.dumps(result.data, ensure_ascii=False)
        table.add_row(result.file, result.folder, snippet[:120])

    console.print(table)
    console.print(f"{len(results)} matches")


@app.command()
def web(
    host: str = typer.Option(AppConfig().host, help="Host interface"),
    port: int = typer.Option(AppConfig().port, help="Server port"),
    data_dir: Path = typer.Option(None, "--data-dir", help="Directory holding the JSON records"),
) -> None:
    """Start the HTTP API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = _build_config(data_dir)
    config.host = host
    config.port = port
    resolved = config.resolve_data_dir(Path.cwd())
    config.data_dir = resolved
    if not resolved.is_dir():
        console.print(f"[yellow]Warning: data directory {resolved} not found, lists will be empty.[/yellow]")

    configure_app(config)
    console.print(f"Serving on http://{host}:{port}")
    console.print("Expected layout:")
    console.print(f"- {resolved}")
    for folder in ("Characters", "Lightcones", "Weapons", "etc..."):
        console.print(f"  - {folder}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
