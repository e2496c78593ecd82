"""CLI for rocky-store: load / save / log / backups / serve commands."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from rocky_store.core.config import AppSettings, StorageConfig
from rocky_store.core.startup_checks import validate_settings
from rocky_store.exceptions import RockyError
from rocky_store.hooks import attach_debug_log
from rocky_store.persistence.backups import UNKNOWN_MTIME
from rocky_store.services.data_service import RockyDataService

app = typer.Typer(name="rocky-store", help="Crash-safe storage for Rocky tracker data")
console = Console()
err_console = Console(stderr=True)


class _State:
    data_dir: Optional[Path] = None


_state = _State()


@app.callback()
def main(
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", envvar="ROCKY_STORAGE_DATA_DIR", help="Application data directory"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Operate on the Rocky data file and its backups."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    _state.data_dir = data_dir


def _build_settings() -> AppSettings:
    """Build settings, overriding env defaults with CLI flags."""
    if _state.data_dir is None:
        return AppSettings()
    return AppSettings(storage=StorageConfig(data_dir=_state.data_dir))


def _build_service() -> RockyDataService:
    """Build the data service and route its warnings into debug.log."""
    settings = _build_settings()
    try:
        validate_settings(settings)
        service = RockyDataService.from_settings(settings)
    except (ValueError, RockyError) as e:
        _fail(str(e))
    attach_debug_log(service.debug_log, settings.observability.debug_log_level)
    return service


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=1)


@app.command()
def load() -> None:
    """Print the stored document as JSON."""
    service = _build_service()
    try:
        document = service.load()
    except RockyError as e:
        _fail(str(e))
    typer.echo(json.dumps(document, ensure_ascii=False, indent=2))


@app.command()
def save(
    payload_file: str = typer.Argument(..., help="JSON file with the document, or '-' for stdin"),
) -> None:
    """Replace the stored document."""
    try:
        if payload_file == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(payload_file).read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {payload_file}: {e}")

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON: {e}")
    if not isinstance(document, dict):
        _fail("Document must be a JSON object")

    service = _build_service()
    try:
        service.save(document)
    except RockyError as e:
        _fail(str(e))
    console.print(f"[green]Saved to {service.paths.data_file}[/green]")


@app.command("log")
def append_log(line: str = typer.Argument(..., help="Text to append to debug.log")) -> None:
    """Append a timestamped line to debug.log."""
    service = _build_service()
    try:
        service.append_log(line)
    except RockyError as e:
        _fail(str(e))


@app.command()
def backups() -> None:
    """List backups, newest first."""
    service = _build_service()
    entries = service.list_backups()
    if not entries:
        console.print(f"No backups in {service.paths.backup_dir}")
        return

    table = Table(title=f"Backups in {service.paths.backup_dir}")
    table.add_column("File", style="cyan")
    table.add_column("Modified", style="green")
    table.add_column("Size", justify="right")

    for entry in entries:
        try:
            size = f"{entry.path.stat().st_size:,} B"
        except OSError:
            size = "?"
        if entry.modified == UNKNOWN_MTIME:
            modified = "?"
        else:
            modified = datetime.fromtimestamp(entry.modified).strftime("%Y-%m-%d %H:%M:%S")
        table.add_row(entry.path.name, modified, size)

    console.print(table)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Bind port"),
) -> None:
    """Run the local data API."""
    import uvicorn

    from rocky_store.api.app import create_app

    settings = _build_settings()
    try:
        validate_settings(settings)
    except ValueError as e:
        _fail(str(e))
    bind_host = host or settings.api.host
    bind_port = port or settings.api.port
    console.print(f"[bold]rocky-store data API on http://{bind_host}:{bind_port}[/bold]")
    uvicorn.run(create_app(settings), host=bind_host, port=bind_port)


if __name__ == "__main__":
    app()
