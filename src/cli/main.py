"""CLI (Typer + Rich).

Por qué Typer:
- Declara opciones con type hints; los enums se validan solos.
- Los comandos solo orquestan: toda la lógica vive en `core`.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.http_client import HttpxTransport
from adapters.json_exporter import entity_to_json, export_entity_json
from cli import doctor
from cli.ui_components import build_entity_table
from core.config import AppSettings
from core.domain.account_types import AccountType
from core.domain.errors import AccountQueryError
from core.domain.models import AccountEntity
from core.query.predicate import F
from core.services.account_processor import AccountRequestProcessor, map_response
from core.services.account_query import AccountQuery

app = typer.Typer(no_args_is_help=True, help="Typed queries against the account endpoints.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=False)],
        force=True,
    )


@app.callback()
def _main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    settings = AppSettings()
    _configure_logging("DEBUG" if verbose else settings.log_level)


def _emit(entity: AccountEntity, *, as_json: bool, output: Path | None) -> None:
    if output is not None:
        path = export_entity_json(entity=entity, output_path=output)
        _console.print(f"[green]Saved[/green] {path}")
    if as_json:
        _console.print_json(entity_to_json(entity))
    else:
        _console.print(build_entity_table(entity))


def _fail(exc: AccountQueryError) -> None:
    _err_console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(code=1)


@app.command()
def url(
    type_: AccountType = typer.Option(..., "--type", "-t", help="Account query type."),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the configured API base URL."),
) -> None:
    """Print the URL a query of TYPE would request."""

    processor = AccountRequestProcessor(base_url or AppSettings().api_base_url)
    try:
        request = processor.build_url(processor.get_parameters(F.Type == type_))
    except AccountQueryError as exc:
        _fail(exc)
    _console.print(request.url)


@app.command()
def parse(
    type_: AccountType = typer.Argument(..., metavar="TYPE", help="Query type the response belongs to."),
    response_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved JSON response."),
    as_json: bool = typer.Option(False, "--json", help="Print the entity as JSON."),
) -> None:
    """Map a saved JSON response into a typed entity (offline)."""

    try:
        entity = map_response(type_, response_file.read_text(encoding="utf-8"))
    except AccountQueryError as exc:
        _fail(exc)
    _emit(entity, as_json=as_json, output=None)


@app.command()
def query(
    type_: AccountType = typer.Option(..., "--type", "-t", help="Account query type."),
    as_json: bool = typer.Option(False, "--json", help="Print the entity as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also save the entity as JSON."),
) -> None:
    """Execute an account query against the API."""

    settings = AppSettings()
    account_query = AccountQuery(HttpxTransport(settings), base_url=settings.api_base_url)
    try:
        entity = asyncio.run(account_query.first(F.Type == type_))
    except AccountQueryError as exc:
        _fail(exc)
    _emit(entity, as_json=as_json, output=output)


@app.command("end-session")
def end_session(
    as_json: bool = typer.Option(False, "--json", help="Print the entity as JSON."),
) -> None:
    """End the authenticated session."""

    settings = AppSettings()
    account_query = AccountQuery(HttpxTransport(settings), base_url=settings.api_base_url)
    try:
        entity = asyncio.run(account_query.end_session())
    except AccountQueryError as exc:
        _fail(exc)
    _emit(entity, as_json=as_json, output=None)


def run() -> None:
    app()
