"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file
from core.domain.account_types import AccountType
from core.query.request import build_request

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings, url: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Show the effective settings and check the API is reachable."""

    settings = AppSettings()

    table = Table(title="Account Query Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))
    table.add_row("API base_url", "OK", settings.api_base_url)
    if settings.bearer_token:
        table.add_row("Bearer token", "OK", "Authorization header enabled")
    else:
        table.add_row("Bearer token", "OPTIONAL", "No token set -> only public endpoints will answer")
    table.add_row("Log level", "OK", settings.log_level)

    if not offline:
        target = build_request(settings.api_base_url, AccountType.RATE_LIMIT_STATUS)
        ok_http, detail_http = asyncio.run(_check_http(settings, target.url))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
