"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, LookupConfig, write_user_env_vars
from core.errors import ServerConfiguration

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(config: LookupConfig) -> tuple[bool, str]:
    try:
        async with build_async_client(config, extra_headers={"x-api-key": config.api_key}) as client:
            response = await client.get(config.base_url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Creator Eligibility Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row(
        "Neynar base URL",
        "OK" if settings.neynar_base_url else "MISSING",
        settings.neynar_base_url or "Set NEYNAR_BASE_URL",
    )
    table.add_row(
        "Neynar API key",
        "OK" if settings.neynar_api_key else "MISSING",
        "Set" if settings.neynar_api_key else "Set NEYNAR_API_KEY",
    )
    table.add_row("Proxy URL", "OK", settings.check_api_url)

    try:
        config = settings.lookup_config()
    except ServerConfiguration as exc:
        table.add_row("HTTP connectivity", "SKIPPED", exc.message)
        _console.print(table)
        _console.print("\n[yellow]Run `creator-eligibility doctor setup` to store the Neynar settings.[/yellow]")
        raise typer.Exit(code=1)

    ok_http, detail_http = asyncio.run(_check_http(config))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)
    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores the Neynar settings in the user config .env)."""

    base_url = typer.prompt(
        "Neynar base URL",
        default="https://api.neynar.com/v2",
        show_default=True,
    ).strip()
    api_key = typer.prompt("Neynar API key", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not api_key:
        raise typer.BadParameter("base URL and API key are required")

    env_path = write_user_env_vars(
        {
            "NEYNAR_BASE_URL": base_url,
            "NEYNAR_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved Neynar config to:[/green] {env_path}")
