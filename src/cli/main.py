"""Command line entry point (Typer).

- `check`: terminal version of the eligibility form.
- `serve`: runs the FastAPI proxy and web form with uvicorn.
- `doctor`: configuration and connectivity diagnostics.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import typer
from rich.console import Console

from adapters.check_api_client import CheckApiClient
from cli import doctor
from cli.ui_components import build_error_panel, build_verdict_panel, print_banner
from core.config import AppSettings
from core.logging_config import configure_logging
from core.services.form_presenter import EMPTY_INPUT_MESSAGE, present_response, validate_form_input
from core.services.lookup_proxy import LookupProxy

app = typer.Typer(
    no_args_is_help=True,
    help="Creator Marketplace eligibility checker (Farcaster / Neynar).",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


async def _submit(text: str, *, settings: AppSettings, api_url: str | None, direct: bool) -> tuple[int, Any]:
    if direct:
        proxy = LookupProxy.from_settings(settings)
        return await proxy.handle(text)
    client = CheckApiClient(api_url or settings.check_api_url)
    return await client.check(text)


@app.command()
def check(
    value: str = typer.Argument(..., help="Farcaster handle (e.g. @alice) or numeric FID."),
    api_url: str | None = typer.Option(None, "--api-url", help="Base URL of a running proxy."),
    direct: bool = typer.Option(False, "--direct", help="Run the lookup in-process instead of via the proxy."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw payload as JSON."),
) -> None:
    """Check one account against the eligibility rule."""

    trimmed = validate_form_input(value)
    if trimmed is None:
        _console.print(build_error_panel(EMPTY_INPUT_MESSAGE))
        raise typer.Exit(code=1)

    settings = AppSettings()
    if not as_json:
        print_banner(_console)

    with _console.status("Checking…"):
        status, payload = asyncio.run(_submit(trimmed, settings=settings, api_url=api_url, direct=direct))

    outcome = present_response(status, payload)

    if as_json:
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    elif outcome.result is not None:
        _console.print(build_verdict_panel(outcome.result))
    else:
        _console.print(build_error_panel(outcome.error or "", upgrade_required=outcome.upgrade_required))

    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(8000, help="Bind port."),
) -> None:
    """Serve the `/api/check` proxy and the web form."""

    import uvicorn  # noqa: PLC0415

    from web.app import create_app  # noqa: PLC0415

    settings = AppSettings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
