"""CLI UI components (Rich).

Keeps command logic apart from visual details.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.eligibility import FID_LIMIT, SCORE_THRESHOLD


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("Creator Marketplace", style="bold cyan")
    subtitle = Text(
        f"Eligibility: neynar_score > {SCORE_THRESHOLD} AND FID < {FID_LIMIT}",
        style="dim",
    )
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _na(value: Any) -> str:
    return "N/A" if value is None else str(value)


def build_verdict_panel(result: dict[str, Any]) -> Panel:
    """Panel for a settled check (eligible or not)."""

    eligible = bool(result.get("eligible"))
    user = result.get("user") or {}

    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    table.add_row("FID", _na(result.get("fid")))
    if user.get("username"):
        table.add_row("Username", f"@{user['username']}")
    if user.get("display_name"):
        table.add_row("Display name", user["display_name"])
    table.add_row("Neynar score", _na(result.get("neynar_score")))
    for reason in result.get("reasons") or []:
        table.add_row("Reason", Text(reason, style="red"))

    title = Text("✅ Eligible" if eligible else "❌ Not eligible", style="bold")
    return Panel(table, title=title, border_style="green" if eligible else "red")


def build_error_panel(message: str, *, upgrade_required: bool = False) -> Panel:
    """Error banner; the upgrade prompt gets its own title."""

    title = "Upgrade required" if upgrade_required else "⚠️ Error"
    return Panel(Text(message), title=title, border_style="yellow" if upgrade_required else "red")
