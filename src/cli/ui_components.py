"""Componentes de UI para CLI (Rich).

Separa los detalles visuales (banner, tabla, formato de fechas) de la
lógica de los comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import FlyoverPass


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("ISS-FLYOVER", style="bold cyan")
    subtitle = Text("IP • Geolocalización • Próximos pasos de la ISS", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_pass_time(flyover: FlyoverPass) -> str:
    """`Next pass at <fecha local> for <duración> seconds!`"""

    local = flyover.rise_datetime.astimezone()
    return f"Next pass at {local.strftime('%a %b %d %Y %H:%M:%S %Z')} for {flyover.duration} seconds!"


def build_passes_table(passes: Sequence[FlyoverPass]) -> Table:
    table = Table(title="Upcoming ISS passes")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Rise time (local)", style="cyan")
    table.add_column("Rise time (UTC)", style="white")
    table.add_column("Duration (s)", style="green", justify="right")
    for index, flyover in enumerate(passes, start=1):
        utc = flyover.rise_datetime
        local = utc.astimezone()
        table.add_row(
            str(index),
            local.strftime("%Y-%m-%d %H:%M:%S %Z"),
            utc.strftime("%Y-%m-%d %H:%M:%S") + " UTC",
            str(flyover.duration),
        )
    return table


def build_error_panel(message: str) -> Panel:
    return Panel(Text(message, style="red"), title=Text("Error", style="bold red"), border_style="red")


def stage_label(stage_value: str) -> str:
    return stage_value.replace("_", " ").capitalize() + "..."
