"""CLI principal (Typer + Rich).

`iss-flyover passes` ejecuta el pipeline completo y muestra los próximos
pasos de la ISS; `iss-flyover doctor run` revisa configuración y red.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_passes_json, passes_payload
from cli import doctor
from cli.ui_components import (
    build_error_panel,
    build_passes_table,
    format_pass_time,
    print_banner,
    stage_label,
)
from core.config import AppSettings
from core.domain.result import Err
from core.services.flyover_pipeline import (
    PipelineHooks,
    PipelineStage,
    next_iss_times_for_my_location,
)

app = typer.Typer(no_args_is_help=True, help="Next ISS flyovers for your current location.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.command()
def passes(
    json_output: bool = typer.Option(False, "--json", help="Print the pass records as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the pass records to a JSON file."),
    table: bool = typer.Option(False, "--table", help="Render the passes as a table."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Fetch IP -> coordinates -> upcoming ISS passes and print them."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    interactive = not json_output
    if interactive and not no_banner:
        print_banner(_console)

    if interactive:
        with _console.status("Starting...") as status:
            def on_stage(stage: PipelineStage) -> None:
                if not stage.is_terminal:
                    status.update(stage_label(stage.value))

            hooks = PipelineHooks(stage_changed=on_stage)
            result = asyncio.run(next_iss_times_for_my_location(settings=settings, hooks=hooks))
    else:
        result = asyncio.run(next_iss_times_for_my_location(settings=settings))

    if isinstance(result, Err):
        if json_output:
            _err_console.print(f"It didn't work! {result.error}", style="red", markup=False, soft_wrap=True)
        else:
            _console.print(build_error_panel(f"It didn't work! {result.error}"))
        raise typer.Exit(code=1)

    flyovers = result.value
    if output is not None:
        path = export_passes_json(passes=flyovers, output_path=output)
        if interactive:
            _console.print(f"[green]Saved {len(flyovers)} passes to:[/green] {path}")

    if json_output:
        typer.echo(json.dumps(passes_payload(flyovers), ensure_ascii=False, indent=2, sort_keys=True))
        return

    if not flyovers:
        _console.print("[yellow]No upcoming passes returned.[/yellow]")
        return

    if table:
        _console.print(build_passes_table(flyovers))
    else:
        for flyover in flyovers:
            _console.print(format_pass_time(flyover), markup=False)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
