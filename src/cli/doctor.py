"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from urllib.parse import urlsplit

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def endpoint_root(url: str) -> str:
    """`https://freegeoip.app/json/{ip}` -> `https://freegeoip.app/`"""

    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}/"


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity checks."),
) -> None:
    """Show the effective configuration and check that each endpoint host answers."""

    settings = AppSettings()

    table = Table(title="ISS-FLYOVER Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Log level", "OK", settings.log_level)

    endpoints = (
        ("IP lookup", settings.ip_lookup_url),
        ("Geolocation", settings.geolocation_url),
        ("ISS passes", settings.flyover_url),
    )
    for label, url in endpoints:
        table.add_row(f"{label} URL", "OK", url)

    # Connectivity (best-effort)
    all_ok = True
    if not offline:
        for label, url in endpoints:
            ok, detail = asyncio.run(_check_http(endpoint_root(url), settings))
            all_ok = all_ok and ok
            table.add_row(f"{label} reachable", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if not all_ok:
        _console.print(
            "\n[yellow]Note:[/yellow] Override unreachable endpoints with the "
            "ISS_FLYOVER_IP_LOOKUP_URL / ISS_FLYOVER_GEOLOCATION_URL / ISS_FLYOVER_FLYOVER_URL variables."
        )
