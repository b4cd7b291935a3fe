"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil

import typer
from rich.console import Console
from rich.table import Table

from adapters.juju_cli import JujuLister
from core.config import AppSettings, write_user_env_vars
from core.domain.models import CandidateKind
from core.errors import GatewayError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_binary(name: str) -> tuple[bool, str]:
    path = shutil.which(name)
    if path:
        return True, path
    return False, f"{name!r} not found on PATH"


def _check_listing(settings: AppSettings) -> tuple[bool, str]:
    """Run a read-only controllers listing to verify the backend answers JSON."""

    try:
        controllers = JujuLister(settings).list(CandidateKind.CONTROLLERS)
    except GatewayError as exc:
        return False, str(exc)
    return True, f"{len(controllers)} controller(s)"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="jfz Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_backend, detail_backend = _check_binary(settings.backend_bin)
    table.add_row("Backend CLI", "OK" if ok_backend else "FAIL", detail_backend)

    ok_selector, detail_selector = _check_binary(settings.selector_bin)
    table.add_row("Selector", "OK" if ok_selector else "FAIL", detail_selector)

    if ok_backend:
        ok_listing, detail_listing = _check_listing(settings)
        table.add_row("Controllers listing", "OK" if ok_listing else "FAIL", detail_listing)

    table.add_row("Selector height", "OK", settings.selector_height)
    table.add_row("Echo commands", "OK", "on" if settings.echo_commands else "off")

    _console.print(table)

    if not ok_selector:
        _console.print(
            "\n[yellow]Note:[/yellow] without a selector, `j` still works when you pass the target explicitly."
        )


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()

    backend_bin = typer.prompt("Backend CLI", default=current.backend_bin, show_default=True).strip()
    selector_bin = typer.prompt("Selector", default=current.selector_bin, show_default=True).strip()
    height = typer.prompt("Selector height", default=current.selector_height, show_default=True).strip()

    if not backend_bin or not selector_bin:
        raise typer.BadParameter("backend and selector are required")

    env_path = write_user_env_vars(
        {
            "JFZ_BACKEND_BIN": backend_bin,
            "JFZ_SELECTOR_BIN": selector_bin,
            "JFZ_SELECTOR_HEIGHT": height or current.selector_height,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
