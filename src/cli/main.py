"""CLI entry points.

- `j` (`gateway`): the dispatcher. It reads `sys.argv` directly instead of
  going through Typer/Click so every token after the subcommand, including
  `--`, `--help` or `-i`, reaches the backend untouched.
- `jfz` (`run`): Typer app with the admin commands (install, complete,
  doctor).
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.fzf_selector import FzfSelector
from adapters.juju_cli import JujuLister, SubprocessRunner
from adapters.shell_integration import SUPPORTED_SHELLS, UnsupportedShell, detect_shell
from adapters.shell_integration import install as install_completion
from cli import doctor
from cli.ui_components import format_announcement, format_warning, print_help
from core.config import AppSettings
from core.domain.models import BackendCommand
from core.domain.subcommands import COMPLETION_SOURCES, COMPLETION_WORDS, HELP_TOKENS
from core.errors import GatewayError, InvalidConfiguration
from core.services.gateway import Gateway, GatewayHooks

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    help="Admin commands for the `j` Juju FZF gateway (completion, install, doctor).",
)
app.add_typer(doctor.app, name="doctor")

_console = Console(stderr=True)


def _configure_logging(settings: AppSettings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_gateway(settings: AppSettings, console: Console) -> Gateway:
    def _announce(command: BackendCommand, note: str | None) -> None:
        if settings.echo_commands:
            console.print(format_announcement(command, note))

    def _warning(message: str) -> None:
        console.print(format_warning(message))

    return Gateway(
        lister=JujuLister(settings),
        selector=FzfSelector(settings),
        runner=SubprocessRunner(),
        backend_bin=settings.backend_bin,
        hooks=GatewayHooks(announce=_announce, warning=_warning),
    )


def gateway_main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = AppSettings()
    except ValidationError as exc:
        error = InvalidConfiguration(f"Invalid configuration: {exc}")
        _console.print(format_warning(str(error)))
        return error.exit_code
    _configure_logging(settings)

    if args and args[0] in HELP_TOKENS:
        print_help(_console)
        return 0

    result = build_gateway(settings, _console).run(args)
    return result.exit_code


def gateway() -> None:
    sys.exit(gateway_main())


@app.command()
def complete(
    word: Optional[str] = typer.Argument(None, help="Subcommand being completed (e.g. ssh)."),
) -> None:
    """Print completion candidates, one per line (used by the shell scripts)."""

    if word is None:
        for candidate in COMPLETION_WORDS:
            typer.echo(candidate)
        return

    kind = COMPLETION_SOURCES.get(word)
    if kind is None:
        return

    settings = AppSettings()
    try:
        candidates = JujuLister(settings).list(kind)
    except GatewayError as exc:
        # Completar nunca debe romper la línea de comandos del usuario.
        logger.debug("completion for %s failed: %s", word, exc)
        return

    for candidate in candidates:
        typer.echo(candidate)


@app.command()
def install(
    shell: Optional[str] = typer.Option(
        None,
        "--shell",
        help=f"Target shell ({', '.join(SUPPORTED_SHELLS)}). Defaults to $SHELL.",
    ),
    home: Optional[Path] = typer.Option(
        None,
        "--home",
        help="Home directory to install into (defaults to ~).",
    ),
) -> None:
    """Install TAB completion for `j` into the current user's shell."""

    console = Console()
    try:
        shell_name = detect_shell(shell or os.environ.get("SHELL"))
    except UnsupportedShell as exc:
        console.print(f"[red]❌ {exc}[/red]")
        raise typer.Exit(code=1)

    report = install_completion(shell_name, home or Path.home())
    console.print(f"[green]✅ {shell_name} completion written to[/green] {report.script_path}")

    if report.rc_file is None:
        console.print("→ fish loads it automatically; restart fish to pick it up.")
        return

    if report.rc_updated:
        console.print(f"✅ Added source line to {report.rc_file}")
    else:
        console.print(f"ℹ️  Source line already exists in {report.rc_file}")
    console.print(f"→ Restart shell or run: source {report.rc_file}")


def run() -> None:
    app()
