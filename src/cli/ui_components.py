"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles/tablas entre `j` y `jfz`.
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import BackendCommand

_USAGE_ROWS: tuple[tuple[str, str], ...] = (
    ("help, -h, --help", "Show this help"),
    ("controllers [CONTROLLER]", "Fuzzy switch Juju controller"),
    ("models [MODEL]", "Fuzzy switch Juju model"),
    ("ssh [UNIT] [juju-args...]", "SSH to unit (fuzzy select if no unit given)"),
    ("debug-log [UNIT] [...]", "Show debug-log for unit (fuzzy if no unit)"),
    ("destroy-model [MODEL] [...]", "Destroy model (fuzzy if no model given)"),
    ("<anything else>", 'Passthrough to "juju <anything else>"'),
)

_EXAMPLES: tuple[tuple[str, str], ...] = (
    ("j controllers", "fuzzy-select and switch controller"),
    ("j ssh", "fuzzy-select unit, then SSH"),
    ("j ssh ubuntu/0 --proxy", "SSH directly with args"),
    ("j status", 'runs "juju status"'),
    ("j destroy-model dev", 'destroys model "dev" (no FZF)'),
)


def build_help_panel() -> Panel:
    """Panel de ayuda del gateway `j`."""

    commands = Table(show_header=False, box=None, padding=(0, 2))
    commands.add_column("Command", style="cyan", no_wrap=True)
    commands.add_column("Description", style="white")
    for command, description in _USAGE_ROWS:
        commands.add_row(command, description)

    examples = Table(show_header=False, box=None, padding=(0, 2))
    examples.add_column("Example", style="green", no_wrap=True)
    examples.add_column("Effect", style="dim")
    for example, effect in _EXAMPLES:
        examples.add_row(example, effect)

    body = Group(
        Text("USAGE: j [COMMAND] [ARGS...]\n", style="bold"),
        commands,
        Text("\nEXAMPLES:", style="bold"),
        examples,
        Text("\nTAB completion: run `jfz install` once, then restart your shell.", style="dim"),
    )
    return Panel(body, title="Juju FZF Gateway — j", border_style="cyan")


def print_help(console: Console) -> None:
    console.print(build_help_panel())


def format_announcement(command: BackendCommand, note: str | None = None) -> Text:
    """Línea `→ juju ...` que se muestra antes de despachar."""

    text = Text("→ ", style="bold magenta")
    text.append(command.display())
    if note:
        text.append(f" {note}", style="dim")
    return text


def format_warning(message: str) -> Text:
    return Text(f"⚠️  {message}", style="yellow")
