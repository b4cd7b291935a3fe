"""Integración con la shell (autocompletado).

Por qué está en adapters:
- Escribir ficheros en `$HOME` y editar `.bashrc`/`.zshrc` es infraestructura;
  el Core no sabe nada de shells.
- Las plantillas (Jinja2) generan un fichero estático que llama a
  `jfz complete <subcomando>`, que reutiliza el mismo listador que el gateway.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from core.domain.subcommands import COMPLETION_SOURCES, COMPLETION_WORDS

logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

SUPPORTED_SHELLS: tuple[str, ...] = ("bash", "zsh", "fish")

COMMAND_NAME = "j"
ADMIN_BIN = "jfz"
BANNER = "Juju FZF Gateway"

_DESCRIPTIONS: dict[str, str] = {
    "config": "passthrough to juju config",
    "controllers": "fuzzy switch controller",
    "models": "fuzzy switch model",
    "show-unit": "passthrough to juju show-unit",
    "ssh": "fuzzy SSH to unit",
    "debug-log": "fuzzy debug-log for unit",
    "destroy-model": "fuzzy destroy model",
    "help": "show help",
}


class UnsupportedShell(ValueError):
    """La shell detectada no tiene plantilla de integración."""


@dataclass
class InstallReport:
    shell: str
    script_path: Path
    rc_file: Path | None = None
    rc_updated: bool = False


def detect_shell(shell_env: str | None) -> str:
    """Deriva el nombre de la shell a partir de `$SHELL` (p.ej. `/bin/zsh`)."""

    name = Path(shell_env or "").name
    if name not in SUPPORTED_SHELLS:
        raise UnsupportedShell(f"Unsupported shell: {name or '<unset>'}")
    return name


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render_completion(shell: str) -> str:
    if shell not in SUPPORTED_SHELLS:
        raise UnsupportedShell(f"Unsupported shell: {shell}")
    template = _get_env().get_template(f"completion.{shell}.j2")
    return template.render(
        banner=BANNER,
        command=COMMAND_NAME,
        func=COMMAND_NAME,
        admin_bin=ADMIN_BIN,
        words=COMPLETION_WORDS,
        descriptions=[(w, _DESCRIPTIONS.get(w, "")) for w in COMPLETION_WORDS],
        sources=list(COMPLETION_SOURCES),
    )


def script_path_for(shell: str, home: Path) -> Path:
    if shell == "fish":
        # fish carga solo las completions de este directorio.
        return home / ".config" / "fish" / "completions" / f"{COMMAND_NAME}.fish"
    return home / f".jfz-completion.{shell}"


def rc_file_for(shell: str, home: Path) -> Path | None:
    if shell == "bash":
        return home / ".bashrc"
    if shell == "zsh":
        return home / ".zshrc"
    return None


def _ensure_sourced(rc_file: Path, script_path: Path) -> bool:
    """Añade la línea `source` una sola vez. Devuelve True si se modificó."""

    existing = rc_file.read_text(encoding="utf-8") if rc_file.exists() else ""
    if script_path.name in existing:
        return False

    rc_file.parent.mkdir(parents=True, exist_ok=True)
    with rc_file.open("a", encoding="utf-8") as fh:
        if existing and not existing.endswith("\n"):
            fh.write("\n")
        fh.write(f"\n# {BANNER}\nsource \"{script_path}\"\n")
    return True


def install(shell: str, home: Path) -> InstallReport:
    """Escribe el fichero de completado y, en bash/zsh, lo referencia desde el rc."""

    script_path = script_path_for(shell, home)
    script_path.parent.mkdir(parents=True, exist_ok=True)
    script_path.write_text(render_completion(shell), encoding="utf-8")
    logger.debug("wrote %s completion to %s", shell, script_path)

    report = InstallReport(shell=shell, script_path=script_path)
    rc_file = rc_file_for(shell, home)
    if rc_file is not None:
        report.rc_file = rc_file
        report.rc_updated = _ensure_sourced(rc_file, script_path)
    return report
