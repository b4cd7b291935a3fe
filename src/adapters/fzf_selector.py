"""Selector interactivo sobre `fzf`.

Por qué un proceso externo:
- No reimplementamos fuzzy matching: fzf recibe los candidatos por stdin,
  dibuja la UI sobre la terminal (stderr/tty) y escribe la elección en stdout.

Códigos de salida de fzf:
- 0   -> selección en stdout
- 1   -> sin coincidencias (incluye `--exit-0` con lista vacía)
- 130 -> cancelado por el usuario (Esc/Ctrl-C)
- 2   -> error del propio fzf
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from core.config import AppSettings
from core.domain.models import NONE_SELECTED, Selected, SelectionOutcome
from core.errors import SelectorUnavailable

logger = logging.getLogger(__name__)

_NO_SELECTION_CODES = frozenset({1, 130})


class FzfSelector:
    """Implementa `InteractiveSelector` con opciones fijas de fzf."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        settings = settings or AppSettings()
        self._selector_bin = settings.selector_bin
        self._height = settings.selector_height
        self._pointer = settings.selector_pointer
        self._icon = settings.prompt_icon

    def prompt_text(self, prompt_label: str) -> str:
        icon = f"{self._icon} " if self._icon else ""
        return f"{icon}{prompt_label} > "

    def build_argv(self, prompt_label: str) -> list[str]:
        return [
            self._selector_bin,
            f"--prompt={self.prompt_text(prompt_label)}",
            f"--pointer={self._pointer}",
            f"--height={self._height}",
            "--cycle",
            "--select-1",
            "--exit-0",
            "--no-multi",
        ]

    def select(self, candidates: Sequence[str], prompt_label: str) -> SelectionOutcome:
        argv = self.build_argv(prompt_label)
        # Siempre se invoca a fzf, incluso con cero candidatos (`--exit-0`).
        payload = "".join(f"{c}\n" for c in candidates)
        try:
            proc = subprocess.run(
                argv,
                input=payload,
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise SelectorUnavailable(f"cannot run selector {argv[0]!r}: {exc}") from exc
        except KeyboardInterrupt:
            return NONE_SELECTED

        logger.debug("selector exited with %d", proc.returncode)
        if proc.returncode in _NO_SELECTION_CODES:
            return NONE_SELECTED
        if proc.returncode != 0:
            raise SelectorUnavailable(f"selector {argv[0]!r} failed with exit status {proc.returncode}")

        lines = (proc.stdout or "").splitlines()
        choice = lines[0].strip() if lines else ""
        return Selected(value=choice) if choice else NONE_SELECTED
