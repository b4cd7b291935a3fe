"""Adaptadores del CLI backend (juju) basados en `subprocess`.

Por qué dos clases:
- `JujuLister` ejecuta listados de solo lectura, captura stdout y lo parsea.
- `SubprocessRunner` ejecuta la acción final con los streams heredados: el
  backend puede ser interactivo (ssh) o de larga duración (debug-log).
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from adapters.listings import PARSERS
from core.config import AppSettings
from core.domain.models import BackendCommand, CandidateKind
from core.errors import EXIT_INTERRUPTED, BackendUnavailable

logger = logging.getLogger(__name__)

LISTING_SUBCOMMANDS: dict[CandidateKind, tuple[str, ...]] = {
    CandidateKind.CONTROLLERS: ("controllers", "--format=json"),
    CandidateKind.MODELS: ("models", "--format=json"),
    CandidateKind.UNITS: ("status", "--format=json"),
    CandidateKind.APPLICATIONS: ("status", "--format=json"),
}


def _tail(text: str | None, limit: int = 300) -> str:
    text = (text or "").strip()
    return text if len(text) <= limit else "..." + text[-limit:]


class JujuLister:
    """Listador estructurado sobre `juju <listado> --format=json`."""

    def __init__(self, settings: AppSettings | None = None, *, backend_bin: str | None = None) -> None:
        self._backend_bin = backend_bin or (settings or AppSettings()).backend_bin

    def listing_argv(self, kind: CandidateKind) -> list[str]:
        return [self._backend_bin, *LISTING_SUBCOMMANDS[kind]]

    def _read(self, argv: Sequence[str]) -> str:
        logger.debug("listing: %s", " ".join(argv))
        try:
            proc = subprocess.run(
                list(argv),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise BackendUnavailable(f"cannot run {argv[0]!r}: {exc}") from exc

        if proc.returncode != 0:
            detail = _tail(proc.stderr) or f"exit status {proc.returncode}"
            raise BackendUnavailable(
                f"{' '.join(argv[:2])} failed: {detail}",
                returncode=proc.returncode,
            )
        return proc.stdout

    def list(self, kind: CandidateKind) -> list[str]:
        raw = self._read(self.listing_argv(kind))
        return PARSERS[kind](raw)


class SubprocessRunner:
    """Ejecuta el comando backend heredando stdin/stdout/stderr."""

    def run(self, command: BackendCommand) -> int:
        logger.debug("dispatch: %s", command.display())
        try:
            proc = subprocess.run(list(command.argv), check=False)
        except OSError as exc:
            raise BackendUnavailable(
                f"cannot run {command.argv[0]!r}: {exc}",
                returncode=None,
            ) from exc
        except KeyboardInterrupt:
            # subprocess.run ya esperó/terminó al hijo antes de propagar.
            return EXIT_INTERRUPTED
        return proc.returncode
