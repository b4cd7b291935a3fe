"""Contrato del ejecutor de comandos backend."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import BackendCommand


@runtime_checkable
class CommandRunner(Protocol):
    """Ejecuta un comando con los streams heredados y devuelve su código de salida."""

    def run(self, command: BackendCommand) -> int:
        ...
