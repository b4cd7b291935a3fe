"""Contrato del selector interactivo."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import SelectionOutcome


@runtime_checkable
class InteractiveSelector(Protocol):
    """Selección única sobre una secuencia de candidatos.

    - Cancelar no es un error: devuelve `NoneSelected`.
    - Con exactamente un candidato se acepta sin interacción; con cero se
      devuelve `NoneSelected` sin abrir el prompt.
    """

    def select(self, candidates: Sequence[str], prompt_label: str) -> SelectionOutcome:
        ...
