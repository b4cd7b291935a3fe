"""Contrato del listador estructurado.

Por qué Protocol:
- El Core solo necesita "dame los candidatos de este tipo, en orden".
- Permite sustituir el backend real por un stub en tests o por otro CLI.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CandidateKind


@runtime_checkable
class CandidateLister(Protocol):
    """Contrato mínimo para obtener candidatos.

    Reglas de diseño:
    - Sin interactividad ni caché: cada llamada consulta el backend.
    - Lanza `BackendUnavailable` o `MalformedOutput`; nunca devuelve una
      lista parcial.
    """

    def list(self, kind: CandidateKind) -> list[str]:
        """Devuelve los identificadores en el orden del backend."""

        ...
