"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los descriptores de subcomando y los comandos backend son valores
  inmutables (`frozen`) y validados; nadie los muta entre resolución y
  despacho.
- La selección es un valor etiquetado (`Selected` / `NoneSelected`) que se
  consume de inmediato y nunca se persiste.

Nota:
- Estos modelos describen *qué* se ejecuta, no *cómo* se lanza el proceso.
"""

from __future__ import annotations

import shlex
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SubcommandKind(str, Enum):
    """Clasificación de una invocación."""

    CONTROLLERS = "controllers"
    MODELS = "models"
    SSH = "ssh"
    DEBUG_LOG = "debug-log"
    DESTROY_MODEL = "destroy-model"
    PASSTHROUGH = "passthrough"


class CandidateKind(str, Enum):
    """Entidades que el backend sabe listar en formato estructurado."""

    CONTROLLERS = "controllers"
    MODELS = "models"
    UNITS = "units"
    APPLICATIONS = "applications"


class Selected(BaseModel):
    """Resultado del selector: el usuario eligió `value`."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1)


class NoneSelected(BaseModel):
    """Resultado del selector: cancelado, lista vacía o sin coincidencias."""

    model_config = ConfigDict(frozen=True)


SelectionOutcome = Union[Selected, NoneSelected]

NONE_SELECTED = NoneSelected()


class SubcommandDescriptor(BaseModel):
    """Fila de la tabla fija de subcomandos mejorados.

    Por qué un descriptor:
    - Una sola rutina genérica interpreta la tabla; la política
      "target explícito vs. selección" vive en un único sitio.
    """

    model_config = ConfigDict(frozen=True)

    kind: SubcommandKind
    listing: CandidateKind = Field(
        ...,
        description="Fuente de candidatos cuando no hay target explícito.",
    )
    prompt_label: str = Field(
        ...,
        min_length=1,
        description="Etiqueta del prompt del selector (p.ej. 'Controller').",
    )
    noun: str = Field(
        ...,
        min_length=1,
        description="Sustantivo para mensajes ('controller', 'model', 'unit').",
    )
    backend_subcommand: str = Field(
        ...,
        min_length=1,
        description="Subcomando del backend que ejecuta la acción.",
    )
    target_required: bool = Field(
        default=True,
        description="Si es False, la ausencia de target es un resultado válido.",
    )
    target_flag: str | None = Field(
        default=None,
        description="Flag que precede al target (p.ej. '-i' en debug-log).",
    )
    fixed_flags: tuple[str, ...] = Field(
        default=(),
        description="Flags fijos que van tras el target y antes de los argumentos reenviados.",
    )
    forwards_args: bool = Field(
        default=True,
        description="Si los argumentos restantes se reenvían al backend.",
    )


class BackendCommand(BaseModel):
    """Invocación exacta del backend (argv completo, sin re-splitting)."""

    model_config = ConfigDict(frozen=True)

    argv: tuple[str, ...] = Field(..., min_length=1)

    def display(self) -> str:
        return shlex.join(self.argv)
