"""Tabla fija de subcomandos mejorados.

Invariante: cada subcomando mejorado tiene exactamente una fuente de listado
y una plantilla de invocación; `PASSTHROUGH` no tiene ninguna.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from core.domain.models import CandidateKind, SubcommandDescriptor, SubcommandKind

DESTROY_MODEL_FLAGS: tuple[str, ...] = (
    "--no-wait",
    "--force",
    "--destroy-storage",
    "--no-prompt",
)

SUBCOMMANDS: Mapping[SubcommandKind, SubcommandDescriptor] = MappingProxyType(
    {
        SubcommandKind.CONTROLLERS: SubcommandDescriptor(
            kind=SubcommandKind.CONTROLLERS,
            listing=CandidateKind.CONTROLLERS,
            prompt_label="Controller",
            noun="controller",
            backend_subcommand="switch",
            forwards_args=False,
        ),
        SubcommandKind.MODELS: SubcommandDescriptor(
            kind=SubcommandKind.MODELS,
            listing=CandidateKind.MODELS,
            prompt_label="Model",
            noun="model",
            backend_subcommand="switch",
            forwards_args=False,
        ),
        SubcommandKind.SSH: SubcommandDescriptor(
            kind=SubcommandKind.SSH,
            listing=CandidateKind.UNITS,
            prompt_label="Unit",
            noun="unit",
            backend_subcommand="ssh",
        ),
        SubcommandKind.DEBUG_LOG: SubcommandDescriptor(
            kind=SubcommandKind.DEBUG_LOG,
            listing=CandidateKind.UNITS,
            prompt_label="Unit",
            noun="unit",
            backend_subcommand="debug-log",
            target_required=False,
            target_flag="-i",
        ),
        SubcommandKind.DESTROY_MODEL: SubcommandDescriptor(
            kind=SubcommandKind.DESTROY_MODEL,
            listing=CandidateKind.MODELS,
            prompt_label="Model",
            noun="model",
            backend_subcommand="destroy-model",
            fixed_flags=DESTROY_MODEL_FLAGS,
        ),
    }
)

# Token de línea de comandos -> subcomando mejorado.
ENHANCED_TOKENS: Mapping[str, SubcommandKind] = MappingProxyType(
    {kind.value: kind for kind in SUBCOMMANDS}
)

# Palabras que ofrece el autocompletado en la primera posición.
COMPLETION_WORDS: tuple[str, ...] = (
    "config",
    "controllers",
    "models",
    "show-unit",
    "ssh",
    "debug-log",
    "destroy-model",
    "help",
)

# Subcomando (primer argumento) -> candidatos para la segunda posición.
COMPLETION_SOURCES: Mapping[str, CandidateKind] = MappingProxyType(
    {
        "ssh": CandidateKind.UNITS,
        "debug-log": CandidateKind.UNITS,
        "show-unit": CandidateKind.UNITS,
        "models": CandidateKind.MODELS,
        "destroy-model": CandidateKind.MODELS,
        "controllers": CandidateKind.CONTROLLERS,
        "config": CandidateKind.APPLICATIONS,
    }
)

HELP_TOKENS: frozenset[str] = frozenset({"help", "--help", "-h"})


def descriptor_for(kind: SubcommandKind) -> SubcommandDescriptor:
    """Devuelve el descriptor de un subcomando mejorado (KeyError para passthrough)."""

    return SUBCOMMANDS[kind]
