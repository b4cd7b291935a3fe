"""Modelos para la salida `--format=json` del backend.

Idea:
- Solo validamos las claves que usamos; el resto se ignora (`extra="ignore"`).
- Las claves de nivel superior son obligatorias: si faltan, la salida no es
  la esperada y se reporta como `MalformedOutput`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ControllersListing(BaseModel):
    """`juju controllers --format=json`."""

    model_config = ConfigDict(extra="ignore")

    controllers: dict[str, Any] | None = Field(
        ...,
        description="Mapa nombre -> detalles; null cuando no hay controladores.",
    )


class ModelEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)


class ModelsListing(BaseModel):
    """`juju models --format=json`."""

    model_config = ConfigDict(extra="ignore")

    models: list[ModelEntry] | None = Field(
        ...,
        description="Modelos del controlador actual, en orden del backend.",
    )


class ApplicationStatus(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Las aplicaciones subordinadas no tienen mapa `units`.
    units: dict[str, Any] | None = None


class StatusListing(BaseModel):
    """`juju status --format=json`."""

    model_config = ConfigDict(extra="ignore")

    applications: dict[str, ApplicationStatus] | None = Field(
        ...,
        description="Mapa aplicación -> estado.",
    )
