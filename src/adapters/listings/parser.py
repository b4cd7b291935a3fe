"""Extracción de identificadores desde la salida estructurada.

Cada función recibe el texto JSON tal cual lo imprimió el backend y devuelve
una lista plana y ordenada de candidatos. Los fallos de parseo/forma se
traducen a `MalformedOutput`.
"""

from __future__ import annotations

import json
from typing import Callable, TypeVar

from pydantic import BaseModel, ValidationError

from adapters.listings.models import ControllersListing, ModelsListing, StatusListing
from core.domain.models import CandidateKind
from core.errors import MalformedOutput

_M = TypeVar("_M", bound=BaseModel)


def _load(raw: str, model: type[_M], what: str) -> _M:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedOutput(f"{what}: invalid JSON ({exc.msg})") from exc
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise MalformedOutput(f"{what}: unexpected shape ({exc.error_count()} error(s))") from exc


def parse_controllers(raw: str) -> list[str]:
    listing = _load(raw, ControllersListing, "controllers")
    return list(listing.controllers or {})


def parse_models(raw: str) -> list[str]:
    listing = _load(raw, ModelsListing, "models")
    return [entry.name for entry in listing.models or []]


def parse_units(raw: str) -> list[str]:
    listing = _load(raw, StatusListing, "status")
    units: list[str] = []
    for app in (listing.applications or {}).values():
        units.extend(app.units or {})
    return units


def parse_applications(raw: str) -> list[str]:
    listing = _load(raw, StatusListing, "status")
    return list(listing.applications or {})


PARSERS: dict[CandidateKind, Callable[[str], list[str]]] = {
    CandidateKind.CONTROLLERS: parse_controllers,
    CandidateKind.MODELS: parse_models,
    CandidateKind.UNITS: parse_units,
    CandidateKind.APPLICATIONS: parse_applications,
}
