"""Errores del Core.

Por qué una jerarquía propia:
- La CLI traduce cada error a un código de salida estable sin inspeccionar
  mensajes ni excepciones de `subprocess`.
- Un error de resolución (listado/selector) nunca se confunde con el código
  de salida del backend, que se propaga tal cual.
"""

from __future__ import annotations

EXIT_NO_TARGET = 1
EXIT_CONFIG_INVALID = 2
EXIT_LISTING_FAILED = 3
EXIT_SELECTOR_FAILED = 4
EXIT_BACKEND_NOT_FOUND = 127
EXIT_INTERRUPTED = 130


class GatewayError(Exception):
    """Base de todos los errores del gateway."""

    exit_code: int = 1


class BackendUnavailable(GatewayError):
    """El backend no pudo arrancar o terminó con estado distinto de cero."""

    exit_code = EXIT_LISTING_FAILED

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class MalformedOutput(GatewayError):
    """La salida estructurada de un listado no tiene la forma esperada."""

    exit_code = EXIT_LISTING_FAILED


class SelectorUnavailable(GatewayError):
    """El selector interactivo no pudo arrancar o falló (no es una cancelación)."""

    exit_code = EXIT_SELECTOR_FAILED


class NoTargetSelected(GatewayError):
    """No hay target para un subcomando que lo requiere."""

    exit_code = EXIT_NO_TARGET

    def __init__(self, noun: str) -> None:
        super().__init__(f"No {noun} selected.")
        self.noun = noun


class Interrupted(GatewayError):
    """Ctrl-C durante la fase de resolución (listado), antes de despachar."""

    exit_code = EXIT_INTERRUPTED

    def __init__(self) -> None:
        super().__init__("Interrupted.")


class InvalidConfiguration(GatewayError):
    """Variables `JFZ_*` o `.env` con valores que no validan."""

    exit_code = EXIT_CONFIG_INVALID
