"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los adaptadores (juju/fzf) reciben valores ya validados; los servicios del
  Core nunca leen el entorno directamente.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """`$XDG_CONFIG_HOME/jfz`, o `~/.config/jfz` si no está definido."""

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "jfz"
    return Path.home() / ".config" / "jfz"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Fusiona `values` en el .env de usuario (lo escribe ordenado por clave)."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = {k: v for k, v in dotenv_values(env_path).items() if v is not None}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# jfz user config (.env)"]
    lines.extend(f"{key}={existing[key]}" for key in sorted(existing))
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


# pydantic-settings: si una clave aparece en varios ficheros, gana el último.
# El .env del directorio actual pisa la config de usuario.
ENV_FILES: tuple[str, ...] = (str(get_user_env_file()), ".env")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="JFZ_",
        extra="ignore",
        case_sensitive=False,
        env_file=ENV_FILES,
        env_file_encoding="utf-8",
    )

    backend_bin: str = Field(
        default="juju",
        min_length=1,
        description="Ejecutable del CLI backend (nombre en PATH o ruta).",
    )
    selector_bin: str = Field(
        default="fzf",
        min_length=1,
        description="Ejecutable del selector interactivo (compatible con fzf).",
    )
    selector_height: str = Field(
        default="40%",
        min_length=1,
        description="Altura máxima del selector (`--height` de fzf).",
    )
    selector_pointer: str = Field(
        default="👉",
        min_length=1,
        description="Glifo del puntero en el selector.",
    )
    prompt_icon: str = Field(
        default="🪄",
        description="Icono que precede a la etiqueta del prompt.",
    )
    echo_commands: bool = Field(
        default=True,
        description="Mostrar el comando backend (`→ juju ...`) antes de ejecutarlo.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (stdlib) para trazas de depuración en stderr.",
    )
