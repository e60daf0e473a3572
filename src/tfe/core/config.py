"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los módulos de recursos.
- Permite que adaptadores (HTTP/JSON-API) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADDRESS = "https://app.terraform.io"
DEFAULT_BASE_PATH = "/api/v2/"
CONFIG_DIR_NAME = "tfe-client"


def get_user_config_dir() -> Path:
    """Carpeta del `.env` por usuario.

    `TFE_CONFIG_DIR` manda si está definida; si no, `%APPDATA%` en Windows y
    `$XDG_CONFIG_HOME` (o `~/.config`) en el resto.
    """

    override = os.environ.get("TFE_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or Path.home()) / CONFIG_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / CONFIG_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class ClientSettings(BaseSettings):
    """Configuración compartida por todas las llamadas del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar los módulos de recursos.
    - Un único contrato de configuración (dirección, token, timeouts).
    """

    model_config = SettingsConfigDict(
        env_prefix="TFE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    address: str = Field(
        default=DEFAULT_ADDRESS,
        min_length=1,
        description="Dirección base del servidor (esquema + host).",
    )
    base_path: str = Field(
        default=DEFAULT_BASE_PATH,
        min_length=1,
        description="Raíz versionada de la API.",
    )
    token: str | None = Field(
        default=None,
        description="Token de API enviado como `Authorization: Bearer`.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="tfe-client/0.1 (+python-httpx)",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )

    def api_root(self) -> str:
        """URL absoluta de la API, siempre terminada en `/`."""

        root = self.address.rstrip("/") + "/" + self.base_path.strip("/")
        return root + "/"
