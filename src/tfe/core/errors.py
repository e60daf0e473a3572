"""Taxonomía de errores del cliente.

Reglas:
- Todo error propio hereda de `TFEError`.
- Los errores de transporte (httpx) y la cancelación (asyncio) NO se envuelven:
  llegan al llamador tal cual.
- Nada se loguea ni se silencia aquí; la librería solo produce el error tipado.
"""

from __future__ import annotations

from typing import Any


class TFEError(Exception):
    """Base de todos los errores del cliente."""


class ConfigurationError(TFEError):
    """Configuración base inválida (dirección o token)."""


class ValidationError(TFEError, ValueError):
    """Input inválido detectado localmente, antes de construir el request."""


class EncodingError(TFEError):
    """El payload no pudo serializarse a JSON."""


class DecodingError(TFEError):
    """La respuesta no es un documento JSON-API válido para el tipo esperado."""


class APIError(TFEError):
    """Respuesta no-2xx del servidor."""

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or []


class NotFoundError(APIError):
    """404: el recurso no existe (o no es visible para el token)."""

    def __init__(self, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(404, "Error: not found", errors)


class UnauthorizedError(APIError):
    """401: token ausente, inválido o revocado."""

    def __init__(self, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(401, "Error: unauthorized", errors)
