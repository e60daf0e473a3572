"""Validaciones puras (sin I/O).

Se ejecutan antes de construir cualquier request: si fallan, no hay llamada HTTP.
"""

from __future__ import annotations

import re
from typing import Any

from tfe.core.errors import ValidationError

# Un segmento hecho solo de puntos ("." / "..") lo resuelve el cliente HTTP
# como navegación de path, así que no cuenta como identificador.
_STRING_ID = re.compile(r"^(?!\.+$)[a-zA-Z0-9\-._]+$")


def valid_string(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def valid_string_id(value: str | None) -> bool:
    """Identificador usable como segmento de path: no vacío y sin caracteres que rompan la URL."""

    return valid_string(value) and _STRING_ID.match(value or "") is not None


def require_id(value: str | None, label: str) -> str:
    if value is None or not valid_string_id(value):
        raise ValidationError(f"Invalid value for {label}")
    return value


def require_field(value: Any, name: str) -> None:
    """Falla con `<name> is required` si el campo falta o es un string vacío."""

    if value is None:
        raise ValidationError(f"{name} is required")
    if isinstance(value, str) and not value.strip():
        raise ValidationError(f"{name} is required")
