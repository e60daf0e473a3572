"""Contrato del núcleo compartido request/response.

Por qué Protocol:
- Cada módulo de recursos recibe explícitamente un `Requester` en su
  constructor; no hay cliente global oculto.
- En tests se puede sustituir por un doble sin tocar httpx.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from tfe.core.domain.mapping import ResourceSchema
from tfe.core.domain.options import ListOptions

ModelT = TypeVar("ModelT", bound=BaseModel)


@runtime_checkable
class Requester(Protocol):
    """Construye, envía y decodifica un único request.

    Reglas de diseño:
    - Un método por forma de respuesta (recurso, colección, sin cuerpo).
    - `path` es relativo a la raíz versionada de la API y ya viene escapado.
    - `body` es un documento JSON listo para serializar.
    """

    async def request_one(
        self,
        method: str,
        path: str,
        schema: ResourceSchema[ModelT],
        *,
        body: dict[str, Any] | None = None,
    ) -> ModelT:
        ...

    async def request_many(
        self,
        method: str,
        path: str,
        schema: ResourceSchema[ModelT],
        *,
        params: ListOptions | None = None,
    ) -> list[ModelT]:
        ...

    async def request_none(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
    ) -> None:
        ...
