"""Núcleo compartido: build → send → status → decode.

Una instancia por `Client`; no guarda estado mutable por llamada, así que
puede usarse desde varias tareas concurrentes sobre el mismo
`httpx.AsyncClient`. Sin reintentos: cada llamada es at-most-once.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from tfe.adapters.http_client import build_request
from tfe.adapters.jsonapi import decode_many, decode_one, parse_document, raise_for_status
from tfe.core.domain.mapping import ResourceSchema
from tfe.core.domain.options import ListOptions

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class HTTPRequester:
    """Implementación de `core.interfaces.requester.Requester` sobre httpx."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: ListOptions | None = None,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        request = build_request(self._client, method, path, params=params, body=body)
        response = await self._client.send(request)
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        raise_for_status(response)
        return response

    async def request_one(
        self,
        method: str,
        path: str,
        schema: ResourceSchema[ModelT],
        *,
        body: dict[str, Any] | None = None,
    ) -> ModelT:
        response = await self._send(method, path, body=body)
        return decode_one(parse_document(response), schema)

    async def request_many(
        self,
        method: str,
        path: str,
        schema: ResourceSchema[ModelT],
        *,
        params: ListOptions | None = None,
    ) -> list[ModelT]:
        response = await self._send(method, path, params=params)
        return decode_many(parse_document(response), schema)

    async def request_none(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
    ) -> None:
        # Solo importa el status; el cuerpo (si lo hay) se descarta.
        await self._send(method, path, body=body)
