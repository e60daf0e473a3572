"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers (auth + content negotiation) y la raíz versionada.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

`build_request` no hace I/O: solo produce un `httpx.Request` en memoria.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

import httpx

from tfe.core.config import ClientSettings
from tfe.core.domain.options import ListOptions
from tfe.core.errors import EncodingError

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"

_MUTATING_METHODS = frozenset({"POST", "PATCH", "PUT", "DELETE"})


def build_async_client(
    settings: ClientSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a la raíz versionada de la API.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los módulos se comporten igual.
    - El transporte es inyectable (tests, proxies).
    """

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": JSONAPI_MEDIA_TYPE,
        "Authorization": f"Bearer {settings.token}",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_root(),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def escape(segment: str) -> str:
    """Percent-encoding de un segmento de path derivado de input del llamador."""

    return quote(segment, safe="")


def encode_query(options: ListOptions | None) -> dict[str, str]:
    if options is None:
        return {}
    # Los alias del modelo son los nombres del wire (`page[number]`, ...).
    raw = options.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {key: str(value) for key, value in raw.items()}


def build_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    *,
    params: ListOptions | None = None,
    body: dict[str, Any] | None = None,
) -> httpx.Request:
    """Construye el request completo (URL, query, headers y cuerpo JSON)."""

    method = method.upper()
    headers: dict[str, str] = {}
    if method in _MUTATING_METHODS:
        headers["Content-Type"] = JSONAPI_MEDIA_TYPE

    content: bytes | None = None
    if body is not None:
        try:
            content = json.dumps(body, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"Could not encode request body: {exc}") from exc

    query = encode_query(params)
    return client.build_request(
        method,
        path.lstrip("/"),
        params=query or None,
        headers=headers,
        content=content,
    )
