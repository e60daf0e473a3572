"""Fachada pública del cliente.

Por qué una fachada:
- Un único punto de construcción: valida la configuración base, crea el
  `httpx.AsyncClient` y le inyecta explícitamente el mismo `Requester` a cada
  módulo de recursos.
- No hay estado global: dos `Client` distintos no comparten nada.
"""

from __future__ import annotations

import httpx

from tfe.adapters.http_client import build_async_client
from tfe.adapters.requester import HTTPRequester
from tfe.adapters.resources import (
    Accounts,
    Organizations,
    Registry,
    Runs,
    SSHKeys,
    Workspaces,
)
from tfe.core.config import ClientSettings
from tfe.core.errors import ConfigurationError


def check_settings(settings: ClientSettings) -> None:
    """Falla de inmediato ante una configuración base inutilizable."""

    if not (settings.token or "").strip():
        raise ConfigurationError("Missing API token")

    try:
        url = httpx.URL(settings.address)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid address: {settings.address}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"Invalid address: {settings.address}")


class Client:
    """Cliente asíncrono de la API.

    Uso::

        async with Client(token="...") as client:
            run = await client.runs.read("run-abc123")
            print(run.status)
    """

    accounts: Accounts
    organizations: Organizations
    registry: Registry
    runs: Runs
    ssh_keys: SSHKeys
    workspaces: Workspaces

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        address: str | None = None,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or ClientSettings()
        overrides = {key: value for key, value in (("address", address), ("token", token)) if value is not None}
        if overrides:
            settings = settings.model_copy(update=overrides)
        check_settings(settings)

        self.settings = settings
        self._http = build_async_client(settings, transport=transport)

        requester = HTTPRequester(self._http)
        self.accounts = Accounts(requester)
        self.organizations = Organizations(requester)
        self.registry = Registry(requester)
        self.runs = Runs(requester)
        self.ssh_keys = SSHKeys(requester)
        self.workspaces = Workspaces(requester)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()
