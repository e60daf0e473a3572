"""Recurso: runs.

El estado de un run (`RunStatus`) lo avanza el servidor. Este módulo solo
lee ese estado y pide transiciones (apply/cancel/discard); no decide si una
transición es válida.
"""

from __future__ import annotations

from tfe.adapters.http_client import escape
from tfe.adapters.jsonapi import encode_document, encode_plain
from tfe.core.domain import mapping
from tfe.core.domain.models import Run
from tfe.core.domain.options import (
    RunApplyOptions,
    RunCancelOptions,
    RunCreateOptions,
    RunDiscardOptions,
    RunListOptions,
)
from tfe.core.interfaces.requester import Requester
from tfe.core.validation import require_field, require_id


class Runs:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list(self, workspace_id: str, options: RunListOptions | None = None) -> list[Run]:
        """Runs de un workspace, en el orden que devuelve el servidor."""

        require_id(workspace_id, "workspace ID")
        return await self._requester.request_many(
            "GET",
            f"workspaces/{escape(workspace_id)}/runs",
            mapping.RUN,
            params=options or RunListOptions(),
        )

    async def create(self, options: RunCreateOptions) -> Run:
        require_field(options.workspace, "Workspace")

        # Nunca enviamos un ID provisto por el llamador.
        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "POST",
            "runs",
            mapping.RUN,
            body=encode_document(mapping.RUN_CREATE, options),
        )

    async def read(self, run_id: str) -> Run:
        require_id(run_id, "run ID")
        return await self._requester.request_one("GET", f"runs/{escape(run_id)}", mapping.RUN)

    async def apply(self, run_id: str, options: RunApplyOptions | None = None) -> None:
        await self._action(run_id, "apply", options or RunApplyOptions())

    async def cancel(self, run_id: str, options: RunCancelOptions | None = None) -> None:
        await self._action(run_id, "cancel", options or RunCancelOptions())

    async def discard(self, run_id: str, options: RunDiscardOptions | None = None) -> None:
        await self._action(run_id, "discard", options or RunDiscardOptions())

    async def _action(
        self,
        run_id: str,
        verb: str,
        options: RunApplyOptions | RunCancelOptions | RunDiscardOptions,
    ) -> None:
        require_id(run_id, "run ID")
        await self._requester.request_none(
            "POST",
            f"runs/{escape(run_id)}/actions/{verb}",
            body=encode_plain(options),
        )
