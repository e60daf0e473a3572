"""Recurso: workspaces.

CRUD se direcciona por `organización + nombre`; lock/unlock por ID (`ws-...`).
"""

from __future__ import annotations

from tfe.adapters.http_client import escape
from tfe.adapters.jsonapi import encode_document, encode_plain
from tfe.core.domain import mapping
from tfe.core.domain.models import Workspace
from tfe.core.domain.options import (
    WorkspaceCreateOptions,
    WorkspaceListOptions,
    WorkspaceLockOptions,
    WorkspaceUpdateOptions,
)
from tfe.core.interfaces.requester import Requester
from tfe.core.validation import require_field, require_id


class Workspaces:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list(self, organization: str, options: WorkspaceListOptions | None = None) -> list[Workspace]:
        require_id(organization, "organization")
        return await self._requester.request_many(
            "GET",
            f"organizations/{escape(organization)}/workspaces",
            mapping.WORKSPACE,
            params=options or WorkspaceListOptions(),
        )

    async def create(self, organization: str, options: WorkspaceCreateOptions) -> Workspace:
        require_id(organization, "organization")
        require_field(options.name, "Name")
        require_id(options.name, "name")

        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "POST",
            f"organizations/{escape(organization)}/workspaces",
            mapping.WORKSPACE,
            body=encode_document(mapping.WORKSPACE_CREATE, options),
        )

    async def read(self, organization: str, workspace: str) -> Workspace:
        return await self._requester.request_one(
            "GET",
            self._workspace_path(organization, workspace),
            mapping.WORKSPACE,
        )

    async def update(self, organization: str, workspace: str, options: WorkspaceUpdateOptions) -> Workspace:
        path = self._workspace_path(organization, workspace)
        if options.name is not None:
            require_id(options.name, "name")

        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "PATCH",
            path,
            mapping.WORKSPACE,
            body=encode_document(mapping.WORKSPACE_UPDATE, options),
        )

    async def delete(self, organization: str, workspace: str) -> None:
        await self._requester.request_none("DELETE", self._workspace_path(organization, workspace))

    async def lock(self, workspace_id: str, options: WorkspaceLockOptions | None = None) -> Workspace:
        require_id(workspace_id, "workspace ID")
        return await self._requester.request_one(
            "POST",
            f"workspaces/{escape(workspace_id)}/actions/lock",
            mapping.WORKSPACE,
            body=encode_plain(options or WorkspaceLockOptions()),
        )

    async def unlock(self, workspace_id: str) -> Workspace:
        require_id(workspace_id, "workspace ID")
        return await self._requester.request_one(
            "POST",
            f"workspaces/{escape(workspace_id)}/actions/unlock",
            mapping.WORKSPACE,
        )

    @staticmethod
    def _workspace_path(organization: str, workspace: str) -> str:
        require_id(organization, "organization")
        require_id(workspace, "workspace")
        return f"organizations/{escape(organization)}/workspaces/{escape(workspace)}"
