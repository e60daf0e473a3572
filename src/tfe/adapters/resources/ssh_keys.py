"""Recurso: claves SSH de una organización."""

from __future__ import annotations

from tfe.adapters.http_client import escape
from tfe.adapters.jsonapi import encode_document
from tfe.core.domain import mapping
from tfe.core.domain.models import SSHKey
from tfe.core.domain.options import (
    SSHKeyCreateOptions,
    SSHKeyListOptions,
    SSHKeyUpdateOptions,
)
from tfe.core.interfaces.requester import Requester
from tfe.core.validation import require_field, require_id


class SSHKeys:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list(self, organization: str, options: SSHKeyListOptions | None = None) -> list[SSHKey]:
        require_id(organization, "organization")
        return await self._requester.request_many(
            "GET",
            f"organizations/{escape(organization)}/ssh-keys",
            mapping.SSH_KEY,
            params=options or SSHKeyListOptions(),
        )

    async def create(self, organization: str, options: SSHKeyCreateOptions) -> SSHKey:
        require_id(organization, "organization")
        require_field(options.name, "Name")
        require_field(options.value, "Value")

        # Nunca enviamos un ID provisto por el llamador.
        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "POST",
            f"organizations/{escape(organization)}/ssh-keys",
            mapping.SSH_KEY,
            body=encode_document(mapping.SSH_KEY_CREATE, options),
        )

    async def read(self, ssh_key_id: str) -> SSHKey:
        require_id(ssh_key_id, "SSH key ID")
        return await self._requester.request_one("GET", f"ssh-keys/{escape(ssh_key_id)}", mapping.SSH_KEY)

    async def update(self, ssh_key_id: str, options: SSHKeyUpdateOptions) -> SSHKey:
        require_id(ssh_key_id, "SSH key ID")

        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "PATCH",
            f"ssh-keys/{escape(ssh_key_id)}",
            mapping.SSH_KEY,
            body=encode_document(mapping.SSH_KEY_UPDATE, options),
        )

    async def delete(self, ssh_key_id: str) -> None:
        require_id(ssh_key_id, "SSH key ID")
        await self._requester.request_none("DELETE", f"ssh-keys/{escape(ssh_key_id)}")
