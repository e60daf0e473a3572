"""Recurso: organizaciones.

El identificador primario de una organización es su nombre, así que
`read/update/delete` reciben el nombre.
"""

from __future__ import annotations

from tfe.adapters.http_client import escape
from tfe.adapters.jsonapi import encode_document
from tfe.core.domain import mapping
from tfe.core.domain.models import Organization
from tfe.core.domain.options import (
    OrganizationCreateOptions,
    OrganizationListOptions,
    OrganizationUpdateOptions,
)
from tfe.core.interfaces.requester import Requester
from tfe.core.validation import require_field, require_id


class Organizations:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list(self, options: OrganizationListOptions | None = None) -> list[Organization]:
        return await self._requester.request_many(
            "GET",
            "organizations",
            mapping.ORGANIZATION,
            params=options or OrganizationListOptions(),
        )

    async def create(self, options: OrganizationCreateOptions) -> Organization:
        require_field(options.name, "Name")
        require_id(options.name, "name")
        require_field(options.email, "Email")

        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "POST",
            "organizations",
            mapping.ORGANIZATION,
            body=encode_document(mapping.ORGANIZATION_CREATE, options),
        )

    async def read(self, organization: str) -> Organization:
        require_id(organization, "organization")
        return await self._requester.request_one(
            "GET",
            f"organizations/{escape(organization)}",
            mapping.ORGANIZATION,
        )

    async def update(self, organization: str, options: OrganizationUpdateOptions) -> Organization:
        """Actualiza atributos; renombrar cambia también el identificador."""

        require_id(organization, "organization")
        if options.name is not None:
            require_id(options.name, "name")

        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "PATCH",
            f"organizations/{escape(organization)}",
            mapping.ORGANIZATION,
            body=encode_document(mapping.ORGANIZATION_UPDATE, options),
        )

    async def delete(self, organization: str) -> None:
        require_id(organization, "organization")
        await self._requester.request_none("DELETE", f"organizations/{escape(organization)}")
