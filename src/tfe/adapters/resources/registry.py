"""Recurso: módulos del registry privado.

Los borrados usan POST a `registry-modules/actions/delete/...`: la
profundidad del path decide si se borra el módulo entero, un provider o una
versión concreta.
"""

from __future__ import annotations

from tfe.adapters.http_client import escape
from tfe.adapters.jsonapi import encode_document
from tfe.core.domain import mapping
from tfe.core.domain.models import Module, ModuleVersion
from tfe.core.domain.options import (
    ModuleCreateOptions,
    ModuleCreateVersionOptions,
    ModulePublishOptions,
)
from tfe.core.interfaces.requester import Requester
from tfe.core.validation import require_field, require_id


class Registry:
    """Publicación, alta y borrado de módulos en el registry privado."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def publish(self, options: ModulePublishOptions) -> Module:
        """Importa un módulo desde un repositorio VCS."""

        require_field(options.vcs_repo, "VCS repo")
        return await self._requester.request_one(
            "POST",
            "registry-modules",
            mapping.MODULE,
            body=encode_document(mapping.MODULE_PUBLISH, options),
        )

    async def create_module(self, organization: str, options: ModuleCreateOptions) -> Module:
        require_id(organization, "organization")
        require_field(options.name, "Name")
        require_field(options.provider, "Provider")

        return await self._requester.request_one(
            "POST",
            f"organizations/{escape(organization)}/registry-modules",
            mapping.MODULE,
            body=encode_document(mapping.MODULE_CREATE, options),
        )

    async def create_module_version(
        self,
        organization: str,
        module: str,
        provider: str,
        options: ModuleCreateVersionOptions,
    ) -> ModuleVersion:
        path = self._module_path(organization, module, provider)
        require_field(options.version, "Version")

        return await self._requester.request_one(
            "POST",
            f"registry-modules/{path}/versions",
            mapping.MODULE_VERSION,
            body=encode_document(mapping.MODULE_CREATE_VERSION, options),
        )

    async def delete_module(self, organization: str, module: str) -> None:
        path = self._module_path(organization, module)
        await self._requester.request_none("POST", f"registry-modules/actions/delete/{path}")

    async def delete_module_provider(self, organization: str, module: str, provider: str) -> None:
        path = self._module_path(organization, module, provider)
        await self._requester.request_none("POST", f"registry-modules/actions/delete/{path}")

    async def delete_module_version(
        self,
        organization: str,
        module: str,
        provider: str,
        version: str,
    ) -> None:
        path = self._module_path(organization, module, provider, version)
        await self._requester.request_none("POST", f"registry-modules/actions/delete/{path}")

    @staticmethod
    def _module_path(organization: str, module: str, *rest: str) -> str:
        labels = ("provider", "version")
        segments = [require_id(organization, "organization"), require_id(module, "module name")]
        for label, value in zip(labels, rest):
            segments.append(require_id(value, label))
        return "/".join(escape(segment) for segment in segments)
