"""Objetos de opciones (input de cada operación).

Convenciones:
- `None` significa "no provisto": el campo no viaja en el request.
- Cualquier otro valor (incluido `""`) se envía tal cual.
- El campo `id` de algunas opciones es de uso interno: los módulos de recursos
  lo vacían justo antes de construir el request, sin importar lo que ponga el
  llamador.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from tfe.core.domain.enums import AuthPolicyType, DeliveryType
from tfe.core.domain.models import ConfigurationVersion, Workspace


class Options(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ListOptions(Options):
    """Paginación compartida por todas las operaciones `list`."""

    page_number: int | None = Field(
        default=None,
        ge=1,
        alias="page[number]",
        description="Página solicitada (1-based).",
    )
    page_size: int | None = Field(
        default=None,
        ge=1,
        alias="page[size]",
        description="Elementos por página.",
    )


# --------------------------------------------------------------------------
# Account
# --------------------------------------------------------------------------


class AccountUpdateOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    username: str | None = None
    email: str | None = Field(
        default=None,
        description="Nuevo email (debe confirmarse después para tener efecto).",
    )


class TwoFactorEnableOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    delivery: DeliveryType | None = None
    sms_number: str | None = None


class TwoFactorVerifyOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    code: str | None = Field(
        default=None,
        description="Código recibido por SMS o generado por la app.",
    )


# --------------------------------------------------------------------------
# Runs
# --------------------------------------------------------------------------


class RunListOptions(ListOptions):
    pass


class RunCreateOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    is_destroy: bool | None = Field(
        default=None,
        description="Plan de destrucción de todos los recursos aprovisionados.",
    )
    message: str | None = None
    configuration_version: ConfigurationVersion | None = Field(
        default=None,
        description="Si se omite, el servidor usa la última versión del workspace.",
    )
    workspace: Workspace | None = None


class RunApplyOptions(Options):
    comment: str | None = None


class RunCancelOptions(Options):
    comment: str | None = None


class RunDiscardOptions(Options):
    comment: str | None = None


# --------------------------------------------------------------------------
# Private registry
# --------------------------------------------------------------------------


class ModuleVCSOptions(Options):
    identifier: str | None = None
    oauth_token_id: str | None = Field(default=None, alias="oauth-token-id")
    display_identifier: str | None = Field(default=None, alias="display_identifier")


class ModulePublishOptions(Options):
    vcs_repo: ModuleVCSOptions | None = None


class ModuleCreateOptions(Options):
    name: str | None = None
    provider: str | None = None


class ModuleCreateVersionOptions(Options):
    version: str | None = None


# --------------------------------------------------------------------------
# SSH keys
# --------------------------------------------------------------------------


class SSHKeyListOptions(ListOptions):
    pass


class SSHKeyCreateOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    name: str | None = None
    value: str | None = Field(default=None, description="Clave privada en formato PEM.")


class SSHKeyUpdateOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    name: str | None = None
    value: str | None = None


# --------------------------------------------------------------------------
# Organizations
# --------------------------------------------------------------------------


class OrganizationListOptions(ListOptions):
    pass


class OrganizationCreateOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    name: str | None = None
    email: str | None = None
    session_timeout: int | None = None
    session_remember: int | None = None
    collaborator_auth_policy: AuthPolicyType | None = None


class OrganizationUpdateOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    name: str | None = None
    email: str | None = None
    session_timeout: int | None = None
    session_remember: int | None = None
    collaborator_auth_policy: AuthPolicyType | None = None


# --------------------------------------------------------------------------
# Workspaces
# --------------------------------------------------------------------------


class WorkspaceListOptions(ListOptions):
    search: str | None = Field(
        default=None,
        alias="search[name]",
        description="Filtro por subcadena del nombre.",
    )


class VCSRepoOptions(Options):
    branch: str | None = None
    identifier: str | None = None
    ingress_submodules: bool | None = Field(default=None, alias="ingress-submodules")
    oauth_token_id: str | None = Field(default=None, alias="oauth-token-id")


class WorkspaceCreateOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    name: str | None = None
    auto_apply: bool | None = None
    migration_environment: str | None = None
    terraform_version: str | None = None
    vcs_repo: VCSRepoOptions | None = None
    working_directory: str | None = None


class WorkspaceUpdateOptions(Options):
    id: str = Field(default="", description="Uso interno; se ignora.")
    name: str | None = None
    auto_apply: bool | None = None
    terraform_version: str | None = None
    vcs_repo: VCSRepoOptions | None = None
    working_directory: str | None = None


class WorkspaceLockOptions(Options):
    reason: str | None = None
