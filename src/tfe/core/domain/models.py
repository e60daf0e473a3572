"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación de tipos al decodificar respuestas remotas sin acoplar el dominio a HTTP.
- Los atributos anidados (objetos JSON planos dentro de `attributes`) usan
  alias con el nombre exacto del wire; el mapeo de primer nivel vive en
  `core.domain.mapping`.

Nota:
- Estos modelos son snapshots: cada llamada produce un valor nuevo, nada se cachea.
- Todo campo salvo el identificador es opcional porque el servidor puede omitirlo
  y porque un modelo también sirve como referencia de relación (solo `id`).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from tfe.core.domain.enums import (
    AuthPolicyType,
    DeliveryType,
    EnterprisePlanType,
    RunSource,
    RunStatus,
)


class WireModel(BaseModel):
    """Objeto JSON plano anidado en `attributes` (claves con guiones en el wire)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResourceModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# --------------------------------------------------------------------------
# Organizations
# --------------------------------------------------------------------------


class OrganizationPermissions(WireModel):
    can_create_team: bool = Field(default=False, alias="can-create-team")
    can_create_workspace: bool = Field(default=False, alias="can-create-workspace")
    can_create_workspace_migration: bool = Field(default=False, alias="can-create-workspace-migration")
    can_destroy: bool = Field(default=False, alias="can-destroy")
    can_traverse: bool = Field(default=False, alias="can-traverse")
    can_update: bool = Field(default=False, alias="can-update")
    can_update_api_token: bool = Field(default=False, alias="can-update-api-token")
    can_update_oauth: bool = Field(default=False, alias="can-update-oauth")
    can_update_sentinel: bool = Field(default=False, alias="can-update-sentinel")


class Organization(ResourceModel):
    """Organización. Su identificador primario es el nombre."""

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre (y a la vez ID primario) de la organización.",
    )
    collaborator_auth_policy: AuthPolicyType | None = None
    created_at: datetime | None = None
    email: str | None = None
    enterprise_plan: EnterprisePlanType | None = None
    owners_team_saml_role_id: str | None = None
    permissions: OrganizationPermissions | None = None
    saml_enabled: bool = False
    session_remember: int | None = Field(
        default=None,
        description="Minutos que dura una sesión recordada.",
    )
    session_timeout: int | None = Field(
        default=None,
        description="Minutos de inactividad antes de expirar la sesión.",
    )
    trial_expires_at: datetime | None = None
    two_factor_conformant: bool = False


# --------------------------------------------------------------------------
# Workspaces
# --------------------------------------------------------------------------


class VCSRepo(WireModel):
    branch: str | None = None
    identifier: str | None = None
    ingress_submodules: bool = Field(default=False, alias="ingress-submodules")
    oauth_token_id: str | None = Field(default=None, alias="oauth-token-id")


class WorkspaceActions(WireModel):
    is_destroyable: bool = Field(default=False, alias="is-destroyable")


class WorkspacePermissions(WireModel):
    can_destroy: bool = Field(default=False, alias="can-destroy")
    can_lock: bool = Field(default=False, alias="can-lock")
    can_queue_destroy: bool = Field(default=False, alias="can-queue-destroy")
    can_queue_run: bool = Field(default=False, alias="can-queue-run")
    can_read_settings: bool = Field(default=False, alias="can-read-settings")
    can_update: bool = Field(default=False, alias="can-update")
    can_update_variable: bool = Field(default=False, alias="can-update-variable")


class Workspace(ResourceModel):
    """Workspace: unidad de estado + configuración sobre la que corren los runs."""

    id: str = Field(..., min_length=1, description="ID asignado por el servidor (ws-...).")
    actions: WorkspaceActions | None = None
    auto_apply: bool = False
    can_queue_destroy_plan: bool = False
    created_at: datetime | None = None
    environment: str | None = None
    locked: bool = False
    migration_environment: str | None = None
    name: str | None = None
    permissions: WorkspacePermissions | None = None
    terraform_version: str | None = None
    vcs_repo: VCSRepo | None = None
    working_directory: str | None = None

    organization: Organization | None = None


# --------------------------------------------------------------------------
# Runs
# --------------------------------------------------------------------------


class ConfigurationVersion(ResourceModel):
    """Versión de configuración subida a un workspace (solo como relación)."""

    id: str = Field(..., min_length=1)
    auto_queue_runs: bool = False
    error: str | None = None
    error_message: str | None = None
    source: str | None = None
    status: str | None = None
    upload_url: str | None = None


class RunActions(WireModel):
    is_cancelable: bool = Field(default=False, alias="is-cancelable")
    is_confirmable: bool = Field(default=False, alias="is-confirmable")
    is_discardable: bool = Field(default=False, alias="is-discardable")


class RunPermissions(WireModel):
    can_apply: bool = Field(default=False, alias="can-apply")
    can_cancel: bool = Field(default=False, alias="can-cancel")
    can_discard: bool = Field(default=False, alias="can-discard")
    can_force_execute: bool = Field(default=False, alias="can-force-execute")


class RunStatusTimestamps(WireModel):
    errored_at: datetime | None = Field(default=None, alias="errored-at")
    finished_at: datetime | None = Field(default=None, alias="finished-at")
    queued_at: datetime | None = Field(default=None, alias="queued-at")
    started_at: datetime | None = Field(default=None, alias="started-at")


class Run(ResourceModel):
    """Run de un workspace.

    `status` es solo lectura: el servidor avanza la máquina de estados y el
    cliente únicamente pide transiciones (apply/cancel/discard).
    """

    id: str = Field(..., min_length=1, description="ID asignado por el servidor (run-...).")
    actions: RunActions | None = None
    created_at: datetime | None = None
    has_changes: bool = False
    is_destroy: bool = False
    message: str | None = None
    permissions: RunPermissions | None = None
    source: RunSource | None = None
    status: RunStatus | None = None
    status_timestamps: RunStatusTimestamps | None = None

    configuration_version: ConfigurationVersion | None = None
    workspace: Workspace | None = None


# --------------------------------------------------------------------------
# Account
# --------------------------------------------------------------------------


class TwoFactor(WireModel):
    delivery: DeliveryType | None = None
    enabled: bool = False
    provisioning_url: str | None = Field(default=None, alias="provisioning-url")
    recovery_codes: list[str] = Field(default_factory=list, alias="recovery-codes")
    sms_number: str | None = Field(default=None, alias="sms-number")
    used_recovery_codes: list[str] = Field(default_factory=list, alias="used-recovery-codes")
    verified: bool = False


class Account(ResourceModel):
    """Usuario autenticado por el token actual."""

    id: str = Field(..., min_length=1)
    avatar_url: str | None = None
    email: str | None = None
    is_service_account: bool = False
    two_factor: TwoFactor | None = None
    unconfirmed_email: str | None = None
    username: str | None = None
    v2_only: bool = False


# --------------------------------------------------------------------------
# Private registry
# --------------------------------------------------------------------------


class Module(ResourceModel):
    id: str = Field(..., min_length=1)
    name: str | None = None
    provider: str | None = None
    status: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    organization: Organization | None = None


class ModuleVersion(ResourceModel):
    id: str = Field(..., min_length=1)
    source: str | None = None
    status: str | None = None
    version: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# --------------------------------------------------------------------------
# SSH keys
# --------------------------------------------------------------------------


class SSHKey(ResourceModel):
    """Clave SSH de una organización. El valor privado nunca vuelve del servidor."""

    id: str = Field(..., min_length=1)
    name: str | None = None
