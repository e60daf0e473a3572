"""Tablas de mapeo JSON-API por tipo de recurso.

Por qué tablas explícitas:
- El nombre de cada atributo/relación en el wire queda escrito una sola vez,
  legible y verificable estáticamente (sin escanear anotaciones en runtime).
- El mismo `ResourceSchema` sirve para decodificar recursos y para codificar
  opciones: el codec en `adapters.jsonapi` solo recorre la tabla.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel

from tfe.core.domain import models, options

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Relationship:
    """Relación `campo -> (nombre en el wire, esquema del recurso relacionado)`."""

    name: str
    schema: ResourceSchema[Any]


@dataclass(frozen=True)
class ResourceSchema(Generic[ModelT]):
    """Describe cómo se ve un modelo dentro de un documento JSON-API."""

    type_name: str
    model: type[ModelT]
    attributes: Mapping[str, str] = field(default_factory=dict)
    relationships: Mapping[str, Relationship] = field(default_factory=dict)
    # Campo del modelo que recibe el `id` primario del recurso.
    id_field: str = "id"


# --------------------------------------------------------------------------
# Recursos (decodificación)
# --------------------------------------------------------------------------

ORGANIZATION: ResourceSchema[models.Organization] = ResourceSchema(
    type_name="organizations",
    model=models.Organization,
    id_field="name",
    attributes={
        "collaborator_auth_policy": "collaborator-auth-policy",
        "created_at": "created-at",
        "email": "email",
        "enterprise_plan": "enterprise-plan",
        "owners_team_saml_role_id": "owners-team-saml-role-id",
        "permissions": "permissions",
        "saml_enabled": "saml-enabled",
        "session_remember": "session-remember",
        "session_timeout": "session-timeout",
        "trial_expires_at": "trial-expires-at",
        "two_factor_conformant": "two-factor-conformant",
    },
)

WORKSPACE: ResourceSchema[models.Workspace] = ResourceSchema(
    type_name="workspaces",
    model=models.Workspace,
    attributes={
        "actions": "actions",
        "auto_apply": "auto-apply",
        "can_queue_destroy_plan": "can-queue-destroy-plan",
        "created_at": "created-at",
        "environment": "environment",
        "locked": "locked",
        "migration_environment": "migration-environment",
        "name": "name",
        "permissions": "permissions",
        "terraform_version": "terraform-version",
        "vcs_repo": "vcs-repo",
        "working_directory": "working-directory",
    },
    relationships={
        "organization": Relationship("organization", ORGANIZATION),
    },
)

CONFIGURATION_VERSION: ResourceSchema[models.ConfigurationVersion] = ResourceSchema(
    type_name="configuration-versions",
    model=models.ConfigurationVersion,
    attributes={
        "auto_queue_runs": "auto-queue-runs",
        "error": "error",
        "error_message": "error-message",
        "source": "source",
        "status": "status",
        "upload_url": "upload-url",
    },
)

RUN: ResourceSchema[models.Run] = ResourceSchema(
    type_name="runs",
    model=models.Run,
    attributes={
        "actions": "actions",
        "created_at": "created-at",
        "has_changes": "has-changes",
        "is_destroy": "is-destroy",
        "message": "message",
        "permissions": "permissions",
        "source": "source",
        "status": "status",
        "status_timestamps": "status-timestamps",
    },
    relationships={
        "configuration_version": Relationship("configuration-version", CONFIGURATION_VERSION),
        "workspace": Relationship("workspace", WORKSPACE),
    },
)

ACCOUNT: ResourceSchema[models.Account] = ResourceSchema(
    type_name="users",
    model=models.Account,
    attributes={
        "avatar_url": "avatar-url",
        "email": "email",
        "is_service_account": "is-service-account",
        "two_factor": "two-factor",
        "unconfirmed_email": "unconfirmed-email",
        "username": "username",
        "v2_only": "v2-only",
    },
)

MODULE: ResourceSchema[models.Module] = ResourceSchema(
    type_name="registry-modules",
    model=models.Module,
    attributes={
        "name": "name",
        "provider": "provider",
        "status": "status",
        "created_at": "created-at",
        "updated_at": "updated-at",
    },
    relationships={
        "organization": Relationship("organization", ORGANIZATION),
    },
)

MODULE_VERSION: ResourceSchema[models.ModuleVersion] = ResourceSchema(
    type_name="registry-module-versions",
    model=models.ModuleVersion,
    attributes={
        "source": "source",
        "status": "status",
        "version": "version",
        "created_at": "created-at",
        "updated_at": "updated-at",
    },
)

SSH_KEY: ResourceSchema[models.SSHKey] = ResourceSchema(
    type_name="ssh-keys",
    model=models.SSHKey,
    attributes={"name": "name"},
)


# --------------------------------------------------------------------------
# Opciones (codificación)
# --------------------------------------------------------------------------

ACCOUNT_UPDATE: ResourceSchema[options.AccountUpdateOptions] = ResourceSchema(
    type_name="users",
    model=options.AccountUpdateOptions,
    attributes={"username": "username", "email": "email"},
)

TWO_FACTOR_ENABLE: ResourceSchema[options.TwoFactorEnableOptions] = ResourceSchema(
    type_name="users",
    model=options.TwoFactorEnableOptions,
    attributes={"delivery": "delivery", "sms_number": "sms-number"},
)

TWO_FACTOR_VERIFY: ResourceSchema[options.TwoFactorVerifyOptions] = ResourceSchema(
    type_name="users",
    model=options.TwoFactorVerifyOptions,
    attributes={"code": "code"},
)

RUN_CREATE: ResourceSchema[options.RunCreateOptions] = ResourceSchema(
    type_name="runs",
    model=options.RunCreateOptions,
    attributes={"is_destroy": "is-destroy", "message": "message"},
    relationships=RUN.relationships,
)

MODULE_PUBLISH: ResourceSchema[options.ModulePublishOptions] = ResourceSchema(
    type_name="registry-modules",
    model=options.ModulePublishOptions,
    attributes={"vcs_repo": "vcs-repo"},
)

MODULE_CREATE: ResourceSchema[options.ModuleCreateOptions] = ResourceSchema(
    type_name="registry-modules",
    model=options.ModuleCreateOptions,
    attributes={"name": "name", "provider": "provider"},
)

MODULE_CREATE_VERSION: ResourceSchema[options.ModuleCreateVersionOptions] = ResourceSchema(
    type_name="registry-module-versions",
    model=options.ModuleCreateVersionOptions,
    attributes={"version": "version"},
)

SSH_KEY_CREATE: ResourceSchema[options.SSHKeyCreateOptions] = ResourceSchema(
    type_name="ssh-keys",
    model=options.SSHKeyCreateOptions,
    attributes={"name": "name", "value": "value"},
)

SSH_KEY_UPDATE: ResourceSchema[options.SSHKeyUpdateOptions] = ResourceSchema(
    type_name="ssh-keys",
    model=options.SSHKeyUpdateOptions,
    attributes={"name": "name", "value": "value"},
)

_ORGANIZATION_OPTION_ATTRIBUTES = {
    "name": "name",
    "email": "email",
    "session_timeout": "session-timeout",
    "session_remember": "session-remember",
    "collaborator_auth_policy": "collaborator-auth-policy",
}

ORGANIZATION_CREATE: ResourceSchema[options.OrganizationCreateOptions] = ResourceSchema(
    type_name="organizations",
    model=options.OrganizationCreateOptions,
    attributes=_ORGANIZATION_OPTION_ATTRIBUTES,
)

ORGANIZATION_UPDATE: ResourceSchema[options.OrganizationUpdateOptions] = ResourceSchema(
    type_name="organizations",
    model=options.OrganizationUpdateOptions,
    attributes=_ORGANIZATION_OPTION_ATTRIBUTES,
)

WORKSPACE_CREATE: ResourceSchema[options.WorkspaceCreateOptions] = ResourceSchema(
    type_name="workspaces",
    model=options.WorkspaceCreateOptions,
    attributes={
        "name": "name",
        "auto_apply": "auto-apply",
        "migration_environment": "migration-environment",
        "terraform_version": "terraform-version",
        "vcs_repo": "vcs-repo",
        "working_directory": "working-directory",
    },
)

WORKSPACE_UPDATE: ResourceSchema[options.WorkspaceUpdateOptions] = ResourceSchema(
    type_name="workspaces",
    model=options.WorkspaceUpdateOptions,
    attributes={
        "name": "name",
        "auto_apply": "auto-apply",
        "terraform_version": "terraform-version",
        "vcs_repo": "vcs-repo",
        "working_directory": "working-directory",
    },
)
