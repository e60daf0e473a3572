"""Cliente asíncrono y tipado para la API de Terraform Enterprise / Cloud."""

from __future__ import annotations

import logging

from tfe.client import Client
from tfe.core.config import ClientSettings
from tfe.core.domain.enums import (
    AuthPolicyType,
    DeliveryType,
    EnterprisePlanType,
    RunSource,
    RunStatus,
)
from tfe.core.domain.models import (
    Account,
    ConfigurationVersion,
    Module,
    ModuleVersion,
    Organization,
    Run,
    SSHKey,
    TwoFactor,
    Workspace,
)
from tfe.core.domain.options import (
    AccountUpdateOptions,
    ListOptions,
    ModuleCreateOptions,
    ModuleCreateVersionOptions,
    ModulePublishOptions,
    ModuleVCSOptions,
    OrganizationCreateOptions,
    OrganizationListOptions,
    OrganizationUpdateOptions,
    RunApplyOptions,
    RunCancelOptions,
    RunCreateOptions,
    RunDiscardOptions,
    RunListOptions,
    SSHKeyCreateOptions,
    SSHKeyListOptions,
    SSHKeyUpdateOptions,
    TwoFactorEnableOptions,
    TwoFactorVerifyOptions,
    VCSRepoOptions,
    WorkspaceCreateOptions,
    WorkspaceListOptions,
    WorkspaceLockOptions,
    WorkspaceUpdateOptions,
)
from tfe.core.errors import (
    APIError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    NotFoundError,
    TFEError,
    UnauthorizedError,
    ValidationError,
)

__version__ = "0.1.0"

# La librería no configura logging; solo evita el warning de "no handlers".
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "Account",
    "AccountUpdateOptions",
    "AuthPolicyType",
    "Client",
    "ClientSettings",
    "ConfigurationError",
    "ConfigurationVersion",
    "DecodingError",
    "DeliveryType",
    "EncodingError",
    "EnterprisePlanType",
    "ListOptions",
    "Module",
    "ModuleCreateOptions",
    "ModuleCreateVersionOptions",
    "ModulePublishOptions",
    "ModuleVCSOptions",
    "ModuleVersion",
    "NotFoundError",
    "Organization",
    "OrganizationCreateOptions",
    "OrganizationListOptions",
    "OrganizationUpdateOptions",
    "Run",
    "RunApplyOptions",
    "RunCancelOptions",
    "RunCreateOptions",
    "RunDiscardOptions",
    "RunListOptions",
    "RunSource",
    "RunStatus",
    "SSHKey",
    "SSHKeyCreateOptions",
    "SSHKeyListOptions",
    "SSHKeyUpdateOptions",
    "TFEError",
    "TwoFactor",
    "TwoFactorEnableOptions",
    "TwoFactorVerifyOptions",
    "UnauthorizedError",
    "VCSRepoOptions",
    "ValidationError",
    "Workspace",
    "WorkspaceCreateOptions",
    "WorkspaceListOptions",
    "WorkspaceLockOptions",
    "WorkspaceUpdateOptions",
]
