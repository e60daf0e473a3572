"""Recurso: cuenta del usuario autenticado.

Todas las rutas cuelgan de `account/`; el usuario lo determina el token.
"""

from __future__ import annotations

from tfe.adapters.jsonapi import encode_document
from tfe.core.domain import mapping
from tfe.core.domain.models import Account
from tfe.core.domain.options import (
    AccountUpdateOptions,
    TwoFactorEnableOptions,
    TwoFactorVerifyOptions,
)
from tfe.core.interfaces.requester import Requester
from tfe.core.validation import require_field


class Accounts:
    """Operaciones sobre la cuenta actual (detalles, update y 2FA)."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def read(self) -> Account:
        return await self._requester.request_one("GET", "account/details", mapping.ACCOUNT)

    async def update(self, options: AccountUpdateOptions) -> Account:
        # Nunca enviamos un ID provisto por el llamador.
        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "PATCH",
            "account/update",
            mapping.ACCOUNT,
            body=encode_document(mapping.ACCOUNT_UPDATE, options),
        )

    async def enable_two_factor(self, options: TwoFactorEnableOptions) -> Account:
        require_field(options.delivery, "Delivery")

        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "POST",
            "account/actions/two-factor-enable",
            mapping.ACCOUNT,
            body=encode_document(mapping.TWO_FACTOR_ENABLE, options),
        )

    async def disable_two_factor(self) -> Account:
        return await self._requester.request_one(
            "POST",
            "account/actions/two-factor-disable",
            mapping.ACCOUNT,
        )

    async def verify_two_factor(self, options: TwoFactorVerifyOptions) -> Account:
        require_field(options.code, "Code")

        options = options.model_copy(update={"id": ""})
        return await self._requester.request_one(
            "POST",
            "account/actions/two-factor-verify",
            mapping.ACCOUNT,
            body=encode_document(mapping.TWO_FACTOR_VERIFY, options),
        )

    async def resend_verification_code(self) -> None:
        await self._requester.request_none(
            "POST",
            "account/actions/two-factor-resend-verification-code",
        )
