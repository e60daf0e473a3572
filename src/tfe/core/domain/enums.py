"""String tags used by the API.

These values are used to interpret responses and as filter values. The
server owns every state machine behind them (for example run status
transitions); the client only reads the current tag and never decides
whether a transition is legal. A tag the server adds later decodes to a
member built on the fly instead of failing the whole resource.
"""

from __future__ import annotations

from enum import Enum


class Tag(str, Enum):
    """Base for open tag sets: an unknown value becomes a member built on the fly."""

    @classmethod
    def _missing_(cls, value: object) -> Tag | None:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = value.upper()
        member._value_ = value
        return member


class RunStatus(Tag):
    """Server-driven status of a run."""

    APPLIED = "applied"
    APPLYING = "applying"
    CANCELED = "canceled"
    CONFIRMED = "confirmed"
    DISCARDED = "discarded"
    ERRORED = "errored"
    PENDING = "pending"
    PLANNED = "planned"
    PLANNING = "planning"
    POLICY_CHECKED = "policy_checked"
    POLICY_CHECKING = "policy_checking"
    POLICY_OVERRIDE = "policy_override"


class RunSource(Tag):
    """Where a run was queued from."""

    API = "tfe-api"
    CONFIGURATION_VERSION = "tfe-configuration-version"
    UI = "tfe-ui"


class DeliveryType(Tag):
    """Two-factor delivery method."""

    APP = "app"
    SMS = "sms"


class AuthPolicyType(Tag):
    """Authentication policy an organization enforces on collaborators."""

    PASSWORD = "password"
    TWO_FACTOR_MANDATORY = "two_factor_mandatory"


class EnterprisePlanType(Tag):
    FREE = "free"
    PREMIUM = "premium"
    PRO = "pro"
    TRIAL = "trial"
