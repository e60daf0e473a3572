from __future__ import annotations

import pytest

from tfe.core.errors import ValidationError
from tfe.core.validation import require_field, require_id, valid_string, valid_string_id


@pytest.mark.parametrize("value", ["ws-123", "my_org", "v1.2.3", "A-b.c_d", ".hidden", "a..b"])
def test_valid_string_id_accepts_plain_identifiers(value: str) -> None:
    assert valid_string_id(value) is True


@pytest.mark.parametrize("value", [None, "", "   ", "! / nope", "a/b", "run 1", "q?x=1", ".", "..", "..."])
def test_valid_string_id_rejects_blank_and_path_breaking(value: str | None) -> None:
    assert valid_string_id(value) is False


def test_valid_string_only_checks_presence() -> None:
    assert valid_string("has spaces / slashes") is True
    assert valid_string(" \t ") is False
    assert valid_string(None) is False


def test_require_id_message_names_the_label() -> None:
    with pytest.raises(ValidationError, match="^Invalid value for run ID$"):
        require_id("", "run ID")
    with pytest.raises(ValidationError, match="^Invalid value for run ID$"):
        require_id(None, "run ID")
    with pytest.raises(ValidationError, match="^Invalid value for workspace$"):
        require_id("..", "workspace")
    assert require_id("run-1", "run ID") == "run-1"


def test_require_field_rejects_none_and_empty_strings() -> None:
    with pytest.raises(ValidationError, match="^Name is required$"):
        require_field(None, "Name")
    with pytest.raises(ValidationError, match="^Code is required$"):
        require_field("  ", "Code")
    require_field("x", "Name")
    require_field(False, "Flag")


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        require_field(None, "Value")
