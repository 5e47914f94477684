from types import SimpleNamespace

import pytest

from app.features.waitlist.utils.validator import WaitlistSubmission, validate_submission
from app.platform.exceptions import ValidationError


def test_valid_submission_is_trimmed_and_lowercased():
    result = validate_submission(
        {"name": "  Ada Lovelace ", "email": " Ada@Example.COM ", "message": "Hello!", "source": " twitter "}
    )

    assert result == WaitlistSubmission(
        name="Ada Lovelace", email="ada@example.com", message="Hello!", source="twitter"
    )


def test_empty_message_becomes_none():
    result = validate_submission({"name": "Ada", "email": "ada@example.com", "message": ""})
    assert result.message is None
    assert result.source is None


def test_whitespace_message_becomes_none():
    result = validate_submission({"name": "Ada", "email": "ada@example.com", "message": "   \n"})
    assert result.message is None


def test_message_is_passed_through_unchanged():
    message = "  Line one\nLine two  "
    result = validate_submission({"name": "Ada", "email": "ada@example.com", "message": message})
    assert result.message == message


def test_accepts_objects_with_attributes():
    candidate = SimpleNamespace(name="Grace", email="grace@navy.mil", message=None, source=None)
    assert validate_submission(candidate).email == "grace@navy.mil"


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_blank_name_is_required(name):
    with pytest.raises(ValidationError) as exc:
        validate_submission({"name": name, "email": "ada@example.com"})

    assert exc.value.field == "name"
    assert exc.value.reason == "required"


@pytest.mark.parametrize(
    "email",
    [
        "",
        None,
        "ada",
        "ada.example.com",
        "ada@",
        "@example.com",
        "ada@localhost",
        "ada@example.",
        "ada@.com",
        "ada@example..com",
        "ada@@example.com",
        "ada@exa mple.com",
        "ada lovelace@example.com",
    ],
)
def test_malformed_email_is_rejected(email):
    with pytest.raises(ValidationError) as exc:
        validate_submission({"name": "Ada", "email": email})

    assert exc.value.field == "email"
    assert exc.value.reason == "invalid_format"


@pytest.mark.parametrize(
    "email", ["ada@example.com", "first.last+tag@sub.example.co.uk", "a@b.io"]
)
def test_well_formed_email_is_accepted(email):
    assert validate_submission({"name": "Ada", "email": email}).email == email


def test_name_is_reported_before_email():
    with pytest.raises(ValidationError) as exc:
        validate_submission({"name": " ", "email": "nope"})
    assert exc.value.field == "name"


def test_validation_error_serializes_field_and_reason():
    err = ValidationError(field="email", reason="invalid_format")
    assert err.to_dict() == {"error": "validation_error", "field": "email", "reason": "invalid_format"}
    assert err.status_code == 400
