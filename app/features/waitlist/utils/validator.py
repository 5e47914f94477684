import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from app.platform.exceptions import ValidationError

# local-part "@" domain, the domain made of non-empty dot separated labels
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@.]+(\.[^\s@.]+)+$")


@dataclass(frozen=True)
class WaitlistSubmission:
    """A normalized submission, safe to hand to the waitlist service."""

    name: str
    email: str
    message: Optional[str] = None
    source: Optional[str] = None


def _field(candidate: Any, key: str) -> Any:
    if isinstance(candidate, Mapping):
        return candidate.get(key)
    return getattr(candidate, key, None)


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def validate_submission(candidate: Any) -> WaitlistSubmission:
    """
    Validate and normalize a `{name, email, message?, source?}` candidate.

    Accepts a mapping or any object exposing those attributes. Name and
    source are trimmed, the email is trimmed and lower-cased, and a blank
    message or source becomes None. Raises ValidationError for the first
    failing field (name, then email).
    """
    name = _clean(_field(candidate, "name"))
    if not name:
        raise ValidationError(field="name", reason="required")

    email = normalize_email(_clean(_field(candidate, "email")))
    if not is_valid_email(email):
        raise ValidationError(field="email", reason="invalid_format")

    # The message body is kept as typed; only a blank one is dropped.
    message = _field(candidate, "message")
    if message is not None and not str(message).strip():
        message = None
    elif message is not None:
        message = str(message)

    source = _clean(_field(candidate, "source")) or None

    return WaitlistSubmission(name=name, email=email, message=message, source=source)
