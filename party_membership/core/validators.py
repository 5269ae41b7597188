"""
Field checks for registration and lookup input.

Everything here is pure: no database access, no logging. Each check raises
``ValidationError`` carrying the message shown to the visitor.
"""
import re
from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email as _check_email

from party_membership.core.constants import (
    EMAIL_MAX_LENGTH,
    FULL_NAME_MAX_LENGTH,
    MSG_INVALID_EMAIL,
    MSG_INVALID_NAME,
    MSG_INVALID_NATIONAL_ID,
    MSG_INVALID_PHONE,
    MSG_MISSING_NATIONAL_ID,
    MSG_REQUIRED_FIELDS,
    NATIONAL_ID_PATTERN,
    PHONE_MAX_LENGTH,
    PHONE_MIN_LENGTH,
)
from party_membership.core.errors import ValidationError

_NATIONAL_ID_RE = re.compile(NATIONAL_ID_PATTERN)
_PHONE_STRIP_RE = re.compile(r"[^0-9+]")


@dataclass(frozen=True)
class RegistrationFields:
    full_name: str
    email: str
    phone: str
    national_id: str


def _clean(value: str | None) -> str:
    return (value or "").strip()


def is_valid_national_id(value: str) -> bool:
    # fullmatch: "$" alone would accept a trailing newline
    return _NATIONAL_ID_RE.fullmatch(value) is not None


def validate_required(*values: str | None) -> None:
    if any(not _clean(v) for v in values):
        raise ValidationError(MSG_REQUIRED_FIELDS)


def validate_full_name(value: str) -> str:
    name = _clean(value)
    if not name:
        raise ValidationError(MSG_REQUIRED_FIELDS)
    if len(name) > FULL_NAME_MAX_LENGTH:
        raise ValidationError(MSG_INVALID_NAME)
    return name


def validate_national_id(value: str) -> str:
    national_id = _clean(value)
    if not national_id:
        raise ValidationError(MSG_MISSING_NATIONAL_ID)
    if not is_valid_national_id(national_id):
        raise ValidationError(MSG_INVALID_NATIONAL_ID)
    return national_id


def validate_email(value: str) -> str:
    email = _clean(value)
    if not email or len(email) > EMAIL_MAX_LENGTH:
        raise ValidationError(MSG_INVALID_EMAIL)
    try:
        _check_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError(MSG_INVALID_EMAIL)
    return email


def normalize_phone(value: str) -> str:
    """Keep digits and a single leading ``+``; drop everything else."""
    raw = _PHONE_STRIP_RE.sub("", _clean(value))
    if raw.startswith("+"):
        phone = "+" + raw[1:].replace("+", "")
    else:
        phone = raw.replace("+", "")

    if not (PHONE_MIN_LENGTH <= len(phone) <= PHONE_MAX_LENGTH):
        raise ValidationError(MSG_INVALID_PHONE)
    return phone


def validate_registration(
    full_name: str | None,
    email: str | None,
    phone: str | None,
    national_id: str | None,
) -> RegistrationFields:
    """Run every check in order and stop at the first failure."""
    validate_required(full_name, email, phone, national_id)

    national_id = validate_national_id(national_id)
    email = validate_email(email)
    phone = normalize_phone(phone)
    full_name = validate_full_name(full_name)

    return RegistrationFields(
        full_name=full_name,
        email=email,
        phone=phone,
        national_id=national_id,
    )
