# contactform/lib/validation.py
import re
from typing import Callable, Dict, Mapping, Tuple

from contactform.lib import messages

FIELDS: Tuple[str, ...] = ("name", "email", "subject", "message")
MIN_MESSAGE_LENGTH = 10

# local@domain.tld shape only; no RFC 5322 grammar
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class FieldValidationError(ValueError):
    """Base for per-field violations; str(exc) is the inline message."""


class RequiredFieldError(FieldValidationError):
    pass


class InvalidFormatError(FieldValidationError):
    pass


class TooShortError(FieldValidationError):
    pass


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value or ""))


def _require(value: str, message: str) -> None:
    if not (value or "").strip():
        raise RequiredFieldError(message)


def check_name(value: str) -> None:
    _require(value, messages.NAME_REQUIRED)


def check_email(value: str) -> None:
    _require(value, messages.EMAIL_REQUIRED)
    if not is_valid_email(value):
        raise InvalidFormatError(messages.EMAIL_INVALID)


def check_subject(value: str) -> None:
    _require(value, messages.SUBJECT_REQUIRED)


def check_message(value: str) -> None:
    _require(value, messages.MESSAGE_REQUIRED)
    if len(value.strip()) < MIN_MESSAGE_LENGTH:
        raise TooShortError(messages.MESSAGE_TOO_SHORT)


CHECKS: Dict[str, Callable[[str], None]] = {
    "name": check_name,
    "email": check_email,
    "subject": check_subject,
    "message": check_message,
}


def collect_field_errors(values: Mapping[str, str]) -> Dict[str, str]:
    """
    Runs every field check (no short-circuit) and returns {field: message}
    for the ones that failed. Valid fields are absent from the result.
    """
    errors: Dict[str, str] = {}
    for field in FIELDS:
        try:
            CHECKS[field](values.get(field, ""))
        except FieldValidationError as exc:
            errors[field] = str(exc)
    return errors
