"""
Field validation and coercion helpers shared by the entity services.

Each helper either returns the coerced value or raises ValidationError with
the user-facing message. None of them touch the store.
"""

import math
import numbers
import re
from datetime import date, datetime
from typing import Any, Iterable, Mapping

from storefront.services.errors import ValidationError

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

MIN_PASSWORD_LENGTH = 6
MIN_YEAR = 2000
MAX_YEAR = 2100

# Signed 64-bit INTEGER column range
MIN_INT = -(2**63)
MAX_INT = 2**63 - 1


def is_missing(value: Any) -> bool:
    """A required field is missing when it is None or an empty string."""
    return value is None or (isinstance(value, str) and value == "")


def require_fields(fields: Mapping[str, Any], names: Iterable[str], message: str) -> None:
    if any(is_missing(fields.get(name)) for name in names):
        raise ValidationError(message)


def require_value(value: Any, message: str) -> None:
    """Identifiers and filter values must be truthy: None, 0 and "" are all rejected."""
    if not value:
        raise ValidationError(message)


require_id = require_value


def _parse_number(value: Any) -> float:
    # bool is an int subclass; True is not a customer id
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        number = float(value.strip())
    else:
        raise ValueError(f"unsupported type {type(value).__name__}")
    if math.isnan(number) or math.isinf(number):
        raise ValueError("not a finite number")
    return number


def to_int(value: Any, label: str) -> int:
    """Coerce a numeric reference (e.g. "7") to an int the store can hold."""
    try:
        number = _parse_number(value)
    except (ValueError, OverflowError):
        raise ValidationError(f"{label} must be a valid number")
    if not number.is_integer():
        raise ValidationError(f"{label} must be a valid number")
    result = int(value) if isinstance(value, numbers.Integral) else int(number)
    if not MIN_INT <= result <= MAX_INT:
        raise ValidationError(f"{label} must be a valid number")
    return result


def to_float(value: Any, label: str) -> float:
    try:
        return _parse_number(value)
    except (ValueError, OverflowError):
        raise ValidationError(f"{label} must be a valid number")


def to_positive_amount(value: Any, label: str) -> float:
    """Money fields (total, price, amount) must be numbers strictly above zero."""
    number = to_float(value, label)
    if number <= 0:
        raise ValidationError(f"{label} must be greater than 0")
    return number


def check_choice(value: Any, choices: Iterable[str], message: str) -> str:
    if value not in set(choices):
        raise ValidationError(message)
    return value


def to_date(value: Any, label: str) -> date:
    """Accept a date, a datetime, or an ISO 8601 string; drop any time part."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
    raise ValidationError(f"{label} must be a valid date (YYYY-MM-DD)")


def today() -> date:
    return date.today()


def check_email(email: Any) -> str:
    if not isinstance(email, str) or not EMAIL_RE.match(email):
        raise ValidationError("Invalid email format")
    return email


def check_password(password: Any) -> str:
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    return password


def to_year(value: Any) -> int:
    if not value:
        raise ValidationError("Year is required")
    try:
        number = _parse_number(value)
    except (ValueError, OverflowError):
        raise ValidationError("Invalid year provided")
    if not number.is_integer() or number < MIN_YEAR or number > MAX_YEAR:
        raise ValidationError("Invalid year provided")
    return int(number)
