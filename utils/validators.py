# utils/validators.py
import re
from datetime import date
from enum import Enum
from typing import Any, Mapping, Sequence, Tuple

from email_validator import EmailNotValidError, validate_email

from exceptions import ValidationError

DOB_PATTERN = re.compile(r"(0?[1-9]|[12][0-9]|3[01])/(0?[1-9]|1[012])/(19|20)[0-9][0-9]")


class FieldRule(str, Enum):
    REQUIRED = "required"
    EMAIL = "email"
    DATE = "date"


def validate_string_field(field: str, value: Any) -> None:
    if value is None or (isinstance(value, str) and value.strip() == ""):
        raise ValidationError(f"{field} is required")


def validate_email_field(email: Any) -> None:
    if not isinstance(email, str):
        raise ValidationError("Invalid email format")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError("Invalid email format")


def validate_date_field(dob: Any) -> None:
    """Accept ``dd/mm/yyyy`` strings that name a real calendar day."""
    if not isinstance(dob, str) or not DOB_PATTERN.fullmatch(dob):
        raise ValidationError("dob must be in the format dd/mm/yyyy")

    day, month, year = (int(part) for part in dob.split("/"))
    try:
        date(year, month, day)
    except ValueError:
        raise ValidationError("dob must be a valid date")


RULE_CHECKS = {
    FieldRule.EMAIL: lambda field, value: validate_email_field(value),
    FieldRule.DATE: lambda field, value: validate_date_field(value),
    FieldRule.REQUIRED: validate_string_field,
}


def validate_fields(
    values: Mapping[str, Any], rules: Sequence[Tuple[str, FieldRule]]
) -> None:
    """Check ``values`` against ``rules`` in order; raise on the first failure."""
    for field, rule in rules:
        RULE_CHECKS[rule](field, values.get(field))
