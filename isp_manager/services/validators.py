# services/validators.py
"""Input checks shared by the services. Every failure raises ValidationError."""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from email_validator import validate_email, EmailNotValidError

from isp_manager.errors import ValidationError

MIN_PASSWORD_LENGTH = 6
MONEY_QUANTUM = Decimal("0.01")
MAX_AMOUNT = Decimal("100000000")
# INTEGER primary keys
MAX_ID = 2**31 - 1


def require_payload(data):
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_text(data, field):
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required", details={"field": field})
    return value


def is_storable_id(value):
    return 1 <= value <= MAX_ID


def require_id(data, field):
    value = data.get(field)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer", details={"field": field})
    if not is_storable_id(value):
        raise ValidationError(f"{field} must be between 1 and {MAX_ID}", details={"field": field})
    return value


def parse_price(value, field="price"):
    """Positive amount with 2-decimal precision, never a binary float."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValidationError(f"{field} must be a number", details={"field": field})
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field} must be a number", details={"field": field})
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"{field} must be greater than 0", details={"field": field})
    # NUMERIC(10,2) column
    if amount >= MAX_AMOUNT:
        raise ValidationError(f"{field} must be less than {MAX_AMOUNT}", details={"field": field})
    amount = amount.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
    if amount <= 0:
        raise ValidationError(f"{field} must be at least {MONEY_QUANTUM}", details={"field": field})
    return amount


def parse_email(data, field="email"):
    value = require_text(data, field)
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError(f"{field} is not a valid email address: {e}", details={"field": field})
    return value


def parse_password(data, field="password"):
    value = data.get(field)
    if not isinstance(value, str) or len(value) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"{field} must be at least {MIN_PASSWORD_LENGTH} characters",
            details={"field": field},
        )
    return value
