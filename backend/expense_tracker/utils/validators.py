"""Request body validators."""
import math

from expense_tracker.errors import ValidationError

EXPENSE_FIELDS = ("amount", "description", "category", "date", "paymentMethod")
EXPENSE_TEXT_FIELDS = ("description", "category", "date", "paymentMethod")


def require_fields(payload, *keys, message="All fields are required"):
    """Every key must be present with a truthy value."""
    payload = payload or {}
    missing = [k for k in keys if not payload.get(k)]
    if missing:
        raise ValidationError(message)
    return True


# BSON stores integers as signed 64-bit
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def coerce_number(value, field):
    # Numeric strings are accepted, the way form-encoded bodies arrive
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ValidationError(f"{field} must be a number") from None
        if number.is_integer():
            number = int(number)
    else:
        raise ValidationError(f"{field} must be a number")

    if isinstance(number, int):
        if not INT64_MIN <= number <= INT64_MAX:
            raise ValidationError(f"{field} is out of range")
    elif not math.isfinite(number):
        raise ValidationError(f"{field} must be a number")
    return number


def _require_text(payload, field):
    value = payload[field]
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value


def parse_expense(payload, allow_user_email=True):
    """
    Validate an expense body and return the fields to persist.

    All of amount, description, category, date and paymentMethod must be
    truthy. ``userEmail`` is optional and kept only when ``allow_user_email``
    is set (expense creation).
    """
    require_fields(payload, *EXPENSE_FIELDS)

    amount = coerce_number(payload["amount"], "amount")
    if amount <= 0:
        raise ValidationError("amount must be a positive number")

    fields = {"amount": amount}
    for field in EXPENSE_TEXT_FIELDS:
        fields[field] = _require_text(payload, field)

    if allow_user_email and payload.get("userEmail"):
        fields["userEmail"] = _require_text(payload, "userEmail")
    return fields


def parse_expense_limit(payload):
    """Return ``(email, expense_limit)`` from a set-expense-limit body."""
    payload = payload or {}
    email = payload.get("email")
    expense_limit = payload.get("expenseLimit")
    if not email or expense_limit is None:
        raise ValidationError("Email and expense limit are required")
    if not isinstance(email, str):
        raise ValidationError("email must be a string")
    return email, coerce_number(expense_limit, "expenseLimit")
