"""Field validators and derived values shared by the item types."""

from datetime import datetime

import config
from entities.errors import ValidationError


def require_int(value, field_name: str) -> None:
    # bool is an int subclass but never a valid count or id
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer, got {value!r}")


def require_positive_id(value) -> None:
    require_int(value, "ID")
    if value <= 0:
        raise ValidationError("ID must be positive")


def require_text(value, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} cannot be null or empty")


def require_non_negative(value, field_name: str) -> None:
    require_int(value, field_name)
    if value < 0:
        raise ValidationError(f"{field_name} cannot be negative")


def require_datetime(value, field_name: str) -> None:
    if not isinstance(value, datetime):
        raise ValidationError(f"{field_name} must be a datetime, got {value!r}")


def require_not_future(value: datetime, field_name: str) -> None:
    require_datetime(value, field_name)
    if value > datetime.now(value.tzinfo):
        raise ValidationError(f"{field_name} cannot be in the future")


def parse_datetime(value) -> datetime:
    """Parses an ISO-8601 string written by ``datetime.isoformat``."""
    if not isinstance(value, str):
        raise TypeError(f"Expected an ISO-8601 string, got {value!r}")
    return datetime.fromisoformat(value)


def stock_status(quantity: int) -> str:
    """Classifies a quantity. Both thresholds are inclusive upper bounds."""
    if quantity == config.OUT_OF_STOCK_QUANTITY:
        return "Out of Stock"
    if quantity <= config.LOW_STOCK_THRESHOLD:
        return "Low Stock"
    if quantity <= config.NORMAL_STOCK_THRESHOLD:
        return "Normal Stock"
    return "High Stock"
