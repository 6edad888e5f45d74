from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from ..core.exceptions import ValidationError

Number = Union[int, float, str, Decimal]


def to_money(value: Number, field_name: str = "amount") -> Decimal:
    """Coerce a number into Decimal. Floats go through str() to avoid binary noise."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"{field_name} is not a number: {value!r}") from e


def require_positive(value: Number, field_name: str) -> Decimal:
    amount = to_money(value, field_name)
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return amount


def require_non_negative(value: Number, field_name: str) -> Decimal:
    amount = to_money(value, field_name)
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return amount


def require_in_range(value: float, field_name: str, low: float, high: float) -> float:
    if value is None or not (low <= float(value) <= high):
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return float(value)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()
