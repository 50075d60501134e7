from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.exceptions import ValidationError


def to_decimal(value, field_name: str = "value") -> Decimal:
    """Convert int/float/str/Decimal to Decimal (floats go through str)."""
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError) as e:
            raise ValidationError(f"{field_name} must be a number") from e
    if not result.is_finite():
        raise ValidationError(f"{field_name} must be a finite number")
    return result


def optional_decimal(value, field_name: str = "value") -> Decimal | None:
    if value is None or value == "":
        return None
    return to_decimal(value, field_name)


def format_decimal(value) -> str:
    """Render 5.00 as "5" and 4.50 as "4.5" (never in exponent form)."""
    d = to_decimal(value)
    if d == d.to_integral_value():
        return str(d.quantize(Decimal(1)))
    return f"{d.normalize():f}"
