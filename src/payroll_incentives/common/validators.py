from __future__ import annotations

from decimal import Decimal

from ..core.exceptions import ValidationError


def require_non_negative(value: Decimal | None, field_name: str) -> Decimal | None:
    if value is not None and value < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return value
