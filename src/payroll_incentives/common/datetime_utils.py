from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

from ..core.constants import HOURS_QUANTUM, SECONDS_PER_HOUR
from ..core.exceptions import ValidationError


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 string (YYYY-MM-DDTHH:MM[:SS]) into datetime."""
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid datetime: {value!r}") from e


def hours_between(start: datetime, end: datetime) -> Decimal:
    hours = Decimal(str((end - start).total_seconds())) / SECONDS_PER_HOUR
    return hours.quantize(HOURS_QUANTUM)


def hours_to_timedelta(hours) -> timedelta:
    return timedelta(seconds=float(Decimal(str(hours)) * SECONDS_PER_HOUR))
