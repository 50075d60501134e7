from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from ..common.number_utils import optional_decimal, to_decimal
from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_RATE_OPTIONS
from ..core.exceptions import ValidationError


@dataclass(frozen=True, init=False)
class DistributionRules:
    """Caller-supplied policy for one distribution run.

    ``rate_options`` is the discrete menu of allowed incentive rates. It is
    deduplicated on construction and always kept sorted descending, so the
    "highest option <= x" lookup and the cap ladder walk the same order.
    """

    rate_options: tuple[Decimal, ...]
    break_threshold_hours: Optional[Decimal]
    break_duration_minutes: Optional[Decimal]

    def __init__(
        self,
        rate_options: Iterable,
        *,
        break_threshold_hours=None,
        break_duration_minutes=None,
    ):
        options = {to_decimal(o, "rate option") for o in (rate_options or ())}
        if not options:
            raise ValidationError("At least one incentive rate option is required")
        if all(o < 0 for o in options):
            raise ValidationError("At least one incentive rate option must be non-negative")

        threshold = require_non_negative(optional_decimal(break_threshold_hours, "break threshold"), "break threshold")
        duration = require_non_negative(optional_decimal(break_duration_minutes, "break duration"), "break duration")

        object.__setattr__(self, "rate_options", tuple(sorted(options, reverse=True)))
        object.__setattr__(self, "break_threshold_hours", threshold)
        object.__setattr__(self, "break_duration_minutes", duration)

    @classmethod
    def from_settings(cls, settings) -> "DistributionRules":
        return cls(
            getattr(settings, "RATE_OPTIONS", DEFAULT_RATE_OPTIONS),
            break_threshold_hours=getattr(settings, "BREAK_THRESHOLD_HOURS", None),
            break_duration_minutes=getattr(settings, "BREAK_DURATION_MINUTES", None),
        )

    @property
    def max_rate(self) -> Decimal:
        return self.rate_options[0]

    @property
    def min_rate(self) -> Decimal:
        return self.rate_options[-1]

    @property
    def has_break_rule(self) -> bool:
        return bool(self.break_threshold_hours) and bool(self.break_duration_minutes)

    def to_dict(self) -> dict:
        return {
            "rate_options": [str(o) for o in self.rate_options],
            "break_threshold_hours": str(self.break_threshold_hours) if self.break_threshold_hours is not None else None,
            "break_duration_minutes": str(self.break_duration_minutes) if self.break_duration_minutes is not None else None,
        }
