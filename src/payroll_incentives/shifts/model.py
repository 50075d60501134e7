from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import hours_between, hours_to_timedelta
from ..common.number_utils import to_decimal
from ..core.exceptions import ShiftTimeError


@dataclass(eq=False)
class Shift:
    """Domain entity: a worked shift.

    Note: Mutable on purpose. The distribution coordinator commits incentive
    into ``distributed_incentive`` on the very object the caller handed in.
    Equality and hashing go through ``id``, which is fixed at construction.
    """

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    incentive: Decimal = Decimal(0)
    distributed_incentive: Decimal = Decimal(0)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def from_duration(cls, start: datetime, hours, *, incentive=0, shift_id: uuid.UUID | None = None) -> "Shift":
        shift = cls(start=start, end=start + hours_to_timedelta(hours), incentive=to_decimal(incentive, "incentive"))
        if shift_id is not None:
            shift.id = shift_id
        return shift

    @property
    def hours_worked(self) -> Decimal:
        if self.start is None:
            raise ShiftTimeError("There isn't a start set for the shift")
        if self.end is None:
            raise ShiftTimeError("There isn't a end set for the shift")
        return hours_between(self.start, self.end)

    @property
    def all_incentives(self) -> Decimal:
        return Decimal(self.incentive) + Decimal(self.distributed_incentive)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shift):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
