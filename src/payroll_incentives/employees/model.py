from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..shifts.model import Shift


@dataclass
class Employee:
    """Domain entity: an employee and the shifts they worked.

    Note: pure data object, the distribution core never reads it directly.
    """

    employee_id: str
    first_name: str = ""
    last_name: str = ""
    shifts: list[Shift] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def add_shift(self, shift: Shift) -> Shift:
        self.shifts.append(shift)
        return shift

    def find_shift(self, shift_id) -> Optional[Shift]:
        for shift in self.shifts:
            if str(shift.id) == str(shift_id):
                return shift
        return None

    def total_hours(self) -> Decimal:
        # Blank shifts are skipped here; the coordinator is the one that rejects them.
        return sum(
            (s.hours_worked for s in self.shifts if s.start is not None and s.end is not None),
            Decimal(0),
        )

    def total_incentives(self) -> Decimal:
        return sum((s.all_incentives for s in self.shifts), Decimal(0))
