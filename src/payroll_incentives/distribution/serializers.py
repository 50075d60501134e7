from __future__ import annotations

import uuid
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime
from ..common.number_utils import format_decimal, to_decimal
from ..core.exceptions import ValidationError
from ..rules.model import DistributionRules
from ..shifts.model import Shift
from .model import DistributionResult


def shift_from_dict(data: dict) -> Shift:
    if not isinstance(data, dict):
        raise ValidationError("Each shift must be an object")

    start = data.get("start")
    end = data.get("end")
    shift = Shift(
        start=parse_iso_datetime(start) if start else None,
        end=parse_iso_datetime(end) if end else None,
        incentive=to_decimal(data.get("incentive") or 0, "incentive"),
        distributed_incentive=to_decimal(data.get("distributed_incentive") or 0, "distributed_incentive"),
    )
    if data.get("id"):
        try:
            shift.id = uuid.UUID(str(data["id"]))
        except ValueError as e:
            raise ValidationError(f"Invalid shift id: {data['id']!r}") from e
    return shift


def shift_to_dict(shift: Shift) -> dict:
    return {
        "id": str(shift.id),
        "start": shift.start.isoformat() if shift.start else None,
        "end": shift.end.isoformat() if shift.end else None,
        "incentive": format_decimal(shift.incentive),
        "distributed_incentive": format_decimal(shift.distributed_incentive),
        "all_incentives": format_decimal(shift.all_incentives),
    }


def rules_from_dict(data: Optional[dict]) -> Optional[DistributionRules]:
    if not data:
        return None
    if not isinstance(data, dict):
        raise ValidationError("rules must be an object")
    return DistributionRules(
        data.get("rate_options") or (),
        break_threshold_hours=data.get("break_threshold_hours"),
        break_duration_minutes=data.get("break_duration_minutes"),
    )


def result_to_dict(result: DistributionResult, shifts: list[Shift]) -> dict:
    return {
        "success": result.succeeded,
        "errors": list(result.errors),
        "total_distributed": format_decimal(result.total_distributed),
        "credited_shift_ids": [str(s.id) for s in result.shift_results],
        "shifts": [shift_to_dict(s) for s in shifts],
    }
