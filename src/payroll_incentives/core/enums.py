from __future__ import annotations

from enum import Enum


class RemainingPoolPolicy(str, Enum):
    """How the pool offered to secondary shifts is computed."""

    PRIMARY_OFFER = "PRIMARY_OFFER"
    RUNNING_TOTAL = "RUNNING_TOTAL"
