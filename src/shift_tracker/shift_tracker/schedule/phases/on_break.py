from __future__ import annotations

from typing import Optional

from .base import WorkPhase


class OnBreakPhase(WorkPhase):
    """Out for lunch: work stopped accruing at the departure."""

    def worked_minutes(self, *, entry: int, lunch_out: Optional[int], lunch_in: Optional[int], calc_end: int) -> int:
        return max(0, lunch_out - entry)
