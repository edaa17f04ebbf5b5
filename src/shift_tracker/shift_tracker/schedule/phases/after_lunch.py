from __future__ import annotations

from typing import Optional

from .base import WorkPhase


class AfterLunchPhase(WorkPhase):
    """Back from lunch: morning segment plus the running afternoon segment."""

    def worked_minutes(self, *, entry: int, lunch_out: Optional[int], lunch_in: Optional[int], calc_end: int) -> int:
        return max(0, lunch_out - entry) + max(0, calc_end - lunch_in)
