from __future__ import annotations

from typing import Optional

from .base import WorkPhase


class BeforeLunchPhase(WorkPhase):
    """No lunch departure yet: one continuous block from entry."""

    def worked_minutes(self, *, entry: int, lunch_out: Optional[int], lunch_in: Optional[int], calc_end: int) -> int:
        return max(0, calc_end - entry)
