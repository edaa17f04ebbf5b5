from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .phases.after_lunch import AfterLunchPhase
from .phases.base import WorkPhase
from .phases.before_lunch import BeforeLunchPhase
from .phases.on_break import OnBreakPhase


@dataclass
class WorkPhaseFactory:
    """Factory Pattern: choose the worked-time strategy from the lunch timestamps."""

    def for_lunch(self, *, lunch_out: Optional[int], lunch_in: Optional[int]) -> WorkPhase:
        if lunch_out is None:
            return BeforeLunchPhase()
        if lunch_in is None:
            return OnBreakPhase()
        return AfterLunchPhase()
