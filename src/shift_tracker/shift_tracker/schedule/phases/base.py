from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class WorkPhase(ABC):
    """Strategy Pattern: how net worked minutes accrue at a given point of the day."""

    @abstractmethod
    def worked_minutes(self, *, entry: int, lunch_out: Optional[int], lunch_in: Optional[int], calc_end: int) -> int:
        raise NotImplementedError
