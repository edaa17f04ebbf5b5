from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import TIME_PLACEHOLDER
from ..core.enums import AlertType, NotificationTrigger, WorkStatus


@dataclass(frozen=True)
class Alert:
    type: AlertType
    message: str

    def as_dict(self) -> dict:
        return {"type": self.type.value, "message": self.message}


@dataclass(frozen=True)
class ScheduleResult:
    """Read-model: snapshot of a day's schedule at the instant it was computed.

    Recomputed on every edit and every tick; never persisted.
    """

    exit_range_text: Optional[str] = None
    estimated_exit: Optional[str] = None
    limit_exit: Optional[str] = None
    worked_current: str = TIME_PLACEHOLDER
    worked_minutes: int = 0
    work_remaining_text: Optional[str] = None
    work_status_type: WorkStatus = WorkStatus.NORMAL
    lunch_duration: Optional[str] = None
    actual_lunch_duration: Optional[int] = None
    lunch_status_text: Optional[str] = None
    is_lunch_violation: bool = False
    time_to_lunch_limit: Optional[str] = None
    is_simulated: bool = False
    alerts: tuple[Alert, ...] = ()
    notification_trigger: NotificationTrigger = NotificationTrigger.NONE
    minutes_to_limit: Optional[int] = None

    def as_dict(self) -> dict:
        return {
            "exit_range_text": self.exit_range_text,
            "estimated_exit": self.estimated_exit,
            "limit_exit": self.limit_exit,
            "worked_current": self.worked_current,
            "worked_minutes": self.worked_minutes,
            "work_remaining_text": self.work_remaining_text,
            "work_status_type": self.work_status_type.value,
            "lunch_duration": self.lunch_duration,
            "actual_lunch_duration": self.actual_lunch_duration,
            "lunch_status_text": self.lunch_status_text,
            "is_lunch_violation": self.is_lunch_violation,
            "time_to_lunch_limit": self.time_to_lunch_limit,
            "is_simulated": self.is_simulated,
            "alerts": [a.as_dict() for a in self.alerts],
            "notification_trigger": self.notification_trigger.value,
            "minutes_to_limit": self.minutes_to_limit,
        }


@dataclass(frozen=True)
class LunchReturnValidation:
    """Outcome of checking a lunch-return edit before it is saved.

    ``valid=False`` means the edit must be rejected; ``warning=True`` means it
    may be saved only after the user confirms.
    """

    valid: bool
    warning: bool = False
    message: Optional[str] = None

    def as_dict(self) -> dict:
        return {"valid": self.valid, "warning": self.warning, "message": self.message}
