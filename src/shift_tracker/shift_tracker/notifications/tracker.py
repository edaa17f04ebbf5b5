from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import NotificationTrigger
from ..schedule.model import ScheduleResult

_MESSAGES = {
    NotificationTrigger.WARNING_10MIN: ("Overtime limit approaching", "Less than 10 minutes to the overtime limit."),
    NotificationTrigger.WARNING_CRITICAL: ("Overtime limit reached", "Overtime limit reached."),
}

_SEPARATOR = "|"


@dataclass(frozen=True)
class Notification:
    record_key: str
    trigger: NotificationTrigger
    title: str
    message: str

    def as_dict(self) -> dict:
        return {
            "record_key": self.record_key,
            "trigger": self.trigger.value,
            "title": self.title,
            "message": self.message,
        }


class NotificationTracker:
    """Session-scoped de-duplication of notification triggers.

    The engine re-emits the same trigger on every tick while the condition
    holds; this keeps the ``(record key, trigger)`` pairs already dispatched so
    each one goes out once per session.
    """

    def __init__(self, sent: Iterable[str] = ()):
        self._sent: set[str] = set(sent)

    @staticmethod
    def _key(record_key: str, trigger: NotificationTrigger) -> str:
        return f"{record_key}{_SEPARATOR}{trigger.value}"

    def collect(self, record_key: str, result: ScheduleResult) -> Optional[Notification]:
        trigger = result.notification_trigger
        if trigger == NotificationTrigger.NONE:
            return None

        key = self._key(record_key, trigger)
        if key in self._sent:
            return None
        self._sent.add(key)

        title, message = _MESSAGES[trigger]
        return Notification(record_key=record_key, trigger=trigger, title=title, message=message)

    def was_sent(self, record_key: str, trigger: NotificationTrigger) -> bool:
        return self._key(record_key, trigger) in self._sent

    def sent_keys(self) -> list[str]:
        """Serializable state (e.g. for a Flask session cookie)."""
        return sorted(self._sent)

    def reset(self) -> None:
        self._sent.clear()
