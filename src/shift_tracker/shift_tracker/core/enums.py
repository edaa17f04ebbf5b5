from __future__ import annotations

from enum import Enum


class WorkStatus(str, Enum):
    """Situation of the day's net work against the profile target."""

    NORMAL = "normal"
    EXTRA = "extra"
    EXCEEDED = "exceeded"


class AlertType(str, Enum):
    """Severity shown next to a record."""

    WARNING = "warning"
    DANGER = "danger"


class NotificationTrigger(str, Enum):
    """Which notification, if any, the caller should dispatch."""

    NONE = "none"
    WARNING_10MIN = "warning_10min"
    WARNING_CRITICAL = "warning_critical"
