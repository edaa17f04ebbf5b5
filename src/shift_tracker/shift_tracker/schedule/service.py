from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_PROFILE_NAME
from ..core.exceptions import NotFoundError, ValidationError
from ..notifications.tracker import Notification, NotificationTracker
from ..profiles.model import ShiftProfile
from ..profiles.repository import ProfileRepository
from ..records.model import DailyRecord
from .engine import calculate_schedule, validate_lunch_return
from .factory import WorkPhaseFactory
from .model import LunchReturnValidation, ScheduleResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardRow:
    """One line of the day's table: a record, its schedule and any new notification."""

    record_key: str
    result: ScheduleResult
    notification: Optional[Notification] = None

    def as_dict(self) -> dict:
        return {
            "record_key": self.record_key,
            "schedule": self.result.as_dict(),
            "notification": self.notification.as_dict() if self.notification else None,
        }


class ScheduleService:
    """Use case: evaluate daily records against their shift profiles."""

    def __init__(
        self,
        profiles: ProfileRepository,
        *,
        phase_factory: Optional[WorkPhaseFactory] = None,
        default_profile_name: str = DEFAULT_PROFILE_NAME,
    ):
        self._profiles = profiles
        self._factory = phase_factory or WorkPhaseFactory()
        self._default_profile_name = default_profile_name

    def list_profiles(self) -> Sequence[ShiftProfile]:
        return self._profiles.list_all()

    def resolve_profile(self, *, profile_id: Optional[int] = None, profile: Optional[Mapping[str, Any]] = None) -> ShiftProfile:
        # An inline profile wins over a catalog lookup.
        if profile is not None:
            return ShiftProfile.from_dict(profile)

        if profile_id is not None:
            try:
                profile_id = int(profile_id)
            except (TypeError, ValueError):
                raise ValidationError("profile_id must be an integer")
            found = self._profiles.get_by_id(profile_id)
            if not found:
                raise NotFoundError(f"Shift profile {profile_id} not found")
            return found

        found = self._profiles.get_by_name(self._default_profile_name)
        if not found:
            raise ValidationError("No shift profile given and no default profile configured")
        return found

    def evaluate(self, payload: Mapping[str, Any], *, now: Optional[datetime] = None) -> ScheduleResult:
        return self._evaluate(DailyRecord.from_dict(payload), payload, now=now)

    def _evaluate(self, record: DailyRecord, payload: Mapping[str, Any], *, now: Optional[datetime]) -> ScheduleResult:
        profile = self.resolve_profile(profile_id=record.profile_id, profile=payload.get("profile"))
        result = calculate_schedule(record, profile, now=now, phase_factory=self._factory)

        logger.debug(
            "schedule %s profile=%s worked=%s status=%s trigger=%s",
            record.key,
            profile.name,
            result.worked_current,
            result.work_status_type.value,
            result.notification_trigger.value,
        )
        return result

    def evaluate_board(
        self,
        payloads: Sequence[Mapping[str, Any]],
        tracker: NotificationTracker,
        *,
        now: Optional[datetime] = None,
    ) -> list[BoardRow]:
        if not isinstance(payloads, (list, tuple)):
            raise ValidationError("records must be a list")

        rows: list[BoardRow] = []
        for payload in payloads:
            record = DailyRecord.from_dict(payload)
            result = self._evaluate(record, payload, now=now)
            notification = tracker.collect(record.key, result)
            if notification:
                logger.info("notification %s for %s", notification.trigger.value, record.key)
            rows.append(BoardRow(record_key=record.key, result=result, notification=notification))
        return rows

    def check_lunch_return(
        self,
        *,
        lunch_out: Optional[str],
        lunch_in: Optional[str],
        profile_id: Optional[int] = None,
        profile: Optional[Mapping[str, Any]] = None,
    ) -> LunchReturnValidation:
        shift_profile = self.resolve_profile(profile_id=profile_id, profile=profile)
        validation = validate_lunch_return(lunch_out, lunch_in, shift_profile)
        if not validation.valid:
            logger.info("lunch return rejected (%s -> %s): %s", lunch_out, lunch_in, validation.message)
        return validation
