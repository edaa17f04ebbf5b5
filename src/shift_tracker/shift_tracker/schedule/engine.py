"""Schedule calculation engine.

Pure functions over a ``DailyRecord`` and a ``ShiftProfile``. The only outside
input is the wall clock, which callers may pin through ``now``; nothing here
reads storage, logs or keeps state between calls.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import current_clock_minutes, minutes_to_time, time_to_minutes
from ..core.constants import (
    CONTINUOUS_WORK_WARNING_MINUTES,
    CRITICAL_THRESHOLD_MINUTES,
    WARNING_THRESHOLD_MINUTES,
)
from ..core.enums import AlertType, NotificationTrigger, WorkStatus
from ..profiles.model import ShiftProfile
from ..records.model import ENTRY, EXIT_TIME_REAL, LUNCH_IN, LUNCH_OUT, DailyRecord
from .factory import WorkPhaseFactory
from .model import Alert, LunchReturnValidation, ScheduleResult

_default_factory = WorkPhaseFactory()


def notification_trigger_for(minutes_to_limit: int) -> NotificationTrigger:
    """Level-triggered: the same trigger comes back on every tick while in range."""
    if minutes_to_limit <= CRITICAL_THRESHOLD_MINUTES:
        return NotificationTrigger.WARNING_CRITICAL
    if minutes_to_limit <= WARNING_THRESHOLD_MINUTES:
        return NotificationTrigger.WARNING_10MIN
    return NotificationTrigger.NONE


def calculate_schedule(
    record: DailyRecord,
    profile: ShiftProfile,
    *,
    now: Optional[datetime] = None,
    phase_factory: Optional[WorkPhaseFactory] = None,
) -> ScheduleResult:
    times = record.times or {}
    clock = current_clock_minutes(now)
    factory = phase_factory or _default_factory

    entry = time_to_minutes(times.get(ENTRY))
    lunch_out = time_to_minutes(times.get(LUNCH_OUT))
    lunch_in = time_to_minutes(times.get(LUNCH_IN))

    ordering_alert: Optional[Alert] = None
    if lunch_in is not None and lunch_out is None:
        ordering_alert = Alert(AlertType.WARNING, "Lunch return ignored: no lunch departure recorded.")
        lunch_in = None
    elif lunch_in is not None and lunch_in < lunch_out:
        ordering_alert = Alert(AlertType.WARNING, "Lunch return ignored: it is before the departure.")
        lunch_in = None

    actual_lunch: Optional[int] = None
    if lunch_out is not None and lunch_in is not None:
        actual_lunch = lunch_in - lunch_out
    # Until the real break is known the exit is projected with the legal minimum,
    # or with the break so far once it has outrun that minimum.
    if actual_lunch is not None:
        lunch_calc = actual_lunch
    elif lunch_out is not None:
        lunch_calc = max(clock - lunch_out, profile.lunch_min_limit_minutes)
    else:
        lunch_calc = profile.lunch_min_limit_minutes

    estimated_exit: Optional[int] = None
    limit_exit: Optional[int] = None
    exit_range_text: Optional[str] = None
    if entry is not None:
        estimated_exit = entry + profile.work_target_minutes + lunch_calc
        limit_exit = estimated_exit + profile.max_extra_minutes
        exit_range_text = f"{minutes_to_time(estimated_exit)} - {minutes_to_time(limit_exit)}"

    simulated_end = time_to_minutes(times.get(EXIT_TIME_REAL))
    is_simulated = simulated_end is not None
    calc_end = simulated_end if is_simulated else clock

    worked = 0
    worked_current = minutes_to_time(None)
    work_status = WorkStatus.NORMAL
    remaining_text: Optional[str] = None
    exceeded_alert: Optional[Alert] = None
    trigger = NotificationTrigger.NONE
    minutes_to_limit: Optional[int] = None
    approaching_alert: Optional[Alert] = None

    if entry is not None:
        phase = factory.for_lunch(lunch_out=lunch_out, lunch_in=lunch_in)
        worked = phase.worked_minutes(entry=entry, lunch_out=lunch_out, lunch_in=lunch_in, calc_end=calc_end)
        worked_current = minutes_to_time(worked)

        remaining = profile.work_target_minutes - worked
        if remaining > 0:
            remaining_text = f"Remaining: {minutes_to_time(remaining)}"
        else:
            extra = -remaining
            if extra <= profile.max_extra_minutes:
                work_status = WorkStatus.EXTRA
                remaining_text = f"Extra: +{minutes_to_time(extra)}"
            else:
                work_status = WorkStatus.EXCEEDED
                remaining_text = f"Exceeded: +{minutes_to_time(extra)}"
                exceeded_alert = Alert(AlertType.DANGER, "Legal overtime limit exceeded")

        # Hypothetical exits never fire live notifications.
        if not is_simulated:
            minutes_to_limit = profile.work_target_minutes + profile.max_extra_minutes - worked
            trigger = notification_trigger_for(minutes_to_limit)
            if trigger is NotificationTrigger.WARNING_10MIN:
                approaching_alert = Alert(AlertType.WARNING, "Less than 10 min to the overtime limit.")

    lunch_status_text: Optional[str] = None
    is_lunch_violation = False
    if lunch_out is not None and lunch_in is None:
        lunch_remaining = profile.lunch_target_minutes - (clock - lunch_out)
        if lunch_remaining < 0:
            lunch_status_text = f"Exceeded: {minutes_to_time(-lunch_remaining)}"
            is_lunch_violation = True
        else:
            lunch_status_text = f"Remaining: {minutes_to_time(lunch_remaining)}"

    short_lunch_alert: Optional[Alert] = None
    if actual_lunch is not None:
        if 0 < actual_lunch < profile.lunch_min_limit_minutes:
            short_lunch_alert = Alert(AlertType.DANGER, f"Lunch break too short ({minutes_to_time(actual_lunch)})")
            lunch_status_text = "Short break"
            is_lunch_violation = True
        elif actual_lunch >= profile.lunch_min_limit_minutes:
            lunch_status_text = "OK"

    time_to_lunch_limit: Optional[str] = None
    continuous_alert: Optional[Alert] = None
    limit = profile.continuous_work_limit_minutes
    if limit is not None and entry is not None and lunch_out is None:
        until = entry + limit - calc_end
        if until > 0:
            time_to_lunch_limit = f"Lunch due in: {minutes_to_time(until)}"
            if until < CONTINUOUS_WORK_WARNING_MINUTES:
                continuous_alert = Alert(AlertType.WARNING, f"Mandatory lunch break due in {minutes_to_time(until)}.")
        else:
            time_to_lunch_limit = f"Continuous limit exceeded: +{minutes_to_time(-until)}"
            continuous_alert = Alert(AlertType.DANGER, f"Worked more than {minutes_to_time(limit)} without a break")

    # Append order is part of the contract.
    alerts = tuple(
        a for a in (ordering_alert, short_lunch_alert, exceeded_alert, approaching_alert, continuous_alert) if a
    )

    return ScheduleResult(
        exit_range_text=exit_range_text,
        estimated_exit=minutes_to_time(estimated_exit) if estimated_exit is not None else None,
        limit_exit=minutes_to_time(limit_exit) if limit_exit is not None else None,
        worked_current=worked_current,
        worked_minutes=worked,
        work_remaining_text=remaining_text,
        work_status_type=work_status,
        lunch_duration=minutes_to_time(actual_lunch) if actual_lunch is not None else None,
        actual_lunch_duration=actual_lunch,
        lunch_status_text=lunch_status_text,
        is_lunch_violation=is_lunch_violation,
        time_to_lunch_limit=time_to_lunch_limit,
        is_simulated=is_simulated,
        alerts=alerts,
        notification_trigger=trigger,
        minutes_to_limit=minutes_to_limit,
    )


def _duration_label(minutes: int) -> str:
    hours, rest = divmod(minutes, 60)
    if not hours:
        return f"{rest}min"
    return f"{hours}h{rest:02d}" if rest else f"{hours}h"


def validate_lunch_return(lunch_out: Optional[str], lunch_in: Optional[str], profile: ShiftProfile) -> LunchReturnValidation:
    """Check a lunch-return edit before it is saved.

    Cheaper than a full recomputation; called on the edit itself because an
    invalid return has to block the edit, not just annotate it.
    """
    out_m = time_to_minutes(lunch_out)
    if out_m is None:
        return LunchReturnValidation(valid=False, message="Register the lunch departure first.")

    in_m = time_to_minutes(lunch_in)
    if in_m is None:
        return LunchReturnValidation(valid=False, message="Return time is invalid.")

    if in_m < out_m:
        return LunchReturnValidation(valid=False, message="Return cannot be before departure.")

    duration = in_m - out_m
    if duration < profile.lunch_min_limit_minutes:
        limit_label = _duration_label(profile.lunch_min_limit_minutes)
        return LunchReturnValidation(
            valid=True,
            warning=True,
            message=f"Break of only {duration} min is below the {limit_label} minimum. Confirm?",
        )
    return LunchReturnValidation(valid=True)
