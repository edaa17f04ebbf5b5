from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_known_keys, require_mapping, require_non_empty
from ..core.exceptions import ValidationError

ENTRY = "entry"
LUNCH_OUT = "lunch_out"
LUNCH_IN = "lunch_in"
EXIT_TIME_REAL = "exit_time_real"

TIME_KEYS = (ENTRY, LUNCH_OUT, LUNCH_IN, EXIT_TIME_REAL)


@dataclass(frozen=True)
class DailyRecord:
    """Domain entity: one worker's timestamps for one calendar date.

    ``times`` is sparse: a key is simply absent until the moment is recorded.
    """

    date: str
    times: Mapping[str, str] = field(default_factory=dict)
    profile_id: Optional[int] = None
    collaborator_id: Optional[int] = None
    record_id: Optional[int] = None

    @property
    def key(self) -> str:
        """Identity used to de-duplicate notifications."""
        if self.record_id is not None:
            return f"record:{self.record_id}"
        if self.collaborator_id is not None:
            return f"collaborator:{self.collaborator_id}:{self.date}"
        return f"date:{self.date}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DailyRecord":
        data = require_mapping(data, "record")

        date_s = require_non_empty(data.get("date") or "", "date")
        try:
            parse_iso_date(date_s)
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD")

        raw_times = require_mapping(data.get("times"), "times")
        require_known_keys(raw_times, TIME_KEYS, "times")

        times: dict[str, str] = {}
        for k, v in raw_times.items():
            if v is None or v == "":
                continue
            if not isinstance(v, str):
                raise ValidationError(f"times.{k} must be an HH:MM string")
            times[k] = v

        return cls(
            date=date_s,
            times=times,
            profile_id=_optional_int(data.get("profile_id"), "profile_id"),
            collaborator_id=_optional_int(data.get("collaborator_id"), "collaborator_id"),
            record_id=_optional_int(data.get("id", data.get("record_id")), "record_id"),
        )


def _optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
