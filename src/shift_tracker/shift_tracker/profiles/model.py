from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_mapping, require_non_negative_int
from ..core.constants import DEFAULT_PROFILE_NAME
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ShiftProfile:
    """Domain entity: daily work-time rules for one labor-shift type (e.g. "6x1").

    All durations are in minutes. ``continuous_work_limit_minutes`` is the longest
    stretch allowed before the lunch break; ``None`` turns that rule off.
    """

    work_target_minutes: int
    lunch_target_minutes: int
    lunch_min_limit_minutes: int
    max_extra_minutes: int
    continuous_work_limit_minutes: Optional[int] = None
    name: str = DEFAULT_PROFILE_NAME
    profile_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShiftProfile":
        """Build a profile from an external payload, enforcing the invariants."""
        data = require_mapping(data, "profile")
        try:
            work_target = require_non_negative_int(data["work_target_minutes"], "work_target_minutes")
            lunch_target = require_non_negative_int(data["lunch_target_minutes"], "lunch_target_minutes")
            lunch_min = require_non_negative_int(data["lunch_min_limit_minutes"], "lunch_min_limit_minutes")
            max_extra = require_non_negative_int(data["max_extra_minutes"], "max_extra_minutes")
        except KeyError as e:
            raise ValidationError(f"profile is missing {e.args[0]}")

        if work_target <= 0:
            raise ValidationError("work_target_minutes must be greater than zero")

        continuous = data.get("continuous_work_limit_minutes")
        if continuous is not None:
            continuous = require_non_negative_int(continuous, "continuous_work_limit_minutes")

        profile_id = data.get("profile_id")
        if profile_id is not None:
            profile_id = require_non_negative_int(profile_id, "profile_id")
        return cls(
            work_target_minutes=work_target,
            lunch_target_minutes=lunch_target,
            lunch_min_limit_minutes=lunch_min,
            max_extra_minutes=max_extra,
            continuous_work_limit_minutes=continuous,
            name=str(data.get("name") or DEFAULT_PROFILE_NAME),
            profile_id=profile_id,
        )

    def as_dict(self) -> dict:
        return asdict(self)
