from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .core.constants import DEFAULT_REFRESH_INTERVAL_SECONDS
from .profiles.model import ShiftProfile
from .profiles.repository import InMemoryProfileRepository
from .schedule.factory import WorkPhaseFactory
from .schedule.service import ScheduleService


@dataclass(frozen=True)
class Container:
    profiles_repo: InMemoryProfileRepository

    schedule_service: ScheduleService

    refresh_interval_seconds: int


def build_container(
    *,
    default_profile: Mapping[str, Any],
    extra_profiles: Sequence[Mapping[str, Any]] = (),
    refresh_interval_seconds: int = DEFAULT_REFRESH_INTERVAL_SECONDS,
) -> Container:
    default = ShiftProfile.from_dict(default_profile)

    profiles_repo = InMemoryProfileRepository([default])
    for p in extra_profiles:
        profiles_repo.add(ShiftProfile.from_dict(p))

    schedule_service = ScheduleService(
        profiles_repo,
        phase_factory=WorkPhaseFactory(),
        default_profile_name=default.name,
    )

    return Container(
        profiles_repo=profiles_repo,
        schedule_service=schedule_service,
        refresh_interval_seconds=int(refresh_interval_seconds),
    )
