from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Protocol, Sequence

from .model import ShiftProfile


class ProfileRepository(Protocol):
    def list_all(self) -> Sequence[ShiftProfile]:
        raise NotImplementedError

    def get_by_id(self, profile_id: int) -> Optional[ShiftProfile]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[ShiftProfile]:
        raise NotImplementedError


class InMemoryProfileRepository:
    """Profile catalog held in memory.

    Profiles get sequential ids in insertion order; names are unique.
    """

    def __init__(self, profiles: Iterable[ShiftProfile] = ()):
        self._by_id: dict[int, ShiftProfile] = {}
        self._next_id = 1
        for p in profiles:
            self.add(p)

    def add(self, profile: ShiftProfile) -> ShiftProfile:
        if self.get_by_name(profile.name):
            raise ValueError(f"profile {profile.name!r} already exists")

        profile_id = profile.profile_id or self._next_id
        stored = replace(profile, profile_id=profile_id)
        self._by_id[profile_id] = stored
        self._next_id = max(self._next_id, profile_id + 1)
        return stored

    def list_all(self) -> Sequence[ShiftProfile]:
        return [self._by_id[k] for k in sorted(self._by_id)]

    def get_by_id(self, profile_id: int) -> Optional[ShiftProfile]:
        return self._by_id.get(int(profile_id))

    def get_by_name(self, name: str) -> Optional[ShiftProfile]:
        for p in self._by_id.values():
            if p.name == name:
                return p
        return None
