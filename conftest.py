from __future__ import annotations

from datetime import datetime

import pytest

from src.shift_tracker.shift_tracker.profiles.model import ShiftProfile


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2026, 1, 5, 8, 0, 0)


@pytest.fixture()
def profile() -> ShiftProfile:
    """6x1 profile: 7h20 work, 1h40 standard lunch, 1h minimum lunch, 2h overtime cap."""
    return ShiftProfile(
        work_target_minutes=440,
        lunch_target_minutes=100,
        lunch_min_limit_minutes=60,
        max_extra_minutes=120,
    )


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.shift_tracker.shift_tracker.main import create_app

    return create_app()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client
