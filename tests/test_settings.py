import importlib

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("test", "config.testing"),
        ("staging", "config.development"),
    ],
)
def test_app_env_selects_settings(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("FLASK_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_default_profile_reads_environment(monkeypatch):
    monkeypatch.setenv("PROFILE_WORK_TARGET_MINUTES", "480")
    monkeypatch.setenv("PROFILE_CONTINUOUS_LIMIT_MINUTES", "")
    base = importlib.import_module("config.config")

    profile = base.default_profile()
    assert profile["work_target_minutes"] == 480
    assert profile["lunch_min_limit_minutes"] == 60
    assert profile["continuous_work_limit_minutes"] is None
