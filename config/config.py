import os


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


def default_profile() -> dict:
    """Default shift profile (6x1: 7h20 work, 1h40 standard lunch, 1h minimum, 2h overtime cap)."""
    continuous = os.environ.get("PROFILE_CONTINUOUS_LIMIT_MINUTES", "360")
    return {
        "name": os.environ.get("PROFILE_NAME", "6x1"),
        "work_target_minutes": _env_int("PROFILE_WORK_TARGET_MINUTES", 440),
        "lunch_target_minutes": _env_int("PROFILE_LUNCH_TARGET_MINUTES", 100),
        "lunch_min_limit_minutes": _env_int("PROFILE_LUNCH_MIN_LIMIT_MINUTES", 60),
        "max_extra_minutes": _env_int("PROFILE_MAX_EXTRA_MINUTES", 120),
        # Empty value turns the continuous-work rule off
        "continuous_work_limit_minutes": int(continuous) if continuous else None,
    }


REFRESH_INTERVAL_SECONDS = _env_int("REFRESH_INTERVAL_SECONDS", 60)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
