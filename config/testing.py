SECRET_KEY = "test-secret"

# Fixed values so tests do not depend on the environment
DEFAULT_PROFILE = {
    "name": "6x1",
    "work_target_minutes": 440,
    "lunch_target_minutes": 100,
    "lunch_min_limit_minutes": 60,
    "max_extra_minutes": 120,
    "continuous_work_limit_minutes": 360,
}
EXTRA_PROFILES = [
    {
        "name": "5x2",
        "work_target_minutes": 480,
        "lunch_target_minutes": 60,
        "lunch_min_limit_minutes": 60,
        "max_extra_minutes": 120,
    },
]

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
REFRESH_INTERVAL_SECONDS = 60
