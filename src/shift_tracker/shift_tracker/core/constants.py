"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TIME_PLACEHOLDER = "--:--"

DEFAULT_REFRESH_INTERVAL_SECONDS = 60

# Notification thresholds, in minutes left before the legal overtime ceiling.
WARNING_THRESHOLD_MINUTES = 10
CRITICAL_THRESHOLD_MINUTES = 1

# Continuous-work warning starts this many minutes before the limit.
CONTINUOUS_WORK_WARNING_MINUTES = 60

DEFAULT_PROFILE_NAME = "6x1"
