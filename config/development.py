import os

from .config import REFRESH_INTERVAL_SECONDS, default_profile

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEFAULT_PROFILE = default_profile()
EXTRA_PROFILES = []

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
