import os

from .config import LOG_LEVEL, REFRESH_INTERVAL_SECONDS, default_profile

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEFAULT_PROFILE = default_profile()
EXTRA_PROFILES = []

DEBUG = False
