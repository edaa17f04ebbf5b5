from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask
from flask.logging import default_handler

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_REFRESH_INTERVAL_SECONDS
from .schedule.controller import register as register_schedule

_PACKAGE_LOGGER = __name__.rsplit(".", 1)[0]


def _configure_logging(app: Flask) -> None:
    level = str(app.config.get("LOG_LEVEL") or "INFO").upper()
    app.logger.setLevel(level)

    # Service-layer loggers share Flask's handler.
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(level)
    if default_handler not in package_logger.handlers:
        package_logger.addHandler(default_handler)


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    app.config["DEFAULT_PROFILE"] = dict(getattr(settings, "DEFAULT_PROFILE"))
    app.config["EXTRA_PROFILES"] = list(getattr(settings, "EXTRA_PROFILES", []))
    app.config["REFRESH_INTERVAL_SECONDS"] = int(
        getattr(settings, "REFRESH_INTERVAL_SECONDS", DEFAULT_REFRESH_INTERVAL_SECONDS)
    )
    if test_config:
        app.config.update(test_config)

    _configure_logging(app)

    container = build_container(
        default_profile=app.config["DEFAULT_PROFILE"],
        extra_profiles=app.config["EXTRA_PROFILES"],
        refresh_interval_seconds=app.config["REFRESH_INTERVAL_SECONDS"],
    )
    app.logger.info(
        "[shift-tracker] settings=%s profiles=%s refresh=%ss",
        settings_module,
        ", ".join(p.name for p in container.profiles_repo.list_all()),
        container.refresh_interval_seconds,
    )

    register_schedule(app, container)

    return app
