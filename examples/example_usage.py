"""Example: use the service layer directly (no Flask).

Evaluates a record for the default profile at a pinned clock and checks a
lunch-return edit, the same calls the HTTP controller makes.
"""

import importlib
from datetime import datetime

from config import get_settings_module

from src.shift_tracker.shift_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(default_profile=settings.DEFAULT_PROFILE)
    service = container.schedule_service

    record = {
        "date": "2026-01-05",
        "times": {"entry": "08:00", "lunch_out": "12:00", "lunch_in": "12:30"},
    }
    result = service.evaluate(record, now=datetime(2026, 1, 5, 13, 0))
    print(result.as_dict())

    print(service.check_lunch_return(lunch_out="12:00", lunch_in="12:40").as_dict())


if __name__ == "__main__":
    main()
