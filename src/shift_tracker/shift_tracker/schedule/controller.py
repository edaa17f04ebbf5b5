from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import now_local, time_to_minutes
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from ..notifications.tracker import NotificationTracker

SESSION_SENT_KEY = "sent_notifications"


def register(app: Flask, container: Container) -> None:
    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("A JSON object body is required")
        return data

    def _pinned_now(data: dict) -> Optional[datetime]:
        """Optional ``now`` (HH:MM) in the body pins the clock for this call."""
        value = data.get("now")
        if value in (None, ""):
            return None
        minutes = time_to_minutes(value)
        if minutes is None:
            raise ValidationError("now must be HH:MM")
        hour, minute = divmod(minutes, 60)
        return datetime.combine(now_local().date(), time(hour, minute))

    def _error(e: Exception, status: int):
        return jsonify({"success": False, "message": str(e)}), status

    @app.route("/healthz", endpoint="healthz")
    def healthz():
        return "OK", 200

    @app.route("/api/profiles", methods=["GET"], endpoint="api_profiles")
    def api_profiles():
        profiles = container.schedule_service.list_profiles()
        return jsonify({
            "success": True,
            "profiles": [p.as_dict() for p in profiles],
            "refresh_interval_seconds": container.refresh_interval_seconds,
        })

    @app.route("/api/schedule", methods=["POST"], endpoint="api_schedule")
    def api_schedule():
        try:
            data = _json_body()
            result = container.schedule_service.evaluate(data, now=_pinned_now(data))
            return jsonify({"success": True, "schedule": result.as_dict()})
        except NotFoundError as e:
            return _error(e, 404)
        except ValidationError as e:
            return _error(e, 400)
        except Exception:
            app.logger.exception("schedule calculation failed")
            return jsonify({"success": False, "message": "Internal error while calculating the schedule"}), 500

    @app.route("/api/schedule/board", methods=["POST"], endpoint="api_schedule_board")
    def api_schedule_board():
        """Evaluate the day's table; notifications go out once per browser session."""
        try:
            data = _json_body()
            tracker = NotificationTracker(session.get(SESSION_SENT_KEY, []))
            if data.get("reset"):
                tracker.reset()

            rows = container.schedule_service.evaluate_board(data.get("records") or [], tracker, now=_pinned_now(data))
            session[SESSION_SENT_KEY] = tracker.sent_keys()

            return jsonify({
                "success": True,
                "rows": [r.as_dict() for r in rows],
                "refresh_interval_seconds": container.refresh_interval_seconds,
            })
        except NotFoundError as e:
            return _error(e, 404)
        except ValidationError as e:
            return _error(e, 400)
        except Exception:
            app.logger.exception("board calculation failed")
            return jsonify({"success": False, "message": "Internal error while calculating the board"}), 500

    @app.route("/api/schedule/lunch-return", methods=["POST"], endpoint="api_lunch_return")
    def api_lunch_return():
        try:
            data = _json_body()
            validation = container.schedule_service.check_lunch_return(
                lunch_out=data.get("lunch_out"),
                lunch_in=data.get("lunch_in"),
                profile_id=data.get("profile_id"),
                profile=data.get("profile"),
            )
            payload = {"success": validation.valid, **validation.as_dict()}
            return jsonify(payload), (200 if validation.valid else 422)
        except NotFoundError as e:
            return _error(e, 404)
        except ValidationError as e:
            return _error(e, 400)
        except Exception:
            app.logger.exception("lunch return validation failed")
            return jsonify({"success": False, "message": "Internal error while validating the lunch return"}), 500
