from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, json_body, json_message, login_required
from ..core.exceptions import LockedPeriodError, ValidationError
from ..container import Container
from .model import PunchRequest, entry_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time-entries/today", methods=["GET"], endpoint="today_entry")
    @login_required
    def today_entry():
        try:
            view = container.punch_service.today_view(current_user_id())
        except Exception:
            app.logger.exception("Failed to load today's entry")
            return json_message("Failed to get time entry", 500)

        return jsonify(
            {
                "entry": entry_to_dict(view.entry),
                "activity": view.activity,
                "workedHours": str(view.worked_hours),
            }
        )

    @app.route("/api/time-entries/punch", methods=["POST"], endpoint="punch")
    @login_required
    def punch():
        try:
            punch_request = PunchRequest.from_payload(json_body())
            entry = container.punch_service.record_punch(current_user_id(), punch_request)
        except (ValidationError, LockedPeriodError) as e:
            return json_message(str(e), 400)
        except Exception:
            app.logger.exception("Failed to record punch")
            return json_message("Failed to record punch", 500)

        return jsonify(entry_to_dict(entry))

    @app.route("/api/time-entries/recent", methods=["GET"], endpoint="recent_entries")
    @login_required
    def recent_entries():
        try:
            entries = container.punch_service.recent_entries(current_user_id())
        except Exception:
            app.logger.exception("Failed to load recent entries")
            return json_message("Failed to get recent activity", 500)

        return jsonify([entry_to_dict(e) for e in entries])
