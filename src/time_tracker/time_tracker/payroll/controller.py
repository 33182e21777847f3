from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, json_message, login_required
from ..core.exceptions import NotFoundError
from ..container import Container
from ..timesheets.model import entry_to_dict
from .model import period_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/current", methods=["GET"], endpoint="payroll_current")
    @login_required
    def payroll_current():
        try:
            summary = container.payroll_service.current_summary(current_user_id(), today=container.clock().date())
        except NotFoundError as e:
            return json_message(str(e), 404)
        except Exception:
            app.logger.exception("Failed to load current payroll period")
            return json_message("Failed to get payroll period", 500)

        return jsonify(
            {
                "period": period_to_dict(summary.period),
                "entries": [entry_to_dict(e) for e in summary.entries],
                "totalHours": str(summary.total_hours),
                "daysWorked": summary.days_worked,
                "daysRemaining": summary.days_remaining,
            }
        )

    @app.route("/api/payroll/previous", methods=["GET"], endpoint="payroll_previous")
    @login_required
    def payroll_previous():
        try:
            summary = container.payroll_service.previous_summary(current_user_id(), today=container.clock().date())
        except Exception:
            app.logger.exception("Failed to load previous payroll period")
            return json_message("Failed to get previous payroll period", 500)

        if summary is None:
            return jsonify(None)

        return jsonify(
            {
                "period": period_to_dict(summary.period),
                "entries": [entry_to_dict(e) for e in summary.entries],
                "totalHours": str(summary.total_hours),
                "inReserveWeek": summary.in_reserve_week,
            }
        )
