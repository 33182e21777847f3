from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.http import current_user_id, json_body, json_message, login_required
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from .model import user_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        try:
            data = json_body()
            s_user = container.auth_service.authenticate(
                str(data.get("username") or ""),
                str(data.get("password") or ""),
            )
        except ValidationError as e:
            return json_message(str(e), 400)
        except AuthenticationError as e:
            return json_message(str(e), 401)
        except Exception:
            app.logger.exception("Login failed")
            return json_message("Login failed", 500)

        session.clear()
        session.permanent = True
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name

        user = {"id": s_user.user_id, "username": s_user.username, "name": s_user.name, "employeeId": s_user.employee_id}
        return jsonify({"user": user, "message": "Login successful"})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logout successful"})

    @app.route("/api/auth/register", methods=["POST"], endpoint="register_user")
    def register_user():
        try:
            data = json_body()
            user = container.user_service.register(
                username=str(data.get("username") or ""),
                password=str(data.get("password") or ""),
                name=str(data.get("name") or ""),
                employee_id=str(data.get("employeeId") or ""),
            )
        except ValidationError as e:
            return json_message(str(e), 400)
        except Exception:
            app.logger.exception("Registration failed")
            return json_message("Failed to create user", 500)

        return jsonify({"user": user_to_dict(user)}), 201

    @app.route("/api/user/current", methods=["GET"], endpoint="current_user")
    @login_required
    def current_user():
        user = container.user_service.get(current_user_id())
        if user is None:
            session.clear()
            return json_message("Authentication required", 401)
        return jsonify(user_to_dict(user))
