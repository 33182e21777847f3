"""Helpers shared by the JSON controllers."""

from __future__ import annotations

from functools import wraps
from typing import Any

from flask import jsonify, request, session

from ..core.exceptions import ValidationError


def json_message(message: str, status: int):
    return jsonify({"message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_message("Authentication required", 401)
        return view(*args, **kwargs)

    return wrapper


def current_user_id() -> int:
    return int(session["user_id"])


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
