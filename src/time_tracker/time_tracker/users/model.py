from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    """Domain entity: an employee who punches time.

    Note: plain data object, no DB access code here.
    """

    user_id: int
    username: str
    password_hash: str
    name: str
    employee_id: str


def user_to_dict(user: User) -> dict[str, Any]:
    """Public JSON shape; never includes the password hash."""

    return {
        "id": user.user_id,
        "username": user.username,
        "name": user.name,
        "employeeId": user.employee_id,
    }
