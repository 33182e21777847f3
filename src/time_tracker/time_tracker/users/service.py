from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

DEMO_USERNAME = "admin"
DEMO_PASSWORD = "admin123"


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    username: str
    name: str
    employee_id: str


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username((username or "").strip())
        if not user:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")

        return SessionUser(
            user_id=user.user_id,
            username=user.username,
            name=user.name,
            employee_id=user.employee_id,
        )


class UserService:
    """Use case: self-registration and lookup."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: int) -> User | None:
        return self._users.get_by_id(user_id)

    def register(self, *, username: str, password: str, name: str, employee_id: str) -> User:
        username = require_non_empty(username, "Username")
        name = require_non_empty(name, "Name")
        employee_id = require_non_empty(employee_id, "Employee ID")
        require_min_length(password, "Password", 6)

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")
        if self._users.get_by_employee_id(employee_id):
            raise ValidationError("Employee ID already exists")

        user = self._users.create_user(
            username=username,
            password_hash=generate_password_hash(password),
            name=name,
            employee_id=employee_id,
        )
        logger.info("Registered user %s (%s)", user.username, user.employee_id)
        return user

    def ensure_demo_user(self) -> User:
        existing = self._users.get_by_username(DEMO_USERNAME)
        if existing:
            return existing
        return self.register(
            username=DEMO_USERNAME,
            password=DEMO_PASSWORD,
            name="Admin User",
            employee_id="EMP001",
        )
