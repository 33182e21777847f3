from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _to_user(r: dict) -> User:
    return User(
        user_id=int(r["user_id"]),
        username=r["username"],
        password_hash=r["password_hash"],
        name=r["name"],
        employee_id=r["employee_id"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value: object) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT user_id, username, password_hash, name, employee_id FROM users WHERE {column}=%s",
                (value,),
            )
            r = fetchone(cur)
            return _to_user(r) if r else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get_one("user_id", int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return self._get_one("username", username)

    def get_by_employee_id(self, employee_id: str) -> Optional[User]:
        return self._get_one("employee_id", employee_id)

    def create_user(self, *, username: str, password_hash: str, name: str, employee_id: str) -> User:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, password_hash, name, employee_id)
                VALUES(%s,%s,%s,%s)
                """,
                (username, password_hash, name, employee_id),
            )
            return User(
                user_id=int(cur.lastrowid),
                username=username,
                password_hash=password_hash,
                name=name,
                employee_id=employee_id,
            )
