from __future__ import annotations

from typing import Optional

from ..database.memory_store import MemoryStore
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._store.users.get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._store.users.values() if u.username == username), None)

    def get_by_employee_id(self, employee_id: str) -> Optional[User]:
        return next((u for u in self._store.users.values() if u.employee_id == employee_id), None)

    def create_user(self, *, username: str, password_hash: str, name: str, employee_id: str) -> User:
        user = User(
            user_id=self._store.next_id("users"),
            username=username,
            password_hash=password_hash,
            name=name,
            employee_id=employee_id,
        )
        self._store.users[user.user_id] = user
        return user
