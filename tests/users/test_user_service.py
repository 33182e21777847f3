from __future__ import annotations

import pytest

from src.time_tracker.time_tracker.core.exceptions import AuthenticationError, ValidationError
from src.time_tracker.time_tracker.users.memory_user_repository import InMemoryUserRepository
from src.time_tracker.time_tracker.users.service import AuthService, UserService


@pytest.fixture
def users_repo(store):
    return InMemoryUserRepository(store)


def test_register_hashes_password(users_repo):
    user = UserService(users_repo).register(username="jdoe", password="secret1", name="J Doe", employee_id="EMP100")

    assert user.password_hash != "secret1"
    assert users_repo.get_by_username("jdoe") == user


def test_register_rejects_duplicate_username(users_repo):
    svc = UserService(users_repo)
    svc.register(username="jdoe", password="secret1", name="J Doe", employee_id="EMP100")

    with pytest.raises(ValidationError, match="Username already exists"):
        svc.register(username="jdoe", password="secret2", name="Other", employee_id="EMP101")


def test_register_rejects_duplicate_employee_id(users_repo):
    svc = UserService(users_repo)
    svc.register(username="jdoe", password="secret1", name="J Doe", employee_id="EMP100")

    with pytest.raises(ValidationError, match="Employee ID already exists"):
        svc.register(username="asmith", password="secret2", name="A Smith", employee_id="EMP100")


@pytest.mark.parametrize(
    "fields",
    [
        {"username": "", "password": "secret1", "name": "J", "employee_id": "E1"},
        {"username": "j", "password": "short", "name": "J", "employee_id": "E1"},
        {"username": "j", "password": "secret1", "name": "  ", "employee_id": "E1"},
        {"username": "j", "password": "secret1", "name": "J", "employee_id": ""},
    ],
)
def test_register_validates_fields(users_repo, fields):
    with pytest.raises(ValidationError):
        UserService(users_repo).register(**fields)


def test_authenticate(users_repo):
    UserService(users_repo).register(username="jdoe", password="secret1", name="J Doe", employee_id="EMP100")
    auth = AuthService(users_repo)

    s_user = auth.authenticate("jdoe", "secret1")

    assert s_user.name == "J Doe"
    assert s_user.employee_id == "EMP100"


@pytest.mark.parametrize("username,password", [("jdoe", "wrong"), ("nobody", "secret1")])
def test_authenticate_rejects_bad_credentials(users_repo, username, password):
    UserService(users_repo).register(username="jdoe", password="secret1", name="J Doe", employee_id="EMP100")

    with pytest.raises(AuthenticationError, match="Invalid username or password"):
        AuthService(users_repo).authenticate(username, password)


def test_ensure_demo_user_is_idempotent(users_repo):
    svc = UserService(users_repo)

    first = svc.ensure_demo_user()
    second = svc.ensure_demo_user()

    assert first == second
    assert AuthService(users_repo).authenticate("admin", "admin123").user_id == first.user_id
