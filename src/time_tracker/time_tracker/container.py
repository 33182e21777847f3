from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .common.datetime_utils import now_local
from .core.constants import MISSING_PUNCH_CUTOFF_HOUR, PERIOD_LENGTH_DAYS, RESERVE_DAYS
from .core.enums import StorageBackend
from .database.bootstrap import StorageProbe
from .database.connection import DatabaseConnection
from .database.memory_store import MemoryStore
from .payroll.memory_payroll_repository import InMemoryPayrollPeriodRepository
from .payroll.mysql_payroll_repository import MySQLPayrollPeriodRepository
from .payroll.repository import PayrollPeriodRepository
from .payroll.service import PayrollPeriodService
from .timesheets.memory_time_entry_repository import InMemoryTimeEntryRepository
from .timesheets.mysql_time_entry_repository import MySQLTimeEntryRepository
from .timesheets.repository import TimeEntryRepository
from .timesheets.service import PunchService
from .users.memory_user_repository import InMemoryUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    probe: StorageProbe
    clock: Callable[[], datetime]

    users_repo: UserRepository
    entries_repo: TimeEntryRepository
    periods_repo: PayrollPeriodRepository

    auth_service: AuthService
    user_service: UserService
    punch_service: PunchService
    payroll_service: PayrollPeriodService


def build_container(
    *,
    conn: DatabaseConnection,
    probe: StorageProbe,
    clock: Callable[[], datetime] = now_local,
    store: Optional[MemoryStore] = None,
    cutoff_hour: int = MISSING_PUNCH_CUTOFF_HOUR,
    reserve_days: int = RESERVE_DAYS,
    period_length_days: int = PERIOD_LENGTH_DAYS,
) -> Container:
    if probe.backend == StorageBackend.MYSQL:
        users_repo = MySQLUserRepository(conn)
        entries_repo = MySQLTimeEntryRepository(conn)
        periods_repo = MySQLPayrollPeriodRepository(conn)
    else:
        store = store or MemoryStore()
        users_repo = InMemoryUserRepository(store)
        entries_repo = InMemoryTimeEntryRepository(store)
        periods_repo = InMemoryPayrollPeriodRepository(store)

    payroll_service = PayrollPeriodService(
        periods_repo,
        entries_repo,
        reserve_days=reserve_days,
        period_length_days=period_length_days,
    )
    punch_service = PunchService(
        entries_repo,
        payroll_service,
        clock=clock,
        cutoff_hour=cutoff_hour,
    )

    return Container(
        probe=probe,
        clock=clock,
        users_repo=users_repo,
        entries_repo=entries_repo,
        periods_repo=periods_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        punch_service=punch_service,
        payroll_service=payroll_service,
    )
