from __future__ import annotations

from datetime import date, datetime

import pytest

from src.time_tracker.time_tracker.database.memory_store import MemoryStore
from src.time_tracker.time_tracker.payroll.memory_payroll_repository import InMemoryPayrollPeriodRepository
from src.time_tracker.time_tracker.payroll.service import PayrollPeriodService
from src.time_tracker.time_tracker.timesheets.memory_time_entry_repository import InMemoryTimeEntryRepository
from src.time_tracker.time_tracker.timesheets.model import TimeEntry


@pytest.fixture
def fixed_now() -> datetime:
    # Tuesday morning, well before the missing-punch cutoff
    return datetime(2026, 2, 3, 10, 0, 0)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def entries_repo(store) -> InMemoryTimeEntryRepository:
    return InMemoryTimeEntryRepository(store)


@pytest.fixture
def periods_repo(store) -> InMemoryPayrollPeriodRepository:
    return InMemoryPayrollPeriodRepository(store)


@pytest.fixture
def payroll_service(periods_repo, entries_repo) -> PayrollPeriodService:
    return PayrollPeriodService(periods_repo, entries_repo)


@pytest.fixture
def make_entry():
    def _make(work_date: date = date(2026, 2, 3), **fields) -> TimeEntry:
        return TimeEntry(entry_id=1, user_id=1, work_date=work_date, **fields)

    return _make
