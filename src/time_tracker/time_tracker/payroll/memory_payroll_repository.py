from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import PeriodStatus
from ..database.memory_store import MemoryStore
from .model import PayrollPeriod
from .repository import PayrollPeriodRepository

_UPDATABLE = frozenset({"status", "reserve_start_date", "reserve_end_date"})


class InMemoryPayrollPeriodRepository(PayrollPeriodRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def latest_with_status(self, status: PeriodStatus) -> Optional[PayrollPeriod]:
        matches = self.list_with_status(status)
        return max(matches, key=lambda p: p.end_date) if matches else None

    def list_with_status(self, status: PeriodStatus) -> Sequence[PayrollPeriod]:
        status = PeriodStatus(status)
        matches = [p for p in self._store.payroll_periods.values() if p.status == status]
        return sorted(matches, key=lambda p: p.start_date)

    def get_for_date(self, day: date) -> Optional[PayrollPeriod]:
        matches = [p for p in self._store.payroll_periods.values() if p.contains(day)]
        return max(matches, key=lambda p: p.start_date) if matches else None

    def create_period(
        self,
        *,
        start_date: date,
        end_date: date,
        status: PeriodStatus = PeriodStatus.ACTIVE,
        reserve_start_date: Optional[date] = None,
        reserve_end_date: Optional[date] = None,
    ) -> PayrollPeriod:
        period = PayrollPeriod(
            period_id=self._store.next_id("payroll_periods"),
            start_date=start_date,
            end_date=end_date,
            status=PeriodStatus(status),
            reserve_start_date=reserve_start_date,
            reserve_end_date=reserve_end_date,
        )
        self._store.payroll_periods[period.period_id] = period
        return period

    def update_period(self, period_id: int, changes: Mapping[str, Any]) -> Optional[PayrollPeriod]:
        unknown = set(changes) - _UPDATABLE
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        current = self._store.payroll_periods.get(int(period_id))
        if current is None:
            return None

        values = dict(changes)
        if "status" in values:
            values["status"] = PeriodStatus(values["status"])
        updated = replace(current, **values)
        self._store.payroll_periods[updated.period_id] = updated
        return updated
