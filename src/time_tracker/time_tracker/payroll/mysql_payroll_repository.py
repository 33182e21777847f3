from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import PeriodStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PayrollPeriod
from .repository import PayrollPeriodRepository

_COLUMNS = "period_id, start_date, end_date, status, reserve_start_date, reserve_end_date"
_UPDATABLE = frozenset({"status", "reserve_start_date", "reserve_end_date"})


def _to_period(r: dict) -> PayrollPeriod:
    return PayrollPeriod(
        period_id=int(r["period_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        status=PeriodStatus(r["status"]),
        reserve_start_date=r.get("reserve_start_date"),
        reserve_end_date=r.get("reserve_end_date"),
    )


class MySQLPayrollPeriodRepository(PayrollPeriodRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def latest_with_status(self, status: PeriodStatus) -> Optional[PayrollPeriod]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payroll_periods WHERE status=%s ORDER BY end_date DESC LIMIT 1",
                (PeriodStatus(status).value,),
            )
            r = fetchone(cur)
            return _to_period(r) if r else None

    def list_with_status(self, status: PeriodStatus) -> Sequence[PayrollPeriod]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payroll_periods WHERE status=%s ORDER BY start_date ASC",
                (PeriodStatus(status).value,),
            )
            return [_to_period(r) for r in fetchall(cur)]

    def get_for_date(self, day: date) -> Optional[PayrollPeriod]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM payroll_periods
                WHERE start_date <= %s AND end_date >= %s
                ORDER BY start_date DESC
                LIMIT 1
                """,
                (day, day),
            )
            r = fetchone(cur)
            return _to_period(r) if r else None

    def create_period(
        self,
        *,
        start_date: date,
        end_date: date,
        status: PeriodStatus = PeriodStatus.ACTIVE,
        reserve_start_date: Optional[date] = None,
        reserve_end_date: Optional[date] = None,
    ) -> PayrollPeriod:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_periods(start_date, end_date, status, reserve_start_date, reserve_end_date)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (start_date, end_date, PeriodStatus(status).value, reserve_start_date, reserve_end_date),
            )
            return PayrollPeriod(
                period_id=int(cur.lastrowid),
                start_date=start_date,
                end_date=end_date,
                status=PeriodStatus(status),
                reserve_start_date=reserve_start_date,
                reserve_end_date=reserve_end_date,
            )

    def update_period(self, period_id: int, changes: Mapping[str, Any]) -> Optional[PayrollPeriod]:
        unknown = set(changes) - _UPDATABLE
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        with db_cursor(self._conn_factory) as (_, cur):
            if changes:
                fields = sorted(changes)
                params = [PeriodStatus(changes[f]).value if f == "status" else changes[f] for f in fields]
                cur.execute(
                    f"UPDATE payroll_periods SET {', '.join(f'{f}=%s' for f in fields)} WHERE period_id=%s",
                    (*params, int(period_id)),
                )
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_periods WHERE period_id=%s", (int(period_id),))
            r = fetchone(cur)
            return _to_period(r) if r else None
