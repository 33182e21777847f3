from __future__ import annotations

import json
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import EntryStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TimeEntry
from .repository import UPDATABLE_FIELDS, TimeEntryRepository

_COLUMNS = """
    entry_id, user_id, work_date, clock_in, lunch_out, lunch_in, clock_out,
    total_hours, status, flags, is_locked, created_at, updated_at
"""


def _to_entry(r: dict) -> TimeEntry:
    return TimeEntry(
        entry_id=int(r["entry_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        clock_in=r.get("clock_in"),
        lunch_out=r.get("lunch_out"),
        lunch_in=r.get("lunch_in"),
        clock_out=r.get("clock_out"),
        total_hours=Decimal(str(r.get("total_hours") or "0.0")),
        status=EntryStatus(r["status"]),
        flags=tuple(json.loads(r.get("flags") or "[]")),
        is_locked=bool(r.get("is_locked")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _to_column(field: str, value: Any) -> Any:
    if field == "flags":
        return json.dumps(list(value))
    if field == "status":
        return EntryStatus(value).value
    if field == "total_hours":
        return str(value)
    if field == "is_locked":
        return 1 if value else 0
    return value


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_by_id(self, cur, entry_id: int) -> Optional[TimeEntry]:
        cur.execute(f"SELECT {_COLUMNS} FROM time_entries WHERE entry_id=%s", (int(entry_id),))
        r = fetchone(cur)
        return _to_entry(r) if r else None

    def get_entry(self, user_id: int, work_date: date) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM time_entries WHERE user_id=%s AND work_date=%s",
                (int(user_id), work_date),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def create_entry(self, *, user_id: int, work_date: date, is_locked: bool = False) -> TimeEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(user_id, work_date, total_hours, status, flags, is_locked)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), work_date, "0.0", EntryStatus.INCOMPLETE.value, "[]", 1 if is_locked else 0),
            )
            entry = self._get_by_id(cur, int(cur.lastrowid))
            if entry is None:
                raise RuntimeError("Created time entry could not be read back")
            return entry

    def update_entry(self, entry_id: int, changes: Mapping[str, Any]) -> Optional[TimeEntry]:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        with db_cursor(self._conn_factory) as (_, cur):
            if changes:
                fields = sorted(changes)
                assignments = ", ".join(f"{f}=%s" for f in fields)
                params = [_to_column(f, changes[f]) for f in fields]
                cur.execute(
                    f"UPDATE time_entries SET {assignments}, updated_at=CURRENT_TIMESTAMP WHERE entry_id=%s",
                    (*params, int(entry_id)),
                )
            return self._get_by_id(cur, entry_id)

    def list_for_user(
        self,
        user_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> Sequence[TimeEntry]:
        clauses = ["user_id=%s"]
        params: list[object] = [int(user_id)]

        if start is not None:
            clauses.append("work_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("work_date <= %s")
            params.append(end)

        sql = f"SELECT {_COLUMNS} FROM time_entries WHERE {' AND '.join(clauses)} ORDER BY work_date DESC"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_entry(r) for r in fetchall(cur)]

    def lock_between(self, start: date, end: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_entries
                SET is_locked=1, updated_at=CURRENT_TIMESTAMP
                WHERE work_date BETWEEN %s AND %s AND is_locked=0
                """,
                (start, end),
            )
            return int(cur.rowcount)
