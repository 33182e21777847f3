from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..database.memory_store import MemoryStore
from .model import TimeEntry
from .repository import UPDATABLE_FIELDS, TimeEntryRepository


class InMemoryTimeEntryRepository(TimeEntryRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def get_entry(self, user_id: int, work_date: date) -> Optional[TimeEntry]:
        entry_id = self._store.entry_index.get((int(user_id), work_date))
        return self._store.time_entries.get(entry_id) if entry_id else None

    def create_entry(self, *, user_id: int, work_date: date, is_locked: bool = False) -> TimeEntry:
        key = (int(user_id), work_date)
        if key in self._store.entry_index:
            raise ValueError(f"Time entry already exists for user {user_id} on {work_date}")

        stamp = now_local()
        entry = TimeEntry(
            entry_id=self._store.next_id("time_entries"),
            user_id=int(user_id),
            work_date=work_date,
            is_locked=bool(is_locked),
            created_at=stamp,
            updated_at=stamp,
        )
        self._store.time_entries[entry.entry_id] = entry
        self._store.entry_index[key] = entry.entry_id
        return entry

    def update_entry(self, entry_id: int, changes: Mapping[str, Any]) -> Optional[TimeEntry]:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        current = self._store.time_entries.get(int(entry_id))
        if current is None:
            return None

        values = dict(changes)
        if "flags" in values:
            values["flags"] = tuple(values["flags"])
        updated = replace(current, **values, updated_at=now_local())
        self._store.time_entries[updated.entry_id] = updated
        return updated

    def list_for_user(
        self,
        user_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> Sequence[TimeEntry]:
        items = [
            e
            for e in self._store.time_entries.values()
            if e.user_id == int(user_id)
            and (start is None or e.work_date >= start)
            and (end is None or e.work_date <= end)
        ]
        items.sort(key=lambda e: e.work_date, reverse=True)
        return items[:limit] if limit is not None else items

    def lock_between(self, start: date, end: date) -> int:
        changed = 0
        for entry in list(self._store.time_entries.values()):
            if start <= entry.work_date <= end and not entry.is_locked:
                self.update_entry(entry.entry_id, {"is_locked": True})
                changed += 1
        return changed
