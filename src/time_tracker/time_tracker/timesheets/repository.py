from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import TimeEntry

# Columns a caller may change after creation.
UPDATABLE_FIELDS = frozenset(
    {"clock_in", "lunch_out", "lunch_in", "clock_out", "total_hours", "status", "flags", "is_locked"}
)


class TimeEntryRepository(Protocol):
    """Storage collaborator for time entries.

    Note (DIP): services depend on this interface, never on a concrete backend.
    """

    def get_entry(self, user_id: int, work_date: date) -> Optional[TimeEntry]:
        raise NotImplementedError

    def create_entry(self, *, user_id: int, work_date: date, is_locked: bool = False) -> TimeEntry:
        raise NotImplementedError

    def update_entry(self, entry_id: int, changes: Mapping[str, Any]) -> Optional[TimeEntry]:
        raise NotImplementedError

    def list_for_user(
        self,
        user_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> Sequence[TimeEntry]:
        """Entries newest first, optionally bounded to [start, end]."""

        raise NotImplementedError

    def lock_between(self, start: date, end: date) -> int:
        """Lock every entry dated within [start, end]; returns how many changed."""

        raise NotImplementedError
