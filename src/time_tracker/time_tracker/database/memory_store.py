from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from itertools import count
from typing import Any, Iterator


@dataclass
class MemoryStore:
    """Process-local tables used when no MySQL server is available.

    Rows are the same frozen domain objects the MySQL repositories return.
    """

    users: dict[int, Any] = field(default_factory=dict)
    time_entries: dict[int, Any] = field(default_factory=dict)
    entry_index: dict[tuple[int, date], int] = field(default_factory=dict)
    payroll_periods: dict[int, Any] = field(default_factory=dict)
    _sequences: dict[str, Iterator[int]] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        if table not in self._sequences:
            self._sequences[table] = count(1)
        return next(self._sequences[table])
