from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """The four daily work-boundary actions, in wire spelling."""

    CLOCK_IN = "clockIn"
    LUNCH_OUT = "lunchOut"
    LUNCH_IN = "lunchIn"
    CLOCK_OUT = "clockOut"


class EntryStatus(str, Enum):
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"
    FLAGGED = "flagged"


class PeriodStatus(str, Enum):
    """Payroll period lifecycle: active -> review (reserve week) -> closed."""

    ACTIVE = "active"
    REVIEW = "review"
    CLOSED = "closed"


class StorageBackend(str, Enum):
    AUTO = "auto"
    MYSQL = "mysql"
    MEMORY = "memory"
