"""Punch engine: sequence validation, missing-punch detection and status.

Everything here is pure; callers supply the entry state and the clock.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Sequence

from ..core.constants import MISSING_PUNCH_CUTOFF_HOUR
from ..core.enums import EntryStatus, PunchType
from .model import TimeEntry

Rule = tuple[Callable[[TimeEntry], bool], str]

# Checked in order; every matching message is reported.
PUNCH_RULES: dict[PunchType, tuple[Rule, ...]] = {
    PunchType.CLOCK_IN: (
        (lambda e: e.clock_in is not None, "Already clocked in"),
    ),
    PunchType.LUNCH_OUT: (
        (lambda e: e.clock_in is None, "Must clock in before starting break"),
        (lambda e: e.lunch_out is not None, "Already on break"),
    ),
    PunchType.LUNCH_IN: (
        (lambda e: e.lunch_out is None, "Must start break first"),
        (lambda e: e.lunch_in is not None, "Already returned from break"),
    ),
    PunchType.CLOCK_OUT: (
        (lambda e: e.clock_in is None, "Must clock in first"),
        (lambda e: e.lunch_out is not None and e.lunch_in is None, "Must end break before clocking out"),
        (lambda e: e.clock_out is not None, "Already clocked out"),
    ),
}


def validate_punch(entry: TimeEntry, punch_type: PunchType) -> list[str]:
    """Return the sequence violations a punch of ``punch_type`` would cause.

    An empty list means the punch may be applied. The lock check is the
    caller's job and runs before this.
    """
    return [message for violated, message in PUNCH_RULES[punch_type] if violated(entry)]


def should_check_missing(entry: TimeEntry, now: datetime, *, cutoff_hour: int = MISSING_PUNCH_CUTOFF_HOUR) -> bool:
    return entry.work_date != now.date() or now.hour >= cutoff_hour


def detect_missing_punches(
    entry: TimeEntry,
    now: datetime,
    *,
    cutoff_hour: int = MISSING_PUNCH_CUTOFF_HOUR,
) -> list[str]:
    """Flag incomplete punch pairs once the day is over (or past the cutoff today)."""
    if not should_check_missing(entry, now, cutoff_hour=cutoff_hour):
        return []

    flags: list[str] = []
    if entry.clock_in is not None and entry.clock_out is None:
        flags.append("Missing clock out time")
    if entry.lunch_out is not None and entry.lunch_in is None:
        flags.append("Missing break end time")
    return flags


def derive_status(entry: TimeEntry, flags: Sequence[str]) -> EntryStatus:
    if flags:
        return EntryStatus.FLAGGED
    if entry.clock_in is not None and entry.clock_out is not None:
        return EntryStatus.COMPLETE
    return EntryStatus.INCOMPLETE


def describe_activity(entry: TimeEntry | None) -> str:
    """Label for what the user is doing right now."""
    if entry is None or entry.clock_in is None:
        return "Not Clocked In"
    if entry.clock_out is not None:
        return "Clocked Out"
    if entry.lunch_out is not None and entry.lunch_in is None:
        return "On Break"
    return "Clocked In"
