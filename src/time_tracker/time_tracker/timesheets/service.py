from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import LOCKED_ENTRY_MESSAGE, MISSING_PUNCH_CUTOFF_HOUR, RECENT_ENTRIES_LIMIT
from ..core.exceptions import LockedPeriodError, NotFoundError, SequenceViolation
from ..payroll.service import PayrollPeriodService
from .calculator.base import HoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator
from .engine import derive_status, describe_activity, detect_missing_punches, validate_punch
from .model import PUNCH_FIELDS, PunchRequest, TimeEntry
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodayView:
    entry: TimeEntry
    activity: str
    worked_hours: Decimal


class PunchService:
    def __init__(
        self,
        entries: TimeEntryRepository,
        periods: Optional[PayrollPeriodService] = None,
        *,
        calculator: Optional[HoursCalculator] = None,
        clock: Callable[[], datetime] = now_local,
        cutoff_hour: int = MISSING_PUNCH_CUTOFF_HOUR,
    ):
        self._entries = entries
        self._periods = periods
        self._calculator = calculator or StandardHoursCalculator()
        self._clock = clock
        self._cutoff_hour = int(cutoff_hour)

    def get_or_create_today(self, user_id: int, *, now: datetime | None = None) -> TimeEntry:
        """Load today's entry, creating it lazily and syncing its lock with the payroll period."""
        now = now or self._clock()
        today = now.date()
        locked = bool(self._periods and self._periods.is_date_locked(today))

        entry = self._entries.get_entry(user_id, today)
        if entry is None:
            return self._entries.create_entry(user_id=user_id, work_date=today, is_locked=locked)

        if locked and not entry.is_locked:
            entry = self._entries.update_entry(entry.entry_id, {"is_locked": True}) or entry
        return entry

    def record_punch(self, user_id: int, request: PunchRequest, *, now: datetime | None = None) -> TimeEntry:
        now = now or self._clock()
        entry = self.get_or_create_today(user_id, now=now)

        if entry.is_locked:
            logger.info("Rejected %s for user %s on %s: entry locked", request.punch_type.value, user_id, entry.work_date)
            raise LockedPeriodError(LOCKED_ENTRY_MESSAGE)

        violations = validate_punch(entry, request.punch_type)
        if violations:
            logger.info("Rejected %s for user %s on %s: %s", request.punch_type.value, user_id, entry.work_date, violations[0])
            raise SequenceViolation(violations)

        field = PUNCH_FIELDS[request.punch_type]
        punched = replace(entry, **{field: request.timestamp})
        flags = detect_missing_punches(punched, now, cutoff_hour=self._cutoff_hour)

        updated = self._entries.update_entry(
            entry.entry_id,
            {
                field: request.timestamp,
                "total_hours": self._calculator.entry_hours(punched),
                "flags": flags,
                "status": derive_status(punched, flags),
            },
        )
        if updated is None:
            raise NotFoundError("Time entry not found")

        logger.info(
            "Recorded %s for user %s on %s (status=%s, hours=%s)",
            request.punch_type.value,
            user_id,
            updated.work_date,
            updated.status.value,
            updated.total_hours,
        )
        return updated

    def today_view(self, user_id: int, *, now: datetime | None = None) -> TodayView:
        now = now or self._clock()
        entry = self.get_or_create_today(user_id, now=now)
        return TodayView(
            entry=entry,
            activity=describe_activity(entry),
            worked_hours=self._calculator.live_hours(entry, now),
        )

    def recent_entries(self, user_id: int, *, limit: int = RECENT_ENTRIES_LIMIT) -> Sequence[TimeEntry]:
        return self._entries.list_for_user(user_id, limit=limit)
