from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional, Sequence

from ..core.constants import PERIOD_LENGTH_DAYS, RESERVE_DAYS
from ..core.enums import EntryStatus, PeriodStatus
from ..core.exceptions import NotFoundError
from ..timesheets.model import TimeEntry
from ..timesheets.repository import TimeEntryRepository
from .model import PayrollPeriod
from .repository import PayrollPeriodRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodSummary:
    period: PayrollPeriod
    entries: Sequence[TimeEntry]
    total_hours: Decimal
    days_worked: int
    days_remaining: int
    in_reserve_week: bool


def sum_hours(entries: Sequence[TimeEntry]) -> Decimal:
    total = sum((e.total_hours for e in entries), Decimal("0.0"))
    return total.quantize(Decimal("0.1"))


class PayrollPeriodService:
    """Use cases around biweekly payroll periods and their reserve (review) week."""

    def __init__(
        self,
        periods: PayrollPeriodRepository,
        entries: TimeEntryRepository,
        *,
        reserve_days: int = RESERVE_DAYS,
        period_length_days: int = PERIOD_LENGTH_DAYS,
    ):
        self._periods = periods
        self._entries = entries
        self._reserve_days = int(reserve_days)
        self._period_length_days = int(period_length_days)

    def current_period(self) -> Optional[PayrollPeriod]:
        return self._periods.latest_with_status(PeriodStatus.ACTIVE)

    def previous_period(self) -> Optional[PayrollPeriod]:
        return self._periods.latest_with_status(PeriodStatus.REVIEW)

    def is_date_locked(self, day: date) -> bool:
        """Entries are editable only while their period is active."""
        period = self._periods.get_for_date(day)
        return period is not None and period.status != PeriodStatus.ACTIVE

    def reserve_window(self, period: PayrollPeriod) -> tuple[date, date]:
        start = period.reserve_start_date or period.end_date + timedelta(days=1)
        end = period.reserve_end_date or start + timedelta(days=self._reserve_days - 1)
        return start, end

    def _summarize(self, user_id: int, period: PayrollPeriod, *, today: date) -> PeriodSummary:
        entries = self._entries.list_for_user(user_id, start=period.start_date, end=period.end_date)
        reserve_start, reserve_end = self.reserve_window(period)
        return PeriodSummary(
            period=period,
            entries=entries,
            total_hours=sum_hours(entries),
            days_worked=sum(1 for e in entries if e.status == EntryStatus.COMPLETE),
            days_remaining=max(0, (period.end_date - today).days + 1),
            in_reserve_week=reserve_start <= today <= reserve_end,
        )

    def current_summary(self, user_id: int, *, today: date) -> PeriodSummary:
        period = self.current_period()
        if period is None:
            raise NotFoundError("No active payroll period")
        return self._summarize(user_id, period, today=today)

    def previous_summary(self, user_id: int, *, today: date) -> Optional[PeriodSummary]:
        period = self.previous_period()
        if period is None:
            return None
        return self._summarize(user_id, period, today=today)

    def ensure_current_period(self, today: date) -> PayrollPeriod:
        """Create a period starting on this week's Monday when none is active."""
        current = self.current_period()
        if current is not None:
            return current

        start = today - timedelta(days=today.weekday())
        period = self._periods.create_period(
            start_date=start,
            end_date=start + timedelta(days=self._period_length_days - 1),
            status=PeriodStatus.ACTIVE,
        )
        logger.info("Created payroll period %s..%s", period.start_date, period.end_date)
        return period

    def roll_over(self, today: date) -> list[PayrollPeriod]:
        """Advance period states for ``today``; returns every period that changed or was created.

        An active period past its end date goes to review (entries locked, reserve
        window recorded) and the next period opens. A review period past its
        reserve window is closed.
        """
        changed: list[PayrollPeriod] = []

        current = self.current_period()
        while current is not None and current.end_date < today:
            reserve_start = current.end_date + timedelta(days=1)
            reviewed = self._periods.update_period(
                current.period_id,
                {
                    "status": PeriodStatus.REVIEW,
                    "reserve_start_date": reserve_start,
                    "reserve_end_date": reserve_start + timedelta(days=self._reserve_days - 1),
                },
            )
            locked = self._entries.lock_between(current.start_date, current.end_date)
            logger.info(
                "Payroll period %s..%s moved to review (%d entries locked)",
                current.start_date,
                current.end_date,
                locked,
            )

            current = self._periods.create_period(
                start_date=reserve_start,
                end_date=reserve_start + timedelta(days=self._period_length_days - 1),
                status=PeriodStatus.ACTIVE,
            )
            logger.info("Opened payroll period %s..%s", current.start_date, current.end_date)
            changed.extend(p for p in (reviewed, current) if p is not None)

        for period in self._periods.list_with_status(PeriodStatus.REVIEW):
            _, reserve_end = self.reserve_window(period)
            if reserve_end < today:
                closed = self._periods.update_period(period.period_id, {"status": PeriodStatus.CLOSED})
                logger.info("Payroll period %s..%s closed", period.start_date, period.end_date)
                if closed is not None:
                    changed.append(closed)

        return changed
