from __future__ import annotations

from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..model import TimeEntry
from .base import HoursCalculator

ONE_PLACE = Decimal("0.1")
ZERO_HOURS = Decimal("0.0")
_MICROS_PER_HOUR = Decimal(3600 * 1_000_000)


def to_hours(span: timedelta) -> Decimal:
    """Timedelta -> hours with one fractional digit, never below zero."""
    micros = span // timedelta(microseconds=1)
    if micros <= 0:
        return ZERO_HOURS
    return (Decimal(micros) / _MICROS_PER_HOUR).quantize(ONE_PLACE, rounding=ROUND_HALF_UP)


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: (out - in) - (break end - break start), not below 0."""

    def worked_hours(
        self,
        clock_in: Optional[datetime],
        clock_out: Optional[datetime],
        lunch_out: Optional[datetime],
        lunch_in: Optional[datetime],
    ) -> Decimal:
        if clock_in is None or clock_out is None:
            return ZERO_HOURS

        worked = clock_out - clock_in
        if lunch_out is not None and lunch_in is not None:
            worked -= lunch_in - lunch_out
        return to_hours(worked)

    def live_hours(self, entry: Optional[TimeEntry], now: datetime) -> Decimal:
        """Hours so far: an open day runs to ``now``, an open break stops the count."""
        if entry is None or entry.clock_in is None:
            return ZERO_HOURS

        clock_out = entry.clock_out or now
        worked = clock_out - entry.clock_in
        if entry.lunch_out is not None and entry.lunch_in is not None:
            worked -= entry.lunch_in - entry.lunch_out
        elif entry.lunch_out is not None:
            worked -= now - entry.lunch_out
        return to_hours(worked)
