from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..model import TimeEntry


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def worked_hours(
        self,
        clock_in: Optional[datetime],
        clock_out: Optional[datetime],
        lunch_out: Optional[datetime],
        lunch_in: Optional[datetime],
    ) -> Decimal:
        raise NotImplementedError

    @abstractmethod
    def live_hours(self, entry: Optional[TimeEntry], now: datetime) -> Decimal:
        raise NotImplementedError

    def entry_hours(self, entry: TimeEntry) -> Decimal:
        return self.worked_hours(entry.clock_in, entry.clock_out, entry.lunch_out, entry.lunch_in)
