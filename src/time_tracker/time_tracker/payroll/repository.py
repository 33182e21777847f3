from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import PeriodStatus
from .model import PayrollPeriod


class PayrollPeriodRepository(Protocol):
    def latest_with_status(self, status: PeriodStatus) -> Optional[PayrollPeriod]:
        """Most recent (by end date) period in ``status``."""

        raise NotImplementedError

    def list_with_status(self, status: PeriodStatus) -> Sequence[PayrollPeriod]:
        raise NotImplementedError

    def get_for_date(self, day: date) -> Optional[PayrollPeriod]:
        raise NotImplementedError

    def create_period(
        self,
        *,
        start_date: date,
        end_date: date,
        status: PeriodStatus = PeriodStatus.ACTIVE,
        reserve_start_date: Optional[date] = None,
        reserve_end_date: Optional[date] = None,
    ) -> PayrollPeriod:
        raise NotImplementedError

    def update_period(self, period_id: int, changes: Mapping[str, Any]) -> Optional[PayrollPeriod]:
        raise NotImplementedError
