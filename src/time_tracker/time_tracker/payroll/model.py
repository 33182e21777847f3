from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..core.enums import PeriodStatus


@dataclass(frozen=True)
class PayrollPeriod:
    """Domain entity: a contiguous pay window and its review (reserve) week."""

    period_id: int
    start_date: date
    end_date: date
    status: PeriodStatus = PeriodStatus.ACTIVE
    reserve_start_date: Optional[date] = None
    reserve_end_date: Optional[date] = None

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


def _fmt(day: Optional[date]) -> Optional[str]:
    return day.strftime("%Y-%m-%d") if day else None


def period_to_dict(period: PayrollPeriod) -> dict[str, Any]:
    return {
        "id": period.period_id,
        "startDate": _fmt(period.start_date),
        "endDate": _fmt(period.end_date),
        "status": period.status.value,
        "reserveStartDate": _fmt(period.reserve_start_date),
        "reserveEndDate": _fmt(period.reserve_end_date),
    }
