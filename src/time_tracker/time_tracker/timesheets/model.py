from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_instant, to_iso
from ..core.enums import EntryStatus, PunchType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: all punches of one user for one calendar day."""

    entry_id: int
    user_id: int
    work_date: date
    clock_in: Optional[datetime] = None
    lunch_out: Optional[datetime] = None
    lunch_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    total_hours: Decimal = Decimal("0.0")
    status: EntryStatus = EntryStatus.INCOMPLETE
    flags: tuple[str, ...] = ()
    is_locked: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


PUNCH_FIELDS = {
    PunchType.CLOCK_IN: "clock_in",
    PunchType.LUNCH_OUT: "lunch_out",
    PunchType.LUNCH_IN: "lunch_in",
    PunchType.CLOCK_OUT: "clock_out",
}


@dataclass(frozen=True)
class PunchRequest:
    """Validated punch payload: a closed punch type plus a parsed instant."""

    punch_type: PunchType
    timestamp: datetime

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "PunchRequest":
        try:
            punch_type = PunchType(data.get("type"))
        except ValueError as e:
            raise ValidationError("Invalid punch data") from e
        return cls(punch_type=punch_type, timestamp=parse_iso_instant(data.get("timestamp")))


def entry_to_dict(entry: TimeEntry) -> dict[str, Any]:
    """JSON shape of an entry as served by the API."""

    return {
        "id": entry.entry_id,
        "userId": entry.user_id,
        "date": entry.work_date.strftime("%Y-%m-%d"),
        "clockIn": to_iso(entry.clock_in),
        "lunchOut": to_iso(entry.lunch_out),
        "lunchIn": to_iso(entry.lunch_in),
        "clockOut": to_iso(entry.clock_out),
        "totalHours": str(entry.total_hours),
        "status": entry.status.value,
        "flags": list(entry.flags),
        "isLocked": entry.is_locked,
        "createdAt": to_iso(entry.created_at),
        "updatedAt": to_iso(entry.updated_at),
    }
