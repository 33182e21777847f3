from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_instant(value: str) -> datetime:
    """Parse an ISO-8601 timestamp sent by a client into a naive local datetime.

    Offsets (including a trailing ``Z``) are converted to the server's local
    zone so every stored punch shares the clock used for "today".
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Invalid punch data")

    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as e:
        raise ValidationError("Invalid punch data") from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def to_iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
