from datetime import datetime, timezone

import pytest

from src.time_tracker.time_tracker.core.enums import PunchType
from src.time_tracker.time_tracker.core.exceptions import ValidationError
from src.time_tracker.time_tracker.timesheets.model import PunchRequest


def test_parses_naive_timestamp():
    req = PunchRequest.from_payload({"type": "lunchOut", "timestamp": "2026-02-03T12:00:00"})

    assert req.punch_type == PunchType.LUNCH_OUT
    assert req.timestamp == datetime(2026, 2, 3, 12, 0)


def test_utc_timestamp_becomes_local_naive():
    req = PunchRequest.from_payload({"type": "clockIn", "timestamp": "2026-02-03T09:00:00.000Z"})

    expected = datetime(2026, 2, 3, 9, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert req.timestamp == expected
    assert req.timestamp.tzinfo is None


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "coffee", "timestamp": "2026-02-03T09:00:00"},
        {"timestamp": "2026-02-03T09:00:00"},
        {"type": "clockIn", "timestamp": "yesterday"},
        {"type": "clockIn", "timestamp": 1738573200},
        {"type": "clockIn"},
    ],
)
def test_malformed_payload_is_rejected(payload):
    with pytest.raises(ValidationError, match="Invalid punch data"):
        PunchRequest.from_payload(payload)
