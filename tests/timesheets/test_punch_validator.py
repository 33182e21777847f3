from datetime import datetime

import pytest

from src.time_tracker.time_tracker.core.enums import PunchType
from src.time_tracker.time_tracker.timesheets.engine import validate_punch

T9 = datetime(2026, 2, 3, 9, 0)
T12 = datetime(2026, 2, 3, 12, 0)
T1230 = datetime(2026, 2, 3, 12, 30)
T17 = datetime(2026, 2, 3, 17, 0)


def test_empty_entry_accepts_only_clock_in(make_entry):
    entry = make_entry()

    assert validate_punch(entry, PunchType.CLOCK_IN) == []
    for punch_type in (PunchType.LUNCH_OUT, PunchType.LUNCH_IN, PunchType.CLOCK_OUT):
        assert validate_punch(entry, punch_type) != []


def test_clock_in_twice_is_rejected(make_entry):
    entry = make_entry(clock_in=T9)

    assert validate_punch(entry, PunchType.CLOCK_IN) == ["Already clocked in"]


def test_lunch_out_accepted_once_after_clock_in(make_entry):
    assert validate_punch(make_entry(clock_in=T9), PunchType.LUNCH_OUT) == []
    assert validate_punch(make_entry(clock_in=T9, lunch_out=T12), PunchType.LUNCH_OUT) == ["Already on break"]


def test_lunch_out_before_clock_in(make_entry):
    assert validate_punch(make_entry(), PunchType.LUNCH_OUT) == ["Must clock in before starting break"]


def test_lunch_in_requires_break_start(make_entry):
    assert validate_punch(make_entry(clock_in=T9), PunchType.LUNCH_IN) == ["Must start break first"]
    assert validate_punch(make_entry(clock_in=T9, lunch_out=T12), PunchType.LUNCH_IN) == []
    assert validate_punch(
        make_entry(clock_in=T9, lunch_out=T12, lunch_in=T1230), PunchType.LUNCH_IN
    ) == ["Already returned from break"]


def test_clock_out_while_on_break(make_entry):
    entry = make_entry(clock_in=T9, lunch_out=T12)

    assert validate_punch(entry, PunchType.CLOCK_OUT) == ["Must end break before clocking out"]


def test_clock_out_reports_every_violation_in_order(make_entry):
    entry = make_entry(clock_in=T9, lunch_out=T12, clock_out=T17)

    assert validate_punch(entry, PunchType.CLOCK_OUT) == [
        "Must end break before clocking out",
        "Already clocked out",
    ]


@pytest.mark.parametrize(
    "fields",
    [
        {"clock_in": T9},
        {"clock_in": T9, "lunch_out": T12, "lunch_in": T1230},
    ],
)
def test_clock_out_accepted(make_entry, fields):
    assert validate_punch(make_entry(**fields), PunchType.CLOCK_OUT) == []


def test_full_day_rejects_everything(make_entry):
    entry = make_entry(clock_in=T9, lunch_out=T12, lunch_in=T1230, clock_out=T17)

    for punch_type in PunchType:
        assert validate_punch(entry, punch_type)
