from datetime import date, datetime

from src.time_tracker.time_tracker.core.enums import EntryStatus
from src.time_tracker.time_tracker.timesheets.engine import derive_status, describe_activity, detect_missing_punches

TODAY = date(2026, 2, 3)
T9 = datetime(2026, 2, 3, 9, 0)
T12 = datetime(2026, 2, 3, 12, 0)
T1230 = datetime(2026, 2, 3, 12, 30)
T17 = datetime(2026, 2, 3, 17, 0)


def test_same_day_before_cutoff_is_not_flagged(make_entry):
    entry = make_entry(TODAY, clock_in=T9)

    assert detect_missing_punches(entry, datetime(2026, 2, 3, 10, 0)) == []


def test_same_day_after_cutoff_is_flagged(make_entry):
    entry = make_entry(TODAY, clock_in=T9)

    assert detect_missing_punches(entry, datetime(2026, 2, 3, 19, 0)) == ["Missing clock out time"]


def test_cutoff_hour_is_inclusive(make_entry):
    entry = make_entry(TODAY, clock_in=T9)

    assert detect_missing_punches(entry, datetime(2026, 2, 3, 18, 0)) == ["Missing clock out time"]
    assert detect_missing_punches(entry, datetime(2026, 2, 3, 17, 59)) == []


def test_past_day_flags_both_open_pairs(make_entry):
    entry = make_entry(TODAY, clock_in=T9, lunch_out=T12)

    assert detect_missing_punches(entry, datetime(2026, 2, 4, 8, 0)) == [
        "Missing clock out time",
        "Missing break end time",
    ]


def test_complete_day_has_no_flags(make_entry):
    entry = make_entry(TODAY, clock_in=T9, lunch_out=T12, lunch_in=T1230, clock_out=T17)

    assert detect_missing_punches(entry, datetime(2026, 2, 5, 8, 0)) == []


def test_custom_cutoff(make_entry):
    entry = make_entry(TODAY, clock_in=T9)

    assert detect_missing_punches(entry, datetime(2026, 2, 3, 16, 0), cutoff_hour=16) == ["Missing clock out time"]


def test_derive_status(make_entry):
    assert derive_status(make_entry(clock_in=T9), []) == EntryStatus.INCOMPLETE
    assert derive_status(make_entry(clock_in=T9, clock_out=T17), []) == EntryStatus.COMPLETE
    assert derive_status(make_entry(clock_in=T9, clock_out=T17), ["Missing break end time"]) == EntryStatus.FLAGGED


def test_describe_activity(make_entry):
    assert describe_activity(None) == "Not Clocked In"
    assert describe_activity(make_entry()) == "Not Clocked In"
    assert describe_activity(make_entry(clock_in=T9)) == "Clocked In"
    assert describe_activity(make_entry(clock_in=T9, lunch_out=T12)) == "On Break"
    assert describe_activity(make_entry(clock_in=T9, lunch_out=T12, lunch_in=T1230)) == "Clocked In"
    assert describe_activity(make_entry(clock_in=T9, clock_out=T17)) == "Clocked Out"
