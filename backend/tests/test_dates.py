"""Tests for calendar-date arithmetic."""

from datetime import date, datetime, timezone

import pytest

from studio.domain import DateRange, EventSchedule, derive_range, overlaps, to_calendar_date


def _r(start: str, end: str) -> DateRange:
    return DateRange(start=date.fromisoformat(start), end=date.fromisoformat(end))


RANGES = [
    _r("2024-01-10", "2024-01-12"),
    _r("2024-01-12", "2024-01-14"),
    _r("2024-01-13", "2024-01-13"),
    _r("2024-01-01", "2024-01-31"),
    _r("2024-02-01", "2024-02-02"),
]


def test_overlap_is_symmetric() -> None:
    for a in RANGES:
        for b in RANGES:
            assert overlaps(a, b) == overlaps(b, a)


def test_range_overlaps_itself() -> None:
    assert all(overlaps(r, r) for r in RANGES)


def test_touching_ranges_overlap_on_shared_day() -> None:
    assert overlaps(_r("2024-01-10", "2024-01-12"), _r("2024-01-12", "2024-01-14"))


def test_adjacent_ranges_do_not_overlap() -> None:
    assert not overlaps(_r("2024-01-10", "2024-01-12"), _r("2024-01-13", "2024-01-14"))
    assert not _r("2024-01-13", "2024-01-14").overlaps(_r("2024-01-10", "2024-01-12"))


def test_containment_overlaps() -> None:
    assert overlaps(_r("2024-01-01", "2024-01-31"), _r("2024-01-13", "2024-01-13"))


def test_derive_range_from_total_days() -> None:
    schedule = EventSchedule(start_date=date(2024, 1, 10), end_date=None, total_days=3)
    assert derive_range(schedule) == _r("2024-01-10", "2024-01-12")


def test_explicit_end_overrides_total_days() -> None:
    schedule = EventSchedule(
        start_date=date(2024, 1, 10), end_date=date(2024, 1, 15), total_days=1
    )
    assert derive_range(schedule).end == date(2024, 1, 15)


@pytest.mark.parametrize("total_days", [None, 0, -2])
def test_missing_or_non_positive_total_days_means_one_day(total_days) -> None:
    schedule = EventSchedule(start_date=date(2024, 1, 10), total_days=total_days)
    assert derive_range(schedule) == _r("2024-01-10", "2024-01-10")


def test_end_before_start_is_clamped() -> None:
    schedule = EventSchedule(start_date=date(2024, 1, 10), end_date=date(2024, 1, 8))
    derived = derive_range(schedule)
    assert derived.start == derived.end == date(2024, 1, 10)


def test_date_range_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        DateRange(start=date(2024, 1, 10), end=date(2024, 1, 9))


def test_date_range_days_and_str() -> None:
    r = _r("2024-01-10", "2024-01-12")
    assert r.days == 3
    assert str(r) == "2024-01-10..2024-01-12"


def test_to_calendar_date_drops_time_of_day() -> None:
    assert to_calendar_date(datetime(2024, 1, 10, 23, 59)) == date(2024, 1, 10)
    assert to_calendar_date("2024-01-10") == date(2024, 1, 10)
    assert to_calendar_date("2024-01-10T08:15:00") == date(2024, 1, 10)


def test_to_calendar_date_uses_studio_timezone_for_aware_values() -> None:
    late_utc = datetime(2024, 1, 10, 23, 30, tzinfo=timezone.utc)
    assert to_calendar_date(late_utc, tz="Asia/Kolkata") == date(2024, 1, 11)
    assert to_calendar_date("2024-01-10T23:30:00Z", tz="Asia/Kolkata") == date(2024, 1, 11)
    assert to_calendar_date(late_utc) == date(2024, 1, 10)


def test_to_calendar_date_rejects_missing_and_unparseable_values() -> None:
    with pytest.raises(TypeError):
        to_calendar_date(None)
    with pytest.raises(ValueError):
        to_calendar_date("10/01/2024")


def test_from_values_derives_end() -> None:
    assert DateRange.from_values("2024-01-10", total_days=3) == _r("2024-01-10", "2024-01-12")
    assert DateRange.from_values(
        date(2024, 1, 10), "2024-01-11", total_days=5
    ) == _r("2024-01-10", "2024-01-11")
