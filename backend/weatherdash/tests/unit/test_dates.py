from __future__ import annotations

from datetime import datetime, timezone

import pytest

from weatherdash.domain.dates import calendar_date_in, current_local_hour, is_iso_date, shift_date


def test_shift_date_moves_by_days():
    assert shift_date("2024-01-10", -1) == "2024-01-09"
    assert shift_date("2024-01-10", 2) == "2024-01-12"


@pytest.mark.parametrize("value", ["2024-01-01", "2024-03-01", "2023-12-31", "2024-02-29"])
def test_shift_date_round_trip(value):
    assert shift_date(shift_date(value, -1), 1) == value


def test_shift_date_rolls_over_month_and_year():
    assert shift_date("2024-02-28", 1) == "2024-02-29"
    assert shift_date("2023-02-28", 1) == "2023-03-01"
    assert shift_date("2024-01-01", -1) == "2023-12-31"


def test_calendar_date_rolls_forward_for_timezone_ahead_of_utc():
    instant = datetime(2024, 1, 10, 23, 0, tzinfo=timezone.utc)
    assert calendar_date_in("Pacific/Auckland", instant) == "2024-01-11"


def test_calendar_date_rolls_forward_at_utc_plus_11():
    assert calendar_date_in("Pacific/Noumea", datetime(2024, 1, 10, 13, 0, tzinfo=timezone.utc)) == "2024-01-11"
    assert calendar_date_in("Pacific/Noumea", datetime(2024, 1, 10, 12, 59, tzinfo=timezone.utc)) == "2024-01-10"
    assert current_local_hour("Pacific/Guadalcanal", datetime(2024, 1, 10, 13, 0, tzinfo=timezone.utc)) == 0


def test_calendar_date_in_tokyo_same_day():
    assert calendar_date_in("Asia/Tokyo", datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)) == "2024-01-10"


def test_calendar_date_handles_negative_and_fractional_offsets():
    instant = datetime(2024, 1, 10, 2, 0, tzinfo=timezone.utc)
    assert calendar_date_in("America/New_York", instant) == "2024-01-09"
    assert calendar_date_in("Asia/Kolkata", datetime(2024, 1, 10, 18, 45, tzinfo=timezone.utc)) == "2024-01-11"
    assert current_local_hour("Asia/Kathmandu", datetime(2024, 1, 10, 0, 0, tzinfo=timezone.utc)) == 5


def test_naive_instant_is_read_as_utc():
    assert calendar_date_in("Asia/Tokyo", datetime(2024, 1, 10, 20, 0)) == "2024-01-11"


def test_unknown_timezone_falls_back_to_system_local():
    instant = datetime(2024, 1, 10, 23, 0, tzinfo=timezone.utc)
    local = instant.astimezone()
    assert calendar_date_in("Not/AZone", instant) == local.date().isoformat()
    assert current_local_hour("Not/AZone", instant) == local.hour
    assert calendar_date_in("", instant) == local.date().isoformat()


def test_current_local_hour():
    instant = datetime(2024, 1, 10, 23, 30, tzinfo=timezone.utc)
    assert current_local_hour("Asia/Tokyo", instant) == 8
    assert current_local_hour("UTC", instant) == 23
    assert 0 <= current_local_hour("Europe/London") <= 23


@pytest.mark.parametrize(
    "value,expected",
    [("2024-01-10", True), ("2024-02-30", False), ("2024-1-10", False), ("", False), (None, False)],
)
def test_is_iso_date(value, expected):
    assert is_iso_date(value) is expected
