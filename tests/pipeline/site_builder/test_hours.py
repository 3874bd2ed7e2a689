"""Tests for open/closed evaluation of store hours."""

from datetime import datetime

import pytest

from src.pipeline.site_builder.hours import is_open, malformed_days, status_label, to_minutes

MONDAY = datetime(2024, 1, 1)  # a Monday


def at(hour: int, minute: int = 0, day: datetime = MONDAY) -> datetime:
    return day.replace(hour=hour, minute=minute)


def test_to_minutes() -> None:
    assert to_minutes("00:00") == 0
    assert to_minutes("23:30") == 1410
    with pytest.raises(ValueError):
        to_minutes("9am")


def test_overnight_window() -> None:
    hours = {"mon": ["22:00", "02:00"]}
    assert status_label(hours, at(1)) == "Open Now"
    assert status_label(hours, at(10)) == "Closed"
    assert status_label(hours, at(23, 15)) == "Open Now"


def test_same_day_window_is_inclusive() -> None:
    hours = {"mon": ["09:00", "17:00"]}
    assert is_open(hours, at(9))
    assert is_open(hours, at(17))
    assert not is_open(hours, at(17, 1))
    assert not is_open(hours, at(8, 59))


def test_no_window_today_is_closed() -> None:
    assert status_label({"tue": ["09:00", "17:00"]}, at(12)) == "Closed"
    assert status_label({}, at(12)) == "Closed"


def test_malformed_window_has_no_status() -> None:
    assert status_label({"mon": ["nine", "five"]}, at(12)) is None


def test_malformed_days() -> None:
    hours = {"mon": ["09:00", "17:00"], "tue": ["9am", "5pm"], "funday": ["09:00", "10:00"]}
    assert malformed_days(hours) == ["tue", "funday"]
    assert malformed_days({}) == []


def test_client_script_uses_the_same_rule() -> None:
    from src.config import ASSETS_DIR, DAY_CODES

    script = (ASSETS_DIR / "js" / "hours.js").read_text(encoding="utf-8")
    # Date.getDay() counts from Sunday; datetime.weekday() from Monday
    js_days = "['" + "', '".join(DAY_CODES[-1:] + DAY_CODES[:-1]) + "']"
    assert js_days in script
    assert "if (closeMins < openMins)" in script
    assert "return nowMins >= openMins || nowMins <= closeMins;" in script
    assert "return nowMins >= openMins && nowMins <= closeMins;" in script
    assert "throw new Error('unreadable time: '" in script
