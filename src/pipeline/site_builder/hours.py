"""Open/closed evaluation against a store's weekly hours.

Reference implementation of the rule ``site/assets/js/hours.js`` applies in
the browser, kept in step with that script. A window whose close time is
earlier than its open time runs past midnight; both ends are inclusive.
A time that is not ``HH:MM`` leaves the status unset. Pages
are rendered without any open/closed state; ``is_open`` and
``status_label`` pin down the client behaviour in tests, while the build
itself only calls ``malformed_days`` to report schedules the browser will
skip.

Examples
--------
>>> from datetime import datetime
>>> hours = {"mon": ["22:00", "02:00"]}
>>> is_open(hours, datetime(2024, 1, 1, 1, 0))   # a Monday
True
>>> is_open(hours, datetime(2024, 1, 1, 10, 0))
False
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime

from src.config import DAY_CODES


def to_minutes(value: str) -> int:
    """Convert ``"HH:MM"`` to minutes after midnight.

    Raises
    ------
    ValueError
        If ``value`` is not of the form ``HH:MM``.
    """
    hours_text, minutes_text = value.split(":")
    return int(hours_text) * 60 + int(minutes_text)


def is_open(hours: Mapping[str, Sequence[str]], now: datetime) -> bool:
    """Return whether the schedule is open at ``now``.

    Parameters
    ----------
    hours : Mapping[str, Sequence[str]]
        Day code (``mon`` .. ``sun``) to ``[open, close]``.
    now : datetime
        Local time to evaluate at. Only today's window is consulted.

    Returns
    -------
    bool
        ``False`` when today has no window.

    Raises
    ------
    ValueError
        If today's window is malformed.
    """
    window = hours.get(DAY_CODES[now.weekday()])
    if not window:
        return False
    opens, closes = (to_minutes(part) for part in window)
    current = now.hour * 60 + now.minute
    if closes < opens:
        return current >= opens or current <= closes
    return opens <= current <= closes


def status_label(hours: Mapping[str, Sequence[str]], now: datetime) -> str | None:
    """Return ``"Open Now"``/``"Closed"``, or ``None`` when the hours are malformed."""
    try:
        return "Open Now" if is_open(hours, now) else "Closed"
    except (AttributeError, TypeError, ValueError):
        return None


def malformed_days(hours: Mapping[str, Sequence[str]]) -> list[str]:
    """Return the day codes whose window the client would fail to evaluate.

    Examples
    --------
    >>> malformed_days({"mon": ["09:00", "17:00"], "tue": ["9am", "5pm"], "xyz": ["09:00", "10:00"]})
    ['tue', 'xyz']
    """
    bad: list[str] = []
    for day, window in hours.items():
        if day not in DAY_CODES:
            bad.append(day)
            continue
        try:
            [to_minutes(part) for part in window]
        except (AttributeError, TypeError, ValueError):
            bad.append(day)
    return bad


__all__ = ["is_open", "malformed_days", "status_label", "to_minutes"]
