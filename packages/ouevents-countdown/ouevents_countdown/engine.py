"""Countdown engine - calendar-accurate time left before a target.

Years and months are counted by stepping a cursor forward in real calendar
units, so leap days and short months are absorbed exactly. Whatever is left
after the last whole month is a plain duration and is split with fixed
radices into weeks, days, hours, minutes and seconds.

The engine is pure: callers recompute from scratch on every tick instead of
decrementing a stored value.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Mapping

from dateutil.relativedelta import relativedelta

from ouevents_countdown.instant import parse_instant
from ouevents_countdown.types import (
    PAST,
    UNIT_KEYS,
    UNKNOWN,
    Breakdown,
    CountdownState,
    Past,
    Remaining,
    Unknown,
)

_SECOND = timedelta(seconds=1)


def countdown(now: object, target: object) -> CountdownState:
    """Return the countdown state of ``target`` as seen at ``now``.

    Both arguments go through ``parse_instant``. An unusable value on either
    side gives ``Unknown``; a target at or before now gives ``Past``.
    """
    now_at = parse_instant(now)
    target_at = parse_instant(target)
    if now_at is None or target_at is None:
        return UNKNOWN
    if target_at <= now_at:
        return PAST
    return Remaining(breakdown_between(now_at, target_at))


def breakdown_between(start: datetime, end: datetime) -> Breakdown:
    """Split the span from ``start`` to ``end`` into calendar units."""
    if end < start:
        raise ValueError("end must not be before start")

    years = 0
    while _reaches(start, end, years + 1, 0):
        years += 1

    months = 0
    while _reaches(start, end, years, months + 1):
        months += 1

    # The cursor is a single offset from start so month-end clamping never
    # accumulates across steps.
    cursor = start + relativedelta(years=years, months=months)

    total_seconds = (end - cursor) // _SECOND
    total_minutes, seconds = divmod(total_seconds, 60)
    total_hours, minutes = divmod(total_minutes, 60)
    total_days, hours = divmod(total_hours, 24)
    weeks, days = divmod(total_days, 7)

    return Breakdown(
        years=years,
        months=months,
        weeks=weeks,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def shift(instant: datetime, breakdown: Breakdown) -> datetime:
    """Add ``breakdown`` to ``instant`` in the order the engine removed it."""
    return (
        instant
        + relativedelta(years=breakdown.years, months=breakdown.months)
        + timedelta(
            weeks=breakdown.weeks,
            days=breakdown.days,
            hours=breakdown.hours,
            minutes=breakdown.minutes,
            seconds=breakdown.seconds,
        )
    )


def to_legacy(state: CountdownState) -> dict[str, Any]:
    """Encode ``state`` as the flat all-units-plus-isPast record.

    The record can only tell "unknown" from "remaining" by the units being
    non-zero, so a target less than a second away is written as past.
    """
    if isinstance(state, Remaining) and not state.breakdown.is_zero():
        record: dict[str, Any] = dict(zip(UNIT_KEYS, state.breakdown.values()))
        record["isPast"] = False
        return record
    record = dict.fromkeys(UNIT_KEYS, 0)
    record["isPast"] = not isinstance(state, Unknown)
    return record


def from_legacy(record: Mapping[str, Any]) -> CountdownState:
    """Decode a flat countdown record back into a state."""
    if record.get("isPast", record.get("is_past", False)):
        return PAST
    breakdown = Breakdown(**{key: int(record.get(key, 0) or 0) for key in UNIT_KEYS})
    if breakdown.is_zero():
        return UNKNOWN
    return Remaining(breakdown)


def is_unknown(state: CountdownState) -> bool:
    return isinstance(state, Unknown)


def is_past(state: CountdownState) -> bool:
    return isinstance(state, Past)


def _reaches(start: datetime, end: datetime, years: int, months: int) -> bool:
    try:
        candidate = start + relativedelta(years=years, months=months)
    except (ValueError, OverflowError):
        # Past datetime.max, so certainly beyond end.
        return False
    return candidate <= end
