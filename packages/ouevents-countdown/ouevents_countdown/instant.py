"""Parsing raw event times into aware UTC instants."""
from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone

from dateutil.parser import isoparse

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_instant(value: object) -> datetime | None:
    """Return ``value`` as an aware UTC datetime, or None if it is unusable.

    Accepts datetimes, dates (midnight UTC), ISO-8601 strings and epoch
    milliseconds. Naive values are taken to be UTC. None, empty strings,
    booleans and anything unparseable give None rather than raising.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, datetime):
            return _as_utc(value)
        if isinstance(value, date):
            return datetime.combine(value, time.min, tzinfo=timezone.utc)
        if isinstance(value, (int, float)):
            if not math.isfinite(value):
                return None
            # Zero is the epoch itself, not a missing value.
            return _EPOCH + timedelta(milliseconds=value)
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            return _as_utc(isoparse(text))
    except (ValueError, OverflowError):
        return None
    return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
