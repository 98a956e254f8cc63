"""Helpers for listing upcoming events by start time."""
from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Iterable, Mapping, Sequence, TypeVar

from ouevents_countdown.instant import parse_instant

EventRecord = Mapping[str, Any]
_R = TypeVar("_R", bound=EventRecord)

DEFAULT_PAGE_SIZE = 6

# The backend stores ``eventDateTime``; older records use ``startDateTime``.
_START_FIELDS = ("eventDateTime", "startDateTime")


def event_start(record: EventRecord) -> datetime | None:
    """Start instant of an event record, or None if missing or invalid."""
    for field in _START_FIELDS:
        raw = record.get(field)
        if raw:
            return parse_instant(raw)
    return None


def upcoming_events(records: Iterable[_R], now: object) -> list[_R]:
    """Events starting at or after ``now``. Undated events are dropped."""
    now_at = parse_instant(now)
    if now_at is None:
        raise ValueError(f"now is not a valid instant: {now!r}")
    upcoming = []
    for record in records:
        start = event_start(record)
        if start is not None and start >= now_at:
            upcoming.append(record)
    return upcoming


def categories(records: Iterable[EventRecord]) -> list[str]:
    return sorted({record["category"] for record in records if record.get("category")})


def filter_by_category(records: Iterable[_R], category: str | None) -> list[_R]:
    """Records in exactly ``category``. An empty category keeps everything."""
    if not category:
        return list(records)
    return [record for record in records if record.get("category") == category]


def search_events(records: Iterable[_R], query: str | None) -> list[_R]:
    """Case-insensitive substring search over title, venue and description.

    The backend calls the venue ``location``; either field is searched.
    """
    needle = (query or "").strip().casefold()
    if not needle:
        return list(records)
    return [record for record in records if needle in _search_text(record)]


def sort_events(records: Iterable[_R], by: str = "start") -> list[_R]:
    """Sort by start time (ascending, undated last) or by title."""
    if by == "start":
        return sorted(records, key=_start_key)
    if by == "title":
        return sorted(records, key=lambda record: str(record.get("title") or "").casefold())
    raise ValueError(f"Unknown sort key {by!r}, expected 'start' or 'title'")


def paginate(
    records: Sequence[_R], page: int, page_size: int = DEFAULT_PAGE_SIZE
) -> tuple[list[_R], int]:
    """Return the records on 1-based ``page`` and the total page count.

    ``page`` is clamped into range; an empty listing has one empty page.
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    total_pages = max(1, math.ceil(len(records) / page_size))
    page = min(max(page, 1), total_pages)
    offset = (page - 1) * page_size
    return list(records[offset : offset + page_size]), total_pages


def _search_text(record: EventRecord) -> str:
    fields = (
        record.get("title"),
        record.get("venue") or record.get("location"),
        record.get("description"),
    )
    return "\n".join(str(value or "") for value in fields).casefold()


def _start_key(record: EventRecord) -> tuple[bool, datetime]:
    start = event_start(record)
    return (start is None, start or datetime.min)
