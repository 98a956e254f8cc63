"""ouevents-countdown - Calendar-accurate event countdowns and their display."""
from __future__ import annotations

from ouevents_countdown.engine import (
    breakdown_between,
    countdown,
    from_legacy,
    is_past,
    is_unknown,
    shift,
    to_legacy,
)
from ouevents_countdown.instant import parse_instant
from ouevents_countdown.listing import (
    categories,
    event_start,
    filter_by_category,
    paginate,
    search_events,
    sort_events,
    upcoming_events,
)
from ouevents_countdown.selectors import largest_unit_label, unit_window
from ouevents_countdown.types import (
    PAST,
    UNKNOWN,
    Breakdown,
    CountdownState,
    Past,
    Remaining,
    Unknown,
    WindowSlot,
)
from ouevents_countdown.watch import CountdownWatch

__all__ = [
    "Breakdown",
    "CountdownState",
    "Unknown",
    "Past",
    "Remaining",
    "UNKNOWN",
    "PAST",
    "WindowSlot",
    "parse_instant",
    "countdown",
    "breakdown_between",
    "shift",
    "to_legacy",
    "from_legacy",
    "is_unknown",
    "is_past",
    "largest_unit_label",
    "unit_window",
    "CountdownWatch",
    "event_start",
    "upcoming_events",
    "categories",
    "filter_by_category",
    "search_events",
    "sort_events",
    "paginate",
]
