"""Countdown states and display slot types."""
from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import Union

# (field, singular, plural, short label) in descending significance.
UNITS: tuple[tuple[str, str, str, str], ...] = (
    ("years", "Year", "Years", "Years"),
    ("months", "Month", "Months", "Months"),
    ("weeks", "Week", "Weeks", "Weeks"),
    ("days", "Day", "Days", "Days"),
    ("hours", "Hour", "Hours", "Hours"),
    ("minutes", "Minute", "Minutes", "Min"),
    ("seconds", "Second", "Seconds", "Sec"),
)

UNIT_KEYS: tuple[str, ...] = tuple(key for key, _, _, _ in UNITS)


@dataclass(frozen=True, slots=True)
class Breakdown:
    """Calendar-accurate split of the time left before a target."""

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"{f.name} must be non-negative")

    def values(self) -> tuple[int, ...]:
        """Unit values in descending significance."""
        return astuple(self)

    def is_zero(self) -> bool:
        return not any(self.values())


@dataclass(frozen=True, slots=True)
class Unknown:
    """No usable target was supplied (missing or unparseable)."""


@dataclass(frozen=True, slots=True)
class Past:
    """The target instant has been reached."""


@dataclass(frozen=True, slots=True)
class Remaining:
    """The target is in the future; ``breakdown`` is the time left."""

    breakdown: Breakdown


CountdownState = Union[Unknown, Past, Remaining]

UNKNOWN = Unknown()
PAST = Past()


@dataclass(frozen=True, slots=True)
class WindowSlot:
    """One box of the multi-unit countdown display."""

    key: str
    label: str
    value: int
