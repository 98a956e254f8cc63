"""Display selectors: which countdown units to show."""
from __future__ import annotations

import logging

from ouevents_countdown.types import (
    UNITS,
    CountdownState,
    Past,
    Remaining,
    Unknown,
    WindowSlot,
)

logger = logging.getLogger(__name__)

UNKNOWN_LABEL = "N/A"
STARTED_LABEL = "Started"
DEFAULT_WINDOW_WIDTH = 4


def largest_unit_label(state: CountdownState) -> str:
    """Compact badge text: the largest non-zero unit, "N/A" or "Started"."""
    if isinstance(state, Unknown):
        return UNKNOWN_LABEL
    if isinstance(state, Past):
        return STARTED_LABEL

    for (_, singular, plural, _), value in zip(UNITS, state.breakdown.values()):
        if value > 0:
            return f"{value} {singular if value == 1 else plural}"

    # Only a target less than one second away gets here.
    logger.debug("countdown has no whole unit left, labelling as started")
    return STARTED_LABEL


def unit_window(
    state: CountdownState, width: int = DEFAULT_WINDOW_WIDTH
) -> tuple[WindowSlot, ...]:
    """Pick up to ``width`` adjacent units for the multi-box display.

    The window starts at the topmost non-zero unit and extends toward
    seconds. Near the seconds end it grows leftward instead, so it always
    holds ``width`` slots when that many units exist. Zero values may appear
    inside the window.

    Unknown and past states have no units to show and get the all-zero
    fallback window that ends at seconds.
    """
    if width < 1:
        raise ValueError("width must be at least 1")

    if isinstance(state, Remaining):
        values = state.breakdown.values()
    else:
        logger.debug(
            "window requested for %s state, using zero fallback", type(state).__name__
        )
        values = (0,) * len(UNITS)

    slots = [
        WindowSlot(key=key, label=short, value=value)
        for (key, _, _, short), value in zip(UNITS, values)
    ]
    start = _window_start(values)
    last = len(slots) - 1

    end = min(last, start + width - 1)
    left = start
    while end - left + 1 < width and left > 0:
        left -= 1
    return tuple(slots[left : end + 1])


def _window_start(values: tuple[int, ...]) -> int:
    # Indices whose upper units are all zero form a prefix: 0..first non-zero.
    for index, value in enumerate(values):
        if value > 0:
            return index
    return len(values) - 1
