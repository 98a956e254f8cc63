"""CountdownWatch - keeps one target's countdown current on a shared ticker."""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable

from ouevents_countdown.engine import countdown
from ouevents_countdown.selectors import (
    DEFAULT_WINDOW_WIDTH,
    largest_unit_label,
    unit_window,
)
from ouevents_countdown.types import UNKNOWN, CountdownState, WindowSlot

if TYPE_CHECKING:
    from ouevents_ticker import TimeTicker

StateListener = Callable[[CountdownState], None]


class CountdownWatch:
    """Recomputes a target's countdown on every tick of an injected ticker.

    Nothing is carried between ticks: each tick runs the engine again from
    the broadcast time, so a watch can never drift from the wall clock.
    Attaching subscribes to the ticker (activating it if idle) and detaching
    unsubscribes. Until attached the state is ``Unknown``.
    """

    def __init__(
        self,
        ticker: TimeTicker,
        target: object,
        window_width: int = DEFAULT_WINDOW_WIDTH,
    ) -> None:
        self._ticker = ticker
        self._target = target
        self._window_width = window_width
        self._state: CountdownState = UNKNOWN
        self._attached = False
        self._listeners: list[StateListener] = []

    @property
    def target(self) -> object:
        return self._target

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def state(self) -> CountdownState:
        return self._state

    @property
    def label(self) -> str:
        return largest_unit_label(self._state)

    @property
    def window(self) -> tuple[WindowSlot, ...]:
        return unit_window(self._state, self._window_width)

    def on_change(self, listener: StateListener) -> None:
        """Call ``listener`` with the new state after every recomputation."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def attach(self) -> None:
        if self._attached:
            return
        self._attached = True
        self._ticker.subscribe(self._on_tick)

    def detach(self) -> None:
        if not self._attached:
            return
        self._attached = False
        self._ticker.unsubscribe(self._on_tick)

    def _on_tick(self, now: datetime) -> None:
        self._state = countdown(now, self._target)
        for listener in self._listeners:
            listener(self._state)
