"""TimeTicker - one shared clock, many readers."""
from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable

from ouevents_ticker.config import TickerConfig
from ouevents_ticker.types import TickHandler, TickerInactiveError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class TimeTicker:
    """Shared current-time source that ticks on a fixed interval.

    The ticker is active while it has at least one subscriber. The first
    subscriber arms the timer, the last one to leave releases it, and a later
    subscriber starts a fresh one. Every tick reads the host time once and
    hands the same value to every subscriber, so countdowns rendered in the
    same tick always agree.

    Ticks are delivered on whichever thread drives the ticker: ``step()``
    forces one, ``poll()`` ticks when the interval has elapsed (for callers
    that own a frame loop), and ``run_forever()`` blocks and ticks until
    stopped or abandoned.

    Args:
        config: Tick cadence. Defaults to ``TickerConfig()`` (1000 ms).
        now_fn: Host wall clock returning an aware datetime. Defaults to UTC now.
        monotonic_fn: Clock used for scheduling. Defaults to ``time.monotonic``.
        sleep_fn: Used by ``run_forever`` to wait. Defaults to ``time.sleep``.
    """

    def __init__(
        self,
        config: TickerConfig | None = None,
        now_fn: Callable[[], datetime] | None = None,
        monotonic_fn: Callable[[], float] | None = None,
        sleep_fn: Callable[[float], None] | None = None,
    ) -> None:
        self._config = config if config is not None else TickerConfig()
        self._now_fn = now_fn if now_fn is not None else _utcnow
        self._monotonic = monotonic_fn if monotonic_fn is not None else time.monotonic
        self._sleep = sleep_fn if sleep_fn is not None else time.sleep
        self._handlers: list[TickHandler] = []
        self._now: datetime | None = None
        self._next_due: float | None = None
        self._tick_count = 0
        self._stop_requested = False

    @property
    def config(self) -> TickerConfig:
        return self._config

    @property
    def active(self) -> bool:
        return self._next_due is not None

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    @property
    def tick_count(self) -> int:
        """Ticks delivered since the current activation."""
        return self._tick_count

    @property
    def now(self) -> datetime:
        if self._now is None or not self.active:
            raise TickerInactiveError(
                "TimeTicker has no subscribers; subscribe before reading now"
            )
        return self._now

    def subscribe(self, handler: TickHandler) -> None:
        """Register a consumer and hand it the current time immediately."""
        if not self._handlers:
            self._activate()
        self._handlers.append(handler)
        handler(self.now)

    def unsubscribe(self, handler: TickHandler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            return
        if not self._handlers:
            self._release()

    def step(self) -> datetime:
        """Tick once right now and return the broadcast time."""
        if not self.active:
            raise TickerInactiveError("cannot step a TimeTicker with no subscribers")
        self._now = self._read_clock()
        self._tick_count += 1
        self._next_due = self._monotonic() + self._config.interval
        current = self._now
        for handler in list(self._handlers):
            handler(current)
        return current

    def poll(self) -> bool:
        """Tick if the interval has elapsed. Returns True when a tick happened."""
        if self._next_due is None:
            return False
        if self._monotonic() < self._next_due:
            return False
        self.step()
        return True

    def request_stop(self) -> None:
        self._stop_requested = True

    def run_forever(self) -> None:
        """Tick on schedule until ``request_stop()`` or the last unsubscribe."""
        if not self.active:
            raise TickerInactiveError("subscribe before running a TimeTicker")
        self._stop_requested = False
        while self._next_due is not None and not self._stop_requested:
            wait = self._next_due - self._monotonic()
            if wait > 0:
                self._sleep(wait)
            self.poll()

    def _read_clock(self) -> datetime:
        # The broadcast value never goes backwards within one activation.
        current = self._now_fn()
        if self._now is not None and current < self._now:
            return self._now
        return current

    def _activate(self) -> None:
        self._now = self._now_fn()
        self._tick_count = 0
        self._next_due = self._monotonic() + self._config.interval
        logger.debug("ticker activated, interval=%dms", self._config.interval_ms)

    def _release(self) -> None:
        self._now = None
        self._next_due = None
        logger.debug("ticker released after %d ticks", self._tick_count)
