"""Tests for CountdownWatch driven by a TimeTicker."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ouevents_countdown import (
    PAST,
    UNKNOWN,
    Breakdown,
    CountdownWatch,
    Remaining,
)
from ouevents_ticker import TickerConfig, TimeTicker

_START = datetime(2025, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


class ManualClock:
    def __init__(self) -> None:
        self.wall = _START
        self.mono = 0.0

    def now(self) -> datetime:
        return self.wall

    def monotonic(self) -> float:
        return self.mono

    def advance(self, seconds: float) -> None:
        self.wall += timedelta(seconds=seconds)
        self.mono += seconds


def _ticker(clock: ManualClock) -> TimeTicker:
    return TimeTicker(TickerConfig(), now_fn=clock.now, monotonic_fn=clock.monotonic)


def test_unattached_watch_is_unknown():
    watch = CountdownWatch(_ticker(ManualClock()), "2025-03-01T09:01:00Z")
    assert watch.state == UNKNOWN
    assert watch.label == "N/A"
    assert not watch.attached


def test_attach_computes_immediately_and_activates_ticker():
    clock = ManualClock()
    ticker = _ticker(clock)
    watch = CountdownWatch(ticker, "2025-03-01T09:01:30Z")
    watch.attach()

    assert ticker.active
    assert watch.state == Remaining(Breakdown(minutes=1, seconds=30))
    assert watch.label == "1 Minute"


def test_each_tick_recomputes_from_current_time():
    """A jump in wall time shows up exactly, nothing is decremented."""
    clock = ManualClock()
    ticker = _ticker(clock)
    watch = CountdownWatch(ticker, _START + timedelta(days=3, seconds=5))
    watch.attach()

    clock.advance(1)
    ticker.step()
    assert watch.state == Remaining(Breakdown(days=3, seconds=4))

    clock.advance(86400)
    ticker.step()
    assert watch.state == Remaining(Breakdown(days=2, seconds=4))


def test_reaching_target_switches_to_started():
    clock = ManualClock()
    ticker = _ticker(clock)
    watch = CountdownWatch(ticker, _START + timedelta(seconds=2))
    watch.attach()

    clock.advance(2)
    ticker.step()
    assert watch.state == PAST
    assert watch.label == "Started"


def test_listeners_receive_every_state():
    clock = ManualClock()
    ticker = _ticker(clock)
    watch = CountdownWatch(ticker, _START + timedelta(hours=5))
    states = []
    watch.on_change(states.append)
    watch.attach()
    clock.advance(1)
    ticker.step()

    assert len(states) == 2
    assert states[-1] == Remaining(Breakdown(hours=4, minutes=59, seconds=59))


def test_removed_listener_stops_receiving():
    clock = ManualClock()
    ticker = _ticker(clock)
    watch = CountdownWatch(ticker, _START + timedelta(hours=5))
    kept, dropped = [], []
    watch.on_change(kept.append)
    watch.on_change(dropped.append)
    watch.attach()

    watch.remove_listener(dropped.append)
    watch.remove_listener(lambda state: None)  # unknown listener is ignored
    clock.advance(1)
    ticker.step()

    assert len(kept) == 2
    assert len(dropped) == 1


def test_window_follows_state():
    clock = ManualClock()
    ticker = _ticker(clock)
    watch = CountdownWatch(ticker, _START + timedelta(days=3, hours=5, minutes=20, seconds=10))
    watch.attach()
    assert [slot.label for slot in watch.window] == ["Days", "Hours", "Min", "Sec"]
    assert [slot.value for slot in watch.window] == [3, 5, 20, 10]


def test_watches_share_one_ticker():
    """Two watches see the same tick; detaching one keeps the other live."""
    clock = ManualClock()
    ticker = _ticker(clock)
    first = CountdownWatch(ticker, _START + timedelta(minutes=10))
    second = CountdownWatch(ticker, _START + timedelta(minutes=10))
    first.attach()
    second.attach()
    assert ticker.subscriber_count == 2

    clock.advance(30)
    ticker.step()
    assert first.state == second.state

    first.detach()
    assert ticker.active
    second.detach()
    assert not ticker.active


def test_attach_and_detach_are_idempotent():
    ticker = _ticker(ManualClock())
    watch = CountdownWatch(ticker, None)
    watch.attach()
    watch.attach()
    assert ticker.subscriber_count == 1
    watch.detach()
    watch.detach()
    assert ticker.subscriber_count == 0


def test_invalid_target_stays_unknown_while_ticking():
    clock = ManualClock()
    ticker = _ticker(clock)
    watch = CountdownWatch(ticker, "not-a-date")
    watch.attach()
    clock.advance(1)
    ticker.step()
    assert watch.state == UNKNOWN
    assert watch.label == "N/A"
