"""Event Countdown — terminal countdown driven by one shared ticker.

Prints the compact badge label and the four-box window for each target on
every tick. All targets share a single TimeTicker.

Run:
    python main.py 2030-01-01T00:00:00Z
    python main.py 2030-01-01T00:00:00Z not-a-date --ticks 5 --interval-ms 500
"""
from __future__ import annotations

import argparse
import logging
from datetime import datetime

from ouevents_countdown import CountdownWatch
from ouevents_ticker import TickerConfig, TimeTicker


def _render(watch: CountdownWatch) -> str:
    boxes = " ".join(f"[{slot.value:>2} {slot.label}]" for slot in watch.window)
    return f"{str(watch.target):<28} {watch.label:<12} {boxes}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Event countdown demo")
    parser.add_argument(
        "targets", nargs="+",
        help="Event start times (ISO-8601); invalid values show N/A",
    )
    parser.add_argument(
        "--ticks", type=int, default=10,
        help="Ticks to run before exiting, 0 for no limit (default: 10)",
    )
    parser.add_argument(
        "--interval-ms", type=int, default=1000,
        help="Tick interval in milliseconds (default: 1000)",
    )
    parser.add_argument(
        "--width", type=int, default=4,
        help="Boxes in the detailed window (default: 4)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    ticker = TimeTicker(TickerConfig(interval_ms=args.interval_ms))
    watches = [CountdownWatch(ticker, target, window_width=args.width) for target in args.targets]

    def on_tick(now: datetime) -> None:
        print(f"\n{now.isoformat(timespec='seconds')}")
        for watch in watches:
            print("  " + _render(watch))
        if args.ticks and ticker.tick_count >= args.ticks:
            ticker.request_stop()

    # Watches first so they are current when the printer runs.
    for watch in watches:
        watch.attach()
    ticker.subscribe(on_tick)

    try:
        ticker.run_forever()
    except KeyboardInterrupt:
        pass
    finally:
        ticker.unsubscribe(on_tick)
        for watch in watches:
            watch.detach()


if __name__ == "__main__":
    main()
