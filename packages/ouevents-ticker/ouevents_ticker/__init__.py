"""ouevents-ticker - A single shared time source for countdown displays."""
from __future__ import annotations

from ouevents_ticker.config import TickerConfig
from ouevents_ticker.ticker import TimeTicker
from ouevents_ticker.types import TickHandler, TickerInactiveError

__all__ = ["TimeTicker", "TickerConfig", "TickHandler", "TickerInactiveError"]
