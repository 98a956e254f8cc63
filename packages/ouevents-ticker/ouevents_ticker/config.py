"""Ticker configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TickerConfig:
    """Immutable configuration for a TimeTicker.

    Attributes:
        interval_ms: Milliseconds between ticks. Only affects how smooth a
            countdown looks, never the values it shows.
    """

    interval_ms: int = 1000

    def __post_init__(self) -> None:
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be positive")

    @property
    def interval(self) -> float:
        """Tick interval in seconds."""
        return self.interval_ms / 1000.0
