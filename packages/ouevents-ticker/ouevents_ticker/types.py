"""Shared type aliases and errors for the ticker."""
from __future__ import annotations

from datetime import datetime
from typing import Callable

TickHandler = Callable[[datetime], None]


class TickerInactiveError(RuntimeError):
    """Raised when reading or stepping a ticker that has no subscribers."""
