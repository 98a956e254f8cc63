"""Tests for TickerConfig."""
import pytest
from ouevents_ticker import TickerConfig


def test_default_interval_is_one_second():
    """Default cadence is 1000 ms."""
    config = TickerConfig()
    assert config.interval_ms == 1000
    assert config.interval == 1.0


def test_custom_interval():
    config = TickerConfig(interval_ms=250)
    assert abs(config.interval - 0.25) < 1e-9


@pytest.mark.parametrize("interval_ms", [0, -1, -1000])
def test_non_positive_interval_rejected(interval_ms):
    """Zero or negative intervals raise ValueError."""
    with pytest.raises(ValueError):
        TickerConfig(interval_ms=interval_ms)


def test_config_is_frozen():
    """TickerConfig cannot be mutated after construction."""
    config = TickerConfig()
    with pytest.raises(AttributeError):
        config.interval_ms = 5  # type: ignore[misc]
