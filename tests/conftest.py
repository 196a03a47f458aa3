from datetime import datetime, timezone

import pytest

from chart_legends.cache.manager import render_cache
from chart_legends.models.tooltip import Candle


@pytest.fixture(autouse=True)
def clear_cache():
    render_cache.clear()
    yield
    render_cache.clear()


@pytest.fixture
def bullish_candle():
    return Candle(
        open_time=datetime(2024, 1, 24, 9, 30, tzinfo=timezone.utc),
        open=100.0,
        high=110.0,
        low=95.0,
        close=105.0,
        volume=1000.0,
    )


@pytest.fixture
def bearish_candle():
    return Candle(
        open_time=datetime(2024, 1, 24, 9, 35, tzinfo=timezone.utc),
        open=45500.0,
        high=46000.0,
        low=44500.0,
        close=45000.0,
        volume=1_250_000.0,
    )


SAMPLE_TIMESTAMP = datetime(2024, 1, 24, 14, 5, tzinfo=timezone.utc)
