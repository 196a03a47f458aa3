"""Tooltip content for a single point on a candlestick, P&L or price chart."""

from __future__ import annotations

from datetime import datetime

from chart_legends.models.tooltip import Candle, TooltipData, TooltipValue

GAIN_COLOR = "green"
LOSS_COLOR = "red"


def _change_color(change: float) -> str:
    return GAIN_COLOR if change >= 0 else LOSS_COLOR


def format_volume(volume: float) -> str:
    if volume >= 1_000_000:
        return f"{volume / 1_000_000:.1f}M"
    if volume >= 1_000:
        return f"{volume / 1_000:.1f}K"
    return f"{volume:.0f}"


def candlestick_tooltip(candle: Candle) -> TooltipData:
    close_color = GAIN_COLOR if candle.close >= candle.open else LOSS_COLOR
    return TooltipData(
        title="Candlestick Data",
        values=(
            TooltipValue(label="Open", value=f"{candle.open:.2f}"),
            TooltipValue(label="High", value=f"{candle.high:.2f}"),
            TooltipValue(label="Low", value=f"{candle.low:.2f}"),
            TooltipValue(label="Close", value=f"{candle.close:.2f}", color=close_color),
            TooltipValue(label="Volume", value=format_volume(candle.volume)),
        ),
    )


def pnl_tooltip(equity: float, timestamp: datetime, change: float) -> TooltipData:
    color = _change_color(change)
    if equity:
        pct_text = f"{change / equity * 100:+.1f}%"
    else:
        pct_text = "N/A"

    return TooltipData(
        title="P&L Data",
        values=(
            TooltipValue(label="Time", value=timestamp.strftime("%m/%d/%y, %H:%M")),
            TooltipValue(label="Equity", value=f"{equity:.2f}"),
            TooltipValue(label="Change", value=f"{change:+.2f}", color=color),
            TooltipValue(label="% Change", value=pct_text, color=color),
        ),
    )


def price_tooltip(price: float, timestamp: datetime, change: float | None = None) -> TooltipData:
    values = [
        TooltipValue(label="Time", value=timestamp.strftime("%H:%M")),
        TooltipValue(label="Price", value=f"{price:.2f}"),
    ]
    if change is not None:
        values.append(TooltipValue(label="Change", value=f"{change:+.2f}", color=_change_color(change)))

    return TooltipData(title="Price Data", values=tuple(values))
