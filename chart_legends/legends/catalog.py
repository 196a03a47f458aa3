"""Predefined legend sets, one per chart kind, in render order."""

from __future__ import annotations

from chart_legends.models.legend import ChartKind, LegendSet, color_entry, icon_entry

CANDLESTICK_LEGEND = LegendSet(
    title="Chart Legend",
    entries=(
        color_entry("Bullish Candle", "green"),
        color_entry("Bearish Candle", "red"),
        color_entry("Volume", "blue", opacity=0.6),
        icon_entry("Price Range", "arrow.up.arrow.down"),
    ),
)

PNL_LEGEND = LegendSet(
    title="Profit & Loss Chart",
    entries=(
        color_entry("Profit", "green"),
        color_entry("Loss", "red"),
        icon_entry("Equity Over Time", "chart.line.uptrend.xyaxis"),
        color_entry("Break Even", "secondary"),
    ),
)

PRICE_LEGEND = LegendSet(
    title="Price Chart",
    entries=(
        color_entry("Price Movement", "blue"),
        icon_entry("Current Price", "circle.fill"),
        icon_entry("Time Period", "clock"),
        icon_entry("Price Trend", "arrow.up.right"),
    ),
)

PREDEFINED_LEGENDS: dict[ChartKind, LegendSet] = {
    ChartKind.CANDLESTICK: CANDLESTICK_LEGEND,
    ChartKind.PNL: PNL_LEGEND,
    ChartKind.PRICE: PRICE_LEGEND,
}
