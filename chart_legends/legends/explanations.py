from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from chart_legends.errors import ExplanationNotFoundError
from chart_legends.legends.registry import KindKey, normalize_kind
from chart_legends.models.legend import ChartKind


class ChartExplanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    title: str
    description: str
    icon: str
    compact: bool = False

    @property
    def text(self) -> str:
        if self.compact:
            return self.title
        return f"{self.title}: {self.description}"


_EXPLANATIONS: dict[str, tuple[str, str, str]] = {
    ChartKind.CANDLESTICK.value: (
        "Candlestick Chart",
        "Shows open, high, low, close prices and volume for each time period",
        "chart.bar",
    ),
    ChartKind.PNL.value: (
        "P&L Chart",
        "Displays your profit and loss over time, showing account equity changes",
        "dollarsign.circle",
    ),
    ChartKind.PRICE.value: (
        "Price Chart",
        "Shows price movement over time with trend visualization",
        "chart.line.uptrend.xyaxis",
    ),
    "volume": (
        "Volume Chart",
        "Displays trading volume for each time period",
        "chart.bar.fill",
    ),
}


def explain(kind: KindKey, compact: bool = False) -> ChartExplanation:
    key = normalize_kind(kind)
    if key not in _EXPLANATIONS:
        raise ExplanationNotFoundError(key)
    title, description, icon = _EXPLANATIONS[key]
    return ChartExplanation(kind=key, title=title, description=description, icon=icon, compact=compact)
