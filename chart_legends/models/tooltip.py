from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Candle(BaseModel):
    open_time: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float


class TooltipValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    color: str | None = None


class TooltipData(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    values: tuple[TooltipValue, ...]

    def value_for(self, label: str) -> str | None:
        for item in self.values:
            if item.label == label:
                return item.value
        return None
