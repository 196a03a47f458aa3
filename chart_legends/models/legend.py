from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChartKind(str, Enum):
    CANDLESTICK = "candlestick"
    PNL = "pnl"
    PRICE = "price"


class ColorIndicator(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["color"] = "color"
    name: str = Field(min_length=1)  # palette token or "#RRGGBB"
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)


class IconIndicator(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["icon"] = "icon"
    name: str = Field(min_length=1)


Indicator = Annotated[Union[ColorIndicator, IconIndicator], Field(discriminator="kind")]


class LegendEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    label: str
    indicator: Indicator

    @field_validator("label")
    @classmethod
    def _label_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("legend label must not be empty")
        return value

    @property
    def color(self) -> ColorIndicator | None:
        return self.indicator if isinstance(self.indicator, ColorIndicator) else None

    @property
    def icon(self) -> IconIndicator | None:
        return self.indicator if isinstance(self.indicator, IconIndicator) else None


class LegendSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    entries: tuple[LegendEntry, ...] = ()

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(entry.label for entry in self.entries)

    @classmethod
    def empty(cls) -> LegendSet:
        return cls()


def color_entry(label: str, name: str, opacity: float = 1.0) -> LegendEntry:
    return LegendEntry(label=label, indicator=ColorIndicator(name=name, opacity=opacity))


def icon_entry(label: str, name: str) -> LegendEntry:
    return LegendEntry(label=label, indicator=IconIndicator(name=name))
