"""Template color schemes and icon paths for legend card rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class TemplateColors:
    background: str
    title: str
    text_secondary: str
    border: str
    tokens: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)


TEMPLATES: dict[str, TemplateColors] = {
    "classic": TemplateColors(
        background="#F2F2F7",
        title="#3C3C43",
        text_secondary="#6B7280",
        border="#E5E7EB",
        tokens=MappingProxyType({
            "green": "#34C759",
            "red": "#FF3B30",
            "blue": "#007AFF",
            "orange": "#FF9500",
            "secondary": "#8E8E93",
        }),
    ),
    "minimal": TemplateColors(
        background="#161B22",
        title="#E6EDF3",
        text_secondary="#8B949E",
        border="#30363D",
        tokens=MappingProxyType({
            "green": "#30D158",
            "red": "#FF453A",
            "blue": "#0A84FF",
            "orange": "#FF9F0A",
            "secondary": "#8B949E",
        }),
    ),
}

# Icon tokens as SVG fragments on a 24x24 grid
ICON_PATHS: dict[str, str] = {
    "arrow.up.arrow.down": '<path d="M16 17.01V10h-2v7.01h-3L15 21l4-3.99h-3zM9 3L5 6.99h3V14h2V6.99h3L9 3z" fill="{color}"/>',
    "chart.line.uptrend.xyaxis": '<path d="M3.5 18.49l6-6.01 4 4L22 6.92l-1.41-1.41-7.09 7.97-4-4L2 16.99z" fill="{color}"/>',
    "circle.fill": '<circle cx="12" cy="12" r="8" fill="{color}"/>',
    "clock": '<path d="M11.99 2C6.47 2 2 6.48 2 12s4.47 10 9.99 10C17.52 22 22 17.52 22 12S17.52 2 11.99 2zM12 20c-4.42 0-8-3.58-8-8s3.58-8 8-8 8 3.58 8 8-3.58 8-8 8zm.5-13H11v6l5.25 3.15.75-1.23-4.5-2.67z" fill="{color}"/>',
    "arrow.up.right": '<path d="M9 5v2h6.59L4 18.59 5.41 20 17 8.41V15h2V5z" fill="{color}"/>',
    "chart.bar": '<path d="M5 9.2h3V19H5zM10.6 5h2.8v14h-2.8zm5.6 8H19v6h-2.8z" fill="{color}"/>',
    "chart.bar.fill": '<path d="M4 9h4v11H4zm6-5h4v16h-4zm6 8h4v8h-4z" fill="{color}"/>',
    "dollarsign.circle": '<path d="M12 2C6.48 2 2 6.48 2 12s4.48 10 10 10 10-4.48 10-10S17.52 2 12 2zm1.41 16.09V20h-2.67v-1.93c-1.71-.36-3.16-1.46-3.27-3.4h1.96c.1 1.05.82 1.87 2.65 1.87 1.96 0 2.4-.98 2.4-1.59 0-.83-.44-1.61-2.67-2.14-2.48-.6-4.18-1.62-4.18-3.67 0-1.72 1.39-2.84 3.11-3.21V4h2.67v1.95c1.86.45 2.79 1.86 2.85 3.39H14.3c-.05-1.11-.64-1.87-2.22-1.87-1.5 0-2.4.68-2.4 1.64 0 .84.65 1.39 2.67 1.91s4.18 1.39 4.18 3.91c-.01 1.83-1.38 2.83-3.12 3.16z" fill="{color}"/>',
}

DEFAULT_ICON = "circle.fill"
