from chart_legends.legends.explanations import ChartExplanation, explain
from chart_legends.legends.registry import (
    LegendRegistry,
    get_legend,
    get_legend_or_empty,
    legend_registry,
)

__all__ = [
    "ChartExplanation",
    "LegendRegistry",
    "explain",
    "get_legend",
    "get_legend_or_empty",
    "legend_registry",
]
