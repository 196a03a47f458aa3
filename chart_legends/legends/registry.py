"""
Immutable chart-kind -> legend set lookup.
Keys are the ChartKind string values; extra string keys may be added via extend().
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from chart_legends.errors import InvalidLegendError, LegendNotFoundError
from chart_legends.legends.catalog import PREDEFINED_LEGENDS
from chart_legends.models.legend import ChartKind, LegendSet

logger = logging.getLogger(__name__)

KindKey = ChartKind | str


def normalize_kind(kind: KindKey) -> str:
    if isinstance(kind, ChartKind):
        return kind.value
    return kind.strip().lower()


class LegendRegistry:
    def __init__(self, legends: Mapping[KindKey, LegendSet]):
        table: dict[str, LegendSet] = {}
        for kind, legend in legends.items():
            key = normalize_kind(kind)
            if not key:
                raise InvalidLegendError("Chart kind key must not be empty")
            if key in table:
                raise InvalidLegendError(f"Duplicate legend for chart kind '{key}'")
            if not legend.entries:
                raise InvalidLegendError(f"Legend for '{key}' has no entries")
            table[key] = legend

        missing = [k.value for k in ChartKind if k.value not in table]
        if missing:
            raise InvalidLegendError(f"Missing legends for chart kinds: {', '.join(missing)}")

        self._table = MappingProxyType(table)

    def get(self, kind: KindKey) -> LegendSet:
        key = normalize_kind(kind)
        try:
            return self._table[key]
        except KeyError:
            raise LegendNotFoundError(key) from None

    def get_or_empty(self, kind: KindKey) -> LegendSet:
        try:
            return self.get(kind)
        except LegendNotFoundError as exc:
            logger.warning("Unknown chart kind '%s', falling back to empty legend", exc.kind)
            return LegendSet.empty()

    def kinds(self) -> list[str]:
        return list(self._table)

    def extend(self, legends: Mapping[KindKey, LegendSet]) -> LegendRegistry:
        merged: dict[KindKey, LegendSet] = dict(self._table)
        merged.update({normalize_kind(k): v for k, v in legends.items()})
        return LegendRegistry(merged)

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, str):
            return False
        return normalize_kind(kind) in self._table

    def __len__(self) -> int:
        return len(self._table)


legend_registry = LegendRegistry(PREDEFINED_LEGENDS)


def get_legend(kind: KindKey) -> LegendSet:
    return legend_registry.get(kind)


def get_legend_or_empty(kind: KindKey) -> LegendSet:
    return legend_registry.get_or_empty(kind)
