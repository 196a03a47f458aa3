"""Tests for the legend card entry point."""

import sys
from unittest.mock import MagicMock, patch

import pytest

from chart_legends.cache.manager import render_cache
from chart_legends.errors import InvalidLegendRequest
from chart_legends.models.legend import ChartKind
from chart_legends.renderer.card import render_legend_card


class TestRenderLegendCard:
    def test_svg_for_kind(self):
        svg = render_legend_card(ChartKind.PNL)
        assert isinstance(svg, str)
        assert "Equity Over Time" in svg

    def test_string_kind(self):
        assert "Price Chart" in render_legend_card("Price")

    def test_unknown_kind_renders_empty_card(self):
        svg = render_legend_card("volume")
        assert svg.startswith("<svg")
        assert "<text" not in svg

    def test_result_is_cached(self):
        first = render_legend_card(ChartKind.PRICE, template="minimal")
        assert len(render_cache) == 1
        with patch("chart_legends.renderer.card.render_legend_svg") as render:
            second = render_legend_card(ChartKind.PRICE, template="minimal")
        render.assert_not_called()
        assert second is first

    def test_templates_cached_separately(self):
        render_legend_card(ChartKind.PRICE, template="classic")
        render_legend_card(ChartKind.PRICE, template="minimal")
        assert len(render_cache) == 2

    def test_invalid_template(self):
        with pytest.raises(InvalidLegendRequest):
            render_legend_card(ChartKind.PRICE, template="neon")

    def test_invalid_format(self):
        with pytest.raises(InvalidLegendRequest):
            render_legend_card(ChartKind.PRICE, format="gif")

    def test_png_uses_cairosvg(self):
        fake = MagicMock()
        fake.svg2png.return_value = b"\x89PNG"
        with patch.dict(sys.modules, {"cairosvg": fake}):
            data = render_legend_card(ChartKind.CANDLESTICK, format="png")
        assert data == b"\x89PNG"
        kwargs = fake.svg2png.call_args.kwargs
        assert kwargs["output_width"] == 360
        assert b"Bullish Candle" in kwargs["bytestring"]

    def test_png_without_cairosvg(self):
        with patch.dict(sys.modules, {"cairosvg": None}):
            with pytest.raises(RuntimeError) as exc_info:
                render_legend_card(ChartKind.CANDLESTICK, format="png")
        assert "pip install cairosvg" in str(exc_info.value)
