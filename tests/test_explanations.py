import pytest

from chart_legends.errors import ExplanationNotFoundError, LegendNotFoundError
from chart_legends.legends import explain
from chart_legends.models.legend import ChartKind


class TestExplain:
    def test_candlestick(self):
        explanation = explain(ChartKind.CANDLESTICK)
        assert explanation.title == "Candlestick Chart"
        assert explanation.icon == "chart.bar"
        assert "open, high, low, close" in explanation.description

    def test_pnl(self):
        explanation = explain("pnl")
        assert explanation.title == "P&L Chart"
        assert explanation.icon == "dollarsign.circle"

    def test_price(self):
        explanation = explain(ChartKind.PRICE)
        assert explanation.title == "Price Chart"
        assert explanation.icon == "chart.line.uptrend.xyaxis"

    def test_volume(self):
        explanation = explain(" Volume ")
        assert explanation.kind == "volume"
        assert explanation.title == "Volume Chart"
        assert explanation.description == "Displays trading volume for each time period"
        assert explanation.icon == "chart.bar.fill"

    @pytest.mark.parametrize("kind", list(ChartKind))
    def test_every_kind_explained(self, kind):
        assert explain(kind).kind == kind.value

    def test_full_text(self):
        explanation = explain(ChartKind.PRICE)
        assert explanation.text == "Price Chart: Shows price movement over time with trend visualization"

    def test_compact_text_is_title(self):
        assert explain(ChartKind.PNL, compact=True).text == "P&L Chart"

    def test_unknown_kind(self):
        with pytest.raises(ExplanationNotFoundError) as exc_info:
            explain("heatmap")
        assert exc_info.value.kind == "heatmap"
        assert str(exc_info.value) == "No explanation available for chart kind 'heatmap'"

    def test_unknown_kind_is_a_lookup_miss(self):
        with pytest.raises(LegendNotFoundError):
            explain("heatmap")
