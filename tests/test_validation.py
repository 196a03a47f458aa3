import pytest

from chart_legends.errors import InvalidLegendRequest
from chart_legends.validation.input import validate_format, validate_template


class TestValidateTemplate:
    def test_valid(self):
        assert validate_template("classic") == "classic"
        assert validate_template(" Minimal ") == "minimal"

    def test_invalid(self):
        with pytest.raises(InvalidLegendRequest) as exc_info:
            validate_template("dark")
        assert "classic, minimal" in str(exc_info.value)


class TestValidateFormat:
    def test_valid(self):
        assert validate_format("svg") == "svg"
        assert validate_format("PNG") == "png"

    def test_invalid(self):
        with pytest.raises(InvalidLegendRequest):
            validate_format("json")
