"""Tests for CLI input validation models."""

import pytest
from pydantic import ValidationError

from termfolio.validation import SourceInput, ViewInput


class TestSourceInput:
    """Test source validation."""

    def test_strips_whitespace(self) -> None:
        assert SourceInput(source="  portfolio.yml \n").source == "portfolio.yml"

    @pytest.mark.parametrize("source", ["", "   ", "\t\n"], ids=["empty", "spaces", "control"])
    def test_blank_rejected(self, source: str) -> None:
        with pytest.raises(ValidationError):
            SourceInput(source=source)


class TestViewInput:
    """Test viewer input validation."""

    def test_width_optional(self) -> None:
        assert ViewInput(source="a.yml").width is None

    @pytest.mark.parametrize("width", [20, 80, 500])
    def test_width_in_range(self, width: int) -> None:
        assert ViewInput(source="a.yml", width=width).width == width

    @pytest.mark.parametrize("width", [0, 19, 501])
    def test_width_out_of_range(self, width: int) -> None:
        with pytest.raises(ValidationError):
            ViewInput(source="a.yml", width=width)
