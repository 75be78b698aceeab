"""Tests for input parsers."""

import pytest

from loan_calc.models import RateChange
from loan_calc.parsing import (
    INTEGER_ERROR,
    NUMBER_ERROR,
    YES_NO_ERROR,
    ParseResult,
    parse_float,
    parse_int,
    parse_rate_change,
    parse_yes_no,
)


class TestParseResult:
    """Tests for ParseResult."""

    def test_success(self) -> None:
        result = ParseResult.success(3)
        assert result.ok
        assert result.value == 3

    def test_failure(self) -> None:
        result = ParseResult.failure("bad")
        assert not result.ok
        assert result.value is None
        assert result.error == "bad"


class TestParseFloat:
    """Tests for parse_float."""

    @pytest.mark.parametrize(
        "text, expected",
        [("10000", 10000.0), ("  6.5\n", 6.5), ("-1", -1.0), ("1e3", 1000.0), ("0", 0.0)],
    )
    def test_valid(self, text: str, expected: float) -> None:
        result = parse_float(text)
        assert result.ok
        assert result.value == expected

    @pytest.mark.parametrize(
        "text, expected",
        [("12abc", 12.0), ("6.5 %", 6.5), ("1,000", 1.0), (".5x", 0.5), ("2e", 2.0)],
    )
    def test_leading_number_taken(self, text: str, expected: float) -> None:
        """Only the leading number counts; the rest of the line is ignored."""
        assert parse_float(text).value == expected

    @pytest.mark.parametrize("text", ["", "abc", "nan", "inf", "-inf", "1e999", ".", "$100"])
    def test_invalid(self, text: str) -> None:
        result = parse_float(text)
        assert not result.ok
        assert result.error == NUMBER_ERROR


class TestParseInt:
    """Tests for parse_int."""

    @pytest.mark.parametrize("text, expected", [("12", 12), (" -3 ", -3), ("+7\n", 7), ("0", 0)])
    def test_valid(self, text: str, expected: int) -> None:
        result = parse_int(text)
        assert result.ok
        assert result.value == expected

    @pytest.mark.parametrize(
        "text, expected", [("12 months", 12), ("12.5", 12), ("0x10", 0), ("-4y", -4)]
    )
    def test_leading_integer_taken(self, text: str, expected: int) -> None:
        """Only the leading integer counts; the rest of the line is ignored."""
        assert parse_int(text).value == expected

    @pytest.mark.parametrize("text", ["", "   ", "two", ".5", "- 3"])
    def test_invalid(self, text: str) -> None:
        result = parse_int(text)
        assert not result.ok
        assert result.error == INTEGER_ERROR


class TestParseYesNo:
    """Tests for parse_yes_no."""

    @pytest.mark.parametrize("text", ["y", "Y", "yes", " Y\n", "yep"])
    def test_yes(self, text: str) -> None:
        assert parse_yes_no(text).value is True

    @pytest.mark.parametrize("text", ["n", "N", "x", "no", "1"])
    def test_anything_else_is_no(self, text: str) -> None:
        result = parse_yes_no(text)
        assert result.ok
        assert result.value is False

    @pytest.mark.parametrize("text", ["", "  ", "\n"])
    def test_blank_is_not_an_answer(self, text: str) -> None:
        result = parse_yes_no(text)
        assert not result.ok
        assert result.error == YES_NO_ERROR


class TestParseRateChange:
    """Tests for parse_rate_change."""

    def test_valid(self) -> None:
        result = parse_rate_change("13:7.25")
        assert result.value == RateChange(month=13, annual_rate_percent=7.25)

    @pytest.mark.parametrize("text", ["13", "x:7", "13:abc", ":", "13:nan", "13abc:7", "13:7.5x"])
    def test_invalid(self, text: str) -> None:
        assert not parse_rate_change(text).ok
