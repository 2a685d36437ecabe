"""Tests for YearValue parsing and epoch arithmetic."""

import sys

import pytest

from year_cutoff.exceptions import ParseError, YearCutoffError
from year_cutoff.year_value import YearValue, parse_year_text


@pytest.mark.unit
class TestYearValueParse:
    """Test building a YearValue from text."""

    @pytest.mark.parametrize(
        "text,expected_text,expected_value",
        [
            ("2020", "2020", 2020),
            ("05", "05", 5),
            ("  5 ", "5", 5),
            ("\t0005\n", "0005", 5),
            ("-5", "-5", -5),
            ("+7", "+7", 7),
        ],
    )
    def test_valid_text(self, text, expected_text, expected_value):
        """Text is trimmed and parsed as a signed decimal integer."""
        year = YearValue.parse(text)
        assert year.text == expected_text
        assert year.value == expected_value

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "foobar", "20a", "1_000", "2,020", "20 20", "2020.0", "+", "٢٠"],
    )
    def test_invalid_text_raises_parse_error(self, text):
        """No partial parsing, separators or non-ASCII digits."""
        with pytest.raises(ParseError) as exc_info:
            YearValue.parse(text)
        assert exc_info.value.text == text

    @pytest.mark.skipif(
        not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
        reason="int string digit limit disabled",
    )
    def test_literal_over_int_digit_limit_raises_parse_error(self):
        """Matches the pattern but exceeds the interpreter's int string limit."""
        text = "1" * 5000
        with pytest.raises(ParseError) as exc_info:
            YearValue.parse(text)
        assert exc_info.value.text == text
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_non_string_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_year_text(2020)  # type: ignore[arg-type]

    def test_parse_error_hierarchy(self):
        """ParseError is both a package error and a ValueError."""
        with pytest.raises(YearCutoffError):
            YearValue.parse("foobar")
        with pytest.raises(ValueError):
            YearValue.parse("foobar")

    def test_parse_error_message_names_text(self):
        with pytest.raises(ParseError, match="foobar"):
            YearValue.parse("foobar")


@pytest.mark.unit
class TestYearValueFromInt:
    """Test building a YearValue from an integer."""

    @pytest.mark.parametrize("value,expected_text", [(5, "5"), (2020, "2020"), (-44, "-44"), (0, "0")])
    def test_canonical_text(self, value, expected_text):
        year = YearValue.from_int(value)
        assert year.text == expected_text
        assert year.value == value

    def test_immutable(self):
        year = YearValue.from_int(2020)
        with pytest.raises(AttributeError):
            year.value = 1999  # type: ignore[misc]


@pytest.mark.unit
class TestEpoch:
    """Test epoch and epoch offset."""

    @pytest.mark.parametrize(
        "value,epoch,offset",
        [
            (2020, 2000, 20),
            (2000, 2000, 0),
            (1999, 1900, 99),
            (5, 0, 5),
            (0, 0, 0),
            (-50, -100, 50),
        ],
    )
    def test_epoch_and_offset(self, value, epoch, offset):
        year = YearValue.from_int(value)
        assert year.epoch() == epoch
        assert year.epoch_offset() == offset
        assert year.epoch() + year.epoch_offset() == value
