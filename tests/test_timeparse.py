"""Tests for timestamp parsing and formatting."""

import logging

import pytest

from ytclip.errors import InvalidComponentError, InvalidFormatError, ParseError
from ytclip.timeparse import format_number, format_seconds, parse_time


class TestParseTime:
    def test_seconds_only(self):
        assert parse_time("30") == 30.0

    def test_minutes_seconds(self):
        assert parse_time("1:30") == 90.0

    def test_hours_minutes_seconds(self):
        assert parse_time("1:30:45") == 5445.0

    def test_fractional_seconds(self):
        assert parse_time("1:30.5") == 90.5

    def test_components_are_not_range_checked(self):
        assert parse_time("90") == 90.0
        assert parse_time("75:00") == 4500.0
        assert parse_time("0:0:125") == 125.0

    def test_leading_zeros(self):
        assert parse_time("00:01:05") == 65.0

    def test_surrounding_whitespace_in_field(self):
        assert parse_time(" 30") == 30.0


class TestParseTimeFormatErrors:
    @pytest.mark.parametrize("text", ["", "   ", "1:2:3:4", "1:2:3:4:5"])
    def test_invalid_format(self, text):
        with pytest.raises(InvalidFormatError):
            parse_time(text)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_time("1:2:3:4")


class TestParseTimeComponentErrors:
    @pytest.mark.parametrize(
        "text, component",
        [
            ("abc", "seconds"),
            ("a:30", "minutes"),
            ("1:xx", "seconds"),
            ("h:30:00", "hours"),
            ("1::00", "minutes"),
            ("inf", "seconds"),
            ("1:nan", "seconds"),
        ],
    )
    def test_reports_failing_component(self, text, component):
        with pytest.raises(InvalidComponentError) as exc_info:
            parse_time(text)
        assert exc_info.value.component == component
        assert component in str(exc_info.value)

    def test_component_error_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_time("a:30")


class TestNegativeComponents:
    def test_negative_seconds_accepted(self):
        assert parse_time("-5") == -5.0

    def test_negative_component_distorts_total(self):
        assert parse_time("1:-30") == 30.0

    def test_negative_total_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ytclip.timeparse"):
            parse_time("-1:00")
        assert "negative" in caplog.text


class TestFormatSeconds:
    def test_under_an_hour(self):
        assert format_seconds(90) == "1:30.0"

    def test_over_an_hour(self):
        assert format_seconds(5445) == "1:30:45.0"

    def test_zero(self):
        assert format_seconds(0) == "0:00.0"


class TestFormatNumber:
    def test_integral_drops_fraction(self):
        assert format_number(90.0) == "90"

    def test_fraction_kept(self):
        assert format_number(90.5) == "90.5"

    def test_round_trips(self):
        value = 5.3 - 1.1
        assert float(format_number(value)) == value
