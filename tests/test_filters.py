"""Tests for the Solr filter syntax used by splits."""

from datetime import datetime, timedelta, timezone

from shardsplit.providers.solr.filters import (
    format_value,
    missing_filter,
    or_filter,
    range_filter,
)


class TestRangeFilter:
    """Half-open range rendering."""

    def test_closed_range(self):
        assert range_filter("price", 10, 20) == "price:[10 TO 20}"

    def test_open_lower(self):
        assert range_filter("price", None, 20) == "price:[* TO 20}"

    def test_open_upper_is_inclusive(self):
        """An unbounded upper end must still match the maximum value."""
        assert range_filter("price", 10, None) == "price:[10 TO *]"

    def test_fully_open(self):
        assert range_filter("price", None, None) == "price:[* TO *]"

    def test_missing_and_or(self):
        assert missing_filter("price") == "-price:[* TO *]"
        assert or_filter("a:[1 TO 2}", "a:[5 TO 6}") == "a:[1 TO 2} OR a:[5 TO 6}"


class TestFormatValue:
    """Bound value rendering."""

    def test_numbers(self):
        assert format_value(42) == "42"
        assert format_value(0.5) == "0.5"
        assert format_value(-3) == "-3"

    def test_datetime_utc(self):
        value = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
        assert format_value(value) == "2024-03-01T12:30:00.000Z"

    def test_datetime_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2024, 3, 1, 14, 30, tzinfo=plus_two)
        assert format_value(value) == "2024-03-01T12:30:00.000Z"

    def test_string_escaping(self):
        assert format_value("a b:c") == "a\\ b\\:c"
