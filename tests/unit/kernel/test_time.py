"""Unit tests for kernel time helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from pipeliner_client.config.defaults import DATE_FORMAT
from pipeliner_client.kernel.time import format_datetime, to_utc


class TestToUtc:
    def test_naive_is_taken_as_utc(self) -> None:
        result = to_utc(datetime(2014, 10, 10, 10, 10, 10))
        assert result == datetime(2014, 10, 10, 10, 10, 10, tzinfo=UTC)

    def test_aware_is_converted(self) -> None:
        value = datetime(2014, 10, 10, 10, 10, 10, tzinfo=timezone(timedelta(hours=2)))
        assert to_utc(value) == datetime(2014, 10, 10, 8, 10, 10, tzinfo=UTC)
        assert to_utc(value).utcoffset() == timedelta(0)


class TestFormatDatetime:
    def test_default_format(self) -> None:
        value = datetime(2014, 10, 10, 10, 10, 10, tzinfo=timezone(timedelta(hours=2)))
        assert format_datetime(value, DATE_FORMAT) == "2014-10-10 08:10:10"

    def test_crosses_day_boundary(self) -> None:
        value = datetime(2015, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1)))
        assert format_datetime(value, DATE_FORMAT) == "2014-12-31 23:30:00"

    def test_custom_format(self) -> None:
        assert format_datetime(datetime(2014, 5, 6), "%d.%m.%Y") == "06.05.2014"
