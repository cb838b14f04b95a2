"""Kernel time – UTC conversion and API date formatting."""
from __future__ import annotations

from datetime import UTC, datetime


def to_utc(value: datetime) -> datetime:
    """Return *value* converted to UTC.

    Naive datetimes are taken to already be in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_datetime(value: datetime, fmt: str) -> str:
    """Convert *value* to UTC and render it with the ``strftime`` pattern *fmt*."""
    return to_utc(value).strftime(fmt)


__all__ = ["format_datetime", "to_utc"]
