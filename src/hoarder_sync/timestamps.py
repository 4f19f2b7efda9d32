"""Timestamp helpers.

Remote timestamps are opaque ISO 8601 strings; everything rendered locally is
normalised to UTC.
"""

from __future__ import annotations

from datetime import UTC, datetime


def parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def to_iso_utc(value: str | datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    parsed = parse_timestamp(value)
    return f"{parsed:%Y-%m-%dT%H:%M:%S}.{parsed.microsecond // 1000:03d}Z"


def iso_date(value: str | datetime) -> str:
    return parse_timestamp(value).strftime("%Y-%m-%d")


def long_date(value: str | datetime) -> str:
    """Format as ``January 5, 2024``."""
    parsed = parse_timestamp(value)
    return f"{parsed:%B} {parsed.day}, {parsed.year}"
