"""Validation helpers shared by the conflict detector and range membership."""

from __future__ import annotations

from datetime import date, datetime

import dateparser
from dateutil.parser import isoparse

from homework_scheduler.domain.errors import ValidationError
from homework_scheduler.domain.models import Subject

DateValue = datetime | date | str

# Complete absolute dates only, no relative phrases or missing parts
_DATEPARSER_SETTINGS = {
    "PARSERS": ["custom-formats", "absolute-time"],
    "REQUIRE_PARTS": ["day", "month", "year"],
    "RETURN_AS_TIMEZONE_AWARE": False,
}


def parse_subject(value: Subject | str) -> Subject:
    """Return the ``Subject`` member for *value*; unknown subjects are rejected."""
    if isinstance(value, Subject):
        return value
    try:
        return Subject(value)
    except ValueError:
        raise ValidationError(f"Invalid subject: {value!r}") from None


def parse_date_value(value: DateValue | None, field: str = "date") -> datetime:
    """Parse *value* into a datetime.

    Strings are tried as ISO-8601 first and then with ``dateparser`` so that
    inputs like ``"January 22, 2024"`` are accepted too.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing required field: {field}")
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {field} format: {value!r}")

    raw = value.strip()
    try:
        return isoparse(raw)
    except ValueError:
        pass
    result = dateparser.parse(raw, settings=_DATEPARSER_SETTINGS)
    if result is None:
        raise ValidationError(f"Invalid {field} format: {value!r}")
    return result


def to_day(value: DateValue | None, field: str = "date") -> date:
    """Normalize *value* to a calendar day, dropping any time-of-day.

    Aware datetimes keep their own wall-clock date; no timezone conversion.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_date_value(value, field).date()


def display_date(value: DateValue) -> str:
    """Return *value* the way the caller supplied it, for display."""
    if isinstance(value, str):
        return value
    return value.isoformat()
