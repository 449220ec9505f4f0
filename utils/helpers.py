"""Helper utility functions."""

from datetime import date, datetime
from typing import Union

DATE_DISPLAY_FORMAT = "%a %b %d %Y"


def today() -> date:
    """Current calendar date in server local time."""
    return date.today()


def date_to_datetime(value: Union[date, datetime]) -> datetime:
    """Midnight datetime for a calendar date, as stored in the exercises collection."""
    if isinstance(value, datetime):
        value = value.date()
    return datetime(value.year, value.month, value.day)


def datetime_to_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def format_exercise_date(value: Union[date, datetime]) -> str:
    """Format a date as e.g. ``Mon Jan 01 2024``."""
    return datetime_to_date(value).strftime(DATE_DISPLAY_FORMAT)
