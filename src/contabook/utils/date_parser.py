"""Date parsing utilities."""

import math
from datetime import date, datetime, timedelta
from typing import Any, Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

# Day zero of spreadsheet serial dates (accounts for the 1900 leap-year bug).
EXCEL_EPOCH = date(1899, 12, 30)

# Two distinct fills for missing parts; a string naming day, month and year
# parses to the same date under both.
_PARTIAL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this year", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def excel_serial_to_date(serial: float) -> date:
    """Convert a spreadsheet serial day number to a calendar date.

    The fractional part (time of day) is discarded.

    Raises:
        OverflowError: If the serial falls outside the supported date range
    """
    return EXCEL_EPOCH + timedelta(days=math.floor(serial))


def parse_sheet_date(value: Any, fallback: Optional[date]) -> Optional[date]:
    """Parse a spreadsheet cell into a date, never failing.

    Accepts, in order:
    - ``datetime`` / ``date`` cells (what openpyxl yields for formatted cells)
    - numbers and numeric strings, read as spreadsheet serial days
    - ISO strings such as "2023-01-05" or "2023-01-05T10:00:00"
    - anything else ``dateutil`` understands, read day-first ("05/01/2023"
      is 5 January)

    Blank or unparseable values, and strings lacking a day, month or year
    ("10:30", "Mar 2023"), yield ``fallback``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool) or value is None:
        return fallback

    if isinstance(value, (int, float)):
        try:
            return excel_serial_to_date(value)
        except (OverflowError, ValueError):
            return fallback

    text = str(value).strip()
    if not text:
        return fallback

    try:
        serial = float(text)
    except ValueError:
        pass
    else:
        try:
            return excel_serial_to_date(serial)
        except (OverflowError, ValueError):
            return fallback

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    # Chilean sheets write dd/mm/yyyy
    try:
        parsed = {
            date_parser.parse(text, dayfirst=True, default=default).date()
            for default in _PARTIAL_DEFAULTS
        }
    except (ValueError, OverflowError):
        return fallback
    if len(parsed) != 1:
        # "10:30" or "Mar" would otherwise borrow the missing parts
        return fallback
    return parsed.pop()
