"""datepicker.dates

Fixed gregorian helpers: day counts, weekday of the 1st, and the two textual
formats (`dd/mm/yyyy` for date mode, `mm/yyyy` for month mode).

Structured values are `datetime.date` (month 1-12). Grid and cursor code uses
0-based month indices; the conversion happens at the call sites.
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Literal

PickerMode = Literal["date", "month"]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

MONTH_NAMES_SHORT = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# Sunday first, matching first_weekday()
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

_DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")
_MONTH_RE = re.compile(r"^(\d{2})/(\d{4})$")


def days_in_month(year: int, month: int) -> int:
    """Number of days in `month` (0-11) of `year`."""
    return calendar.monthrange(year, month + 1)[1]


def first_weekday(year: int, month: int) -> int:
    """Day of week of the 1st of `month` (0-11), with 0=Sunday."""
    # date.weekday() is 0=Monday
    return (date(year, month + 1, 1).weekday() + 1) % 7


def as_date(value: date | datetime | None) -> date | None:
    """Drop the time-of-day from a datetime; dates pass through."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value


def is_same_day(a: date | None, b: date | None) -> bool:
    if a is None or b is None:
        return False
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def is_same_month(a: date | None, b: date | None) -> bool:
    if a is None or b is None:
        return False
    return (a.year, a.month) == (b.year, b.month)


def format_date(value: date) -> str:
    return f"{value.day:02d}/{value.month:02d}/{value.year}"


def format_month(value: date) -> str:
    return f"{value.month:02d}/{value.year}"


def format_value(value: date | None, mode: PickerMode) -> str:
    """Format a committed value for the text field ('' when unset)."""
    if value is None:
        return ""
    return format_date(value) if mode == "date" else format_month(value)


def parse_date(text: str) -> date | None:
    """Parse strict `dd/mm/yyyy`; None when malformed or out of nominal range."""
    match = _DATE_RE.match(text)
    if not match:
        return None
    day, month, year = (int(g) for g in match.groups())
    if month < 1 or month > 12:
        return None
    if year < 1 or day < 1 or day > days_in_month(year, month - 1):
        return None
    return date(year, month, day)


def parse_month(text: str) -> date | None:
    """Parse strict `mm/yyyy` to the 1st of that month."""
    match = _MONTH_RE.match(text)
    if not match:
        return None
    month, year = (int(g) for g in match.groups())
    if month < 1 or month > 12 or year < 1:
        return None
    return date(year, month, 1)


def parse_value(text: str, mode: PickerMode) -> date | None:
    return parse_date(text) if mode == "date" else parse_month(text)


def placeholder_for(mode: PickerMode) -> str:
    return "dd/mm/yyyy" if mode == "date" else "mm/yyyy"


def format_header(value: date, mode: PickerMode) -> str:
    """Popover header text: 'Sun, Jan 5' in date mode, 'Jan 2025' in month mode."""
    if mode == "date":
        day_name = DAY_NAMES[(value.weekday() + 1) % 7]
        return f"{day_name}, {MONTH_NAMES_SHORT[value.month - 1]} {value.day}"
    return f"{MONTH_NAMES_SHORT[value.month - 1]} {value.year}"
