"""shellui.app

Compositions built from `shellui.components` and the picker core.
"""

from .calendar import (
    CalendarDays,
    CalendarMonths,
    CalendarPicker,
    CalendarPopover,
    CalendarYears,
)

__all__ = [
    "CalendarPicker",
    "CalendarPopover",
    "CalendarDays",
    "CalendarMonths",
    "CalendarYears",
]
