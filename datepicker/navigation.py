"""datepicker.navigation

Display cursor and the bounded month/year navigation over it.

Navigation never touches the committed value. A move that the bounds forbid is
a no-op and returns False; it is never clamped.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date

from datepicker.grid import YearRange, year_range


@dataclass
class DisplayCursor:
    """Month/year framed in the grid. `month` is 0-11."""

    year: int
    month: int

    @classmethod
    def from_date(cls, value: date) -> "DisplayCursor":
        return cls(year=value.year, month=value.month - 1)


class Navigator:
    """Moves a DisplayCursor within optional inclusive bounds."""

    def __init__(
        self,
        cursor: DisplayCursor,
        min_date: date | None = None,
        max_date: date | None = None,
    ):
        self.cursor = cursor
        self.min_date = min_date
        self.max_date = max_date

    @property
    def years(self) -> YearRange:
        return year_range(self.min_date, self.max_date)

    @property
    def can_go_prev_month(self) -> bool:
        if self.cursor.year == MINYEAR and self.cursor.month == 0:
            return False
        if self.min_date is None:
            return True
        return not (
            self.cursor.year == self.years.start
            and self.cursor.month <= self.min_date.month - 1
        )

    @property
    def can_go_next_month(self) -> bool:
        if self.cursor.year == MAXYEAR and self.cursor.month == 11:
            return False
        if self.max_date is None:
            return True
        return not (
            self.cursor.year == self.years.end
            and self.cursor.month >= self.max_date.month - 1
        )

    @property
    def can_go_prev_year(self) -> bool:
        return self.cursor.year > self.years.start

    @property
    def can_go_next_year(self) -> bool:
        return self.cursor.year < self.years.end

    def prev_month(self) -> bool:
        if not self.can_go_prev_month:
            return False
        if self.cursor.month == 0:
            self.cursor.month = 11
            self.cursor.year -= 1
        else:
            self.cursor.month -= 1
        return True

    def next_month(self) -> bool:
        if not self.can_go_next_month:
            return False
        if self.cursor.month == 11:
            self.cursor.month = 0
            self.cursor.year += 1
        else:
            self.cursor.month += 1
        return True

    def prev_year(self) -> bool:
        if not self.can_go_prev_year:
            return False
        self.cursor.year -= 1
        return True

    def next_year(self) -> bool:
        if not self.can_go_next_year:
            return False
        self.cursor.year += 1
        return True

    def jump_to(self, year: int, month: int | None = None) -> None:
        """Set the cursor directly (year pick, month pick in date mode, reset)."""
        self.cursor.year = year
        if month is not None:
            self.cursor.month = month
