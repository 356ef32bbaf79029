"""datepicker.grid

Pure grid builders for the three picker views.

- Day grid: leading blanks up to the weekday of the 1st, then one cell per day,
  wrapped into rows of 7. The last row is not padded.
- Month grid: 4 rows of 3, cell i is month i (0-11).
- Year list: one cell per year in the (possibly narrowed) year range.

Bounds are inclusive and compared at day granularity.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from datepicker.config import YEAR_MAX, YEAR_MIN
from datepicker.dates import (
    MONTH_NAMES_SHORT,
    days_in_month,
    first_weekday,
    is_same_day,
)


@dataclass(frozen=True)
class DayCell:
    """A cell of the day grid. `day` is None for a leading blank."""

    day: int | None
    disabled: bool = False
    selected: bool = False

    @property
    def blank(self) -> bool:
        return self.day is None


@dataclass(frozen=True)
class MonthCell:
    index: int
    disabled: bool = False
    selected: bool = False

    @property
    def label(self) -> str:
        return MONTH_NAMES_SHORT[self.index]


@dataclass(frozen=True)
class YearCell:
    year: int
    selected: bool = False


@dataclass(frozen=True)
class YearRange:
    start: int
    end: int

    def __contains__(self, year: int) -> bool:
        return self.start <= year <= self.end

    def __iter__(self):
        return iter(range(self.start, self.end + 1))


def year_range(min_date: date | None = None, max_date: date | None = None) -> YearRange:
    """Fixed year range, narrowed to the bound years when bounds are set."""
    return YearRange(
        start=min_date.year if min_date else YEAR_MIN,
        end=max_date.year if max_date else YEAR_MAX,
    )


def is_day_disabled(
    year: int,
    month: int,
    day: int,
    min_date: date | None = None,
    max_date: date | None = None,
) -> bool:
    current = date(year, month + 1, day)
    if min_date and current < min_date:
        return True
    if max_date and current > max_date:
        return True
    return False


def is_month_disabled(
    year: int,
    month: int,
    min_date: date | None = None,
    max_date: date | None = None,
) -> bool:
    if min_date and (
        year < min_date.year
        or (year == min_date.year and month < min_date.month - 1)
    ):
        return True
    if max_date and (
        year > max_date.year
        or (year == max_date.year and month > max_date.month - 1)
    ):
        return True
    return False


def build_day_grid(
    year: int,
    month: int,
    min_date: date | None = None,
    max_date: date | None = None,
    value: date | None = None,
) -> list[list[DayCell]]:
    """Rows of day cells for `month` (0-11) of `year`."""
    total = days_in_month(year, month)
    first = first_weekday(year, month)

    rows: list[list[DayCell]] = []
    cells: list[DayCell] = [DayCell(day=None) for _ in range(first)]

    for day in range(1, total + 1):
        cells.append(
            DayCell(
                day=day,
                disabled=is_day_disabled(year, month, day, min_date, max_date),
                selected=is_same_day(date(year, month + 1, day), value),
            )
        )
        if (first + day) % 7 == 0 or day == total:
            rows.append(cells)
            cells = []

    return rows


def build_month_grid(
    year: int,
    min_date: date | None = None,
    max_date: date | None = None,
    value: date | None = None,
) -> list[list[MonthCell]]:
    rows: list[list[MonthCell]] = []
    for row in range(4):
        cells = []
        for col in range(3):
            index = row * 3 + col
            cells.append(
                MonthCell(
                    index=index,
                    disabled=is_month_disabled(year, index, min_date, max_date),
                    selected=bool(
                        value and value.year == year and value.month - 1 == index
                    ),
                )
            )
        rows.append(cells)
    return rows


def build_year_list(years: YearRange, selected_year: int) -> list[YearCell]:
    return [YearCell(year=y, selected=y == selected_year) for y in years]
