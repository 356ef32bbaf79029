"""datepicker.picker

`DatePicker`: the calendar core behind the picker widget.

It ties together the view state machine (Days / Months / Years), the popover
lifecycle (Closed / Open), bounded navigation, the grid builders and the
text-field sync. Every user event is a method; each returns whether anything
observable happened. Nothing here raises for user input: disabled targets and
rejected text are inert.

Usage:
    picker = DatePicker(
        PickerOptions(mode="date", min_date=date(2024, 1, 10)),
        on_change=save_date,
    )
    picker.click_icon()        # open
    picker.select_day(15)      # commits, closes
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable

from datepicker.dates import MONTH_NAMES, as_date, days_in_month, format_header
from datepicker.dismiss import DismissListener, DismissScope
from datepicker.grid import (
    DayCell,
    MonthCell,
    YearCell,
    YearRange,
    build_day_grid,
    build_month_grid,
    build_year_list,
    is_day_disabled,
    is_month_disabled,
)
from datepicker.navigation import DisplayCursor, Navigator
from datepicker.options import PickerOptions
from datepicker.state import UNSET, Controllable, _Unset
from datepicker.text_sync import CommitResult, TextSync

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"


# Props that re-run the open reset while the popover is open
_RESET_DEPS = ("mode", "default_date")


class DatePicker:
    def __init__(
        self,
        options: PickerOptions | None = None,
        *,
        value: date | datetime | None | _Unset = UNSET,
        open: bool | _Unset = UNSET,
        on_change: Callable[[date], None] | None = None,
        on_open_change: Callable[[bool], None] | None = None,
        today: Callable[[], date] = date.today,
        dismiss_scope: DismissScope | None = None,
    ):
        self.options = options or PickerOptions()
        self._today = today
        self._value: Controllable[date | None] = Controllable(
            None,
            external=UNSET if value is UNSET else as_date(value),
            on_change=on_change,
        )
        self._open: Controllable[bool] = Controllable(
            False, external=open, on_change=on_open_change
        )
        self._dismiss = DismissListener(dismiss_scope)

        self.view = self._initial_view()
        self.previous_view = self.view
        self.text = TextSync(self.options.mode)
        self.nav = Navigator(
            DisplayCursor.from_date(self._target_date()),
            self.options.min_date,
            self.options.max_date,
        )

        if self.is_open:
            self._on_opened()

    # ------------------------------------------------------------------
    # Read model
    # ------------------------------------------------------------------

    @property
    def mode(self) -> str:
        return self.options.mode

    @property
    def value(self) -> date | None:
        return self._value.value

    @property
    def is_open(self) -> bool:
        return self._open.value

    @property
    def cursor(self) -> DisplayCursor:
        return self.nav.cursor

    @property
    def year_bounds(self) -> YearRange:
        return self.nav.years

    @property
    def display_text(self) -> str:
        return self.text.display_text(self.value)

    @property
    def editing(self) -> bool:
        return self.text.editing

    @property
    def header_year(self) -> int:
        return self.value.year if self.value else self.cursor.year

    @property
    def header_text(self) -> str:
        return format_header(self.value or self._fallback_date(), self.mode)

    @property
    def nav_label(self) -> str:
        if self.view is ViewMode.DAYS:
            return f"{MONTH_NAMES[self.cursor.month]} {self.cursor.year}"
        if self.view is ViewMode.MONTHS:
            return str(self.cursor.year)
        return ""

    @property
    def can_go_prev_month(self) -> bool:
        return self.nav.can_go_prev_month

    @property
    def can_go_next_month(self) -> bool:
        return self.nav.can_go_next_month

    @property
    def can_go_prev_year(self) -> bool:
        return self.nav.can_go_prev_year

    @property
    def can_go_next_year(self) -> bool:
        return self.nav.can_go_next_year

    def day_grid(self) -> list[list[DayCell]]:
        return build_day_grid(
            self.cursor.year,
            self.cursor.month,
            self.options.min_date,
            self.options.max_date,
            self.value,
        )

    def month_grid(self) -> list[list[MonthCell]]:
        return build_month_grid(
            self.cursor.year,
            self.options.min_date,
            self.options.max_date,
            self.value,
        )

    def year_list(self) -> list[YearCell]:
        return build_year_list(self.year_bounds, self.cursor.year)

    # ------------------------------------------------------------------
    # Popover lifecycle
    # ------------------------------------------------------------------

    def click_icon(self) -> bool:
        """Trailing calendar icon: toggles the popover."""
        if self.options.disabled:
            return False
        return self._set_open(not self.is_open)

    def click_field(self) -> bool:
        """Click on the text field. Only toggles when the field is read-only."""
        if self.options.disabled or not self.options.read_only:
            return False
        return self._set_open(not self.is_open)

    def request_open_change(self, open: bool) -> bool:
        """Open-state request from the popover (outside click, escape)."""
        if open == self.is_open:
            return False
        if open and self.options.disabled:
            return False
        return self._set_open(open)

    def dismiss(self) -> bool:
        return self.request_open_change(False)

    def close(self) -> None:
        """Tear down: release the outside-click listener."""
        self._dismiss.detach()

    def __enter__(self) -> "DatePicker":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Views and navigation
    # ------------------------------------------------------------------

    def click_year_header(self) -> bool:
        if not self._interactive() or self.view is ViewMode.YEARS:
            return False
        if self.editing:
            # focus leaves the field before the header click lands
            self.commit()
        self.previous_view = self.view
        self.view = ViewMode.YEARS
        return True

    def prev_month(self) -> bool:
        return self._navigate(self.nav.prev_month, "prev_month")

    def next_month(self) -> bool:
        return self._navigate(self.nav.next_month, "next_month")

    def prev_year(self) -> bool:
        return self._navigate(self.nav.prev_year, "prev_year")

    def next_year(self) -> bool:
        return self._navigate(self.nav.next_year, "next_year")

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_day(self, day: int) -> bool:
        if not self._interactive():
            return False
        year, month = self.cursor.year, self.cursor.month
        if not 1 <= day <= days_in_month(year, month) or is_day_disabled(
            year, month, day, self.options.min_date, self.options.max_date
        ):
            logger.debug("ignored click on day %s of %s-%02d", day, year, month + 1)
            return False
        self._commit_value(date(year, month + 1, day))
        self._set_open(False)
        return True

    def select_month(self, index: int) -> bool:
        if not self._interactive():
            return False
        year = self.cursor.year
        if not 0 <= index <= 11 or is_month_disabled(
            year, index, self.options.min_date, self.options.max_date
        ):
            logger.debug("ignored click on month %s of %s", index, year)
            return False
        if self.mode == "month":
            self._commit_value(date(year, index + 1, 1))
            self._set_open(False)
        else:
            self.nav.jump_to(year, index)
            self.view = ViewMode.DAYS
        return True

    def select_year(self, year: int) -> bool:
        """Pick a year from the list. Keeps the popover open."""
        if not self._interactive() or year not in self.year_bounds:
            return False
        self.nav.jump_to(year)
        self.view = self.previous_view
        return True

    # ------------------------------------------------------------------
    # Text field
    # ------------------------------------------------------------------

    def input_change(self, text: str) -> bool:
        if self.options.disabled or self.options.read_only:
            return False
        if self.view is ViewMode.YEARS:
            self.view = self.previous_view
        self.text.input(text)
        return True

    def blur(self) -> CommitResult:
        return self.commit()

    def key_down(self, key: str) -> CommitResult | None:
        if key == "Enter":
            return self.commit()
        return None

    def commit(self) -> CommitResult:
        result = self.text.commit(self.options.min_date, self.options.max_date)
        if result.committed:
            self._commit_value(result.value)
        return result

    # ------------------------------------------------------------------
    # Caller re-render
    # ------------------------------------------------------------------

    def update(self, **props: Any) -> None:
        """Apply new props from the caller.

        `value` and `open` update the controlled state (pass `UNSET` to hand
        ownership back to the picker); anything else is a `PickerOptions` field.
        While open, a change of open state, mode, value or default date resets
        the view and the display cursor.
        """
        was_open = self.is_open
        deps_changed = False

        if "value" in props:
            value = props.pop("value")
            deps_changed |= self._value.sync(value if value is UNSET else as_date(value))
        if "open" in props:
            self._open.sync(props.pop("open"))

        if props:
            before = self.options
            self.options = PickerOptions.model_validate(
                {**before.model_dump(), **props}
            )
            deps_changed |= any(
                getattr(before, dep) != getattr(self.options, dep) for dep in _RESET_DEPS
            )
            self.text.mode = self.options.mode
            self.nav.min_date = self.options.min_date
            self.nav.max_date = self.options.max_date

        if self.is_open and not was_open:
            self._on_opened()
        elif was_open and not self.is_open:
            self._on_closed()
        elif self.is_open and deps_changed:
            self._reset()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _initial_view(self) -> ViewMode:
        return ViewMode.MONTHS if self.options.mode == "month" else ViewMode.DAYS

    def _fallback_date(self) -> date:
        return self.options.default_date or self._today()

    def _target_date(self) -> date:
        return self.value or self._fallback_date()

    def _interactive(self) -> bool:
        return not self.options.disabled and self.is_open

    def _reset(self) -> None:
        self.view = self._initial_view()
        target = self._target_date()
        self.nav.jump_to(target.year, target.month - 1)

    def _set_open(self, open: bool) -> bool:
        was_open = self.is_open
        self._open.set(open)
        if self.is_open and not was_open:
            self._on_opened()
        elif was_open and not self.is_open:
            self._on_closed()
        return True

    def _on_opened(self) -> None:
        logger.debug("popover opened")
        self._reset()
        self._dismiss.attach(self.dismiss)

    def _on_closed(self) -> None:
        logger.debug("popover closed")
        self._dismiss.detach()

    def _commit_value(self, value: date) -> None:
        logger.debug("committing %s", value.isoformat())
        before = self.value
        self._value.set(value)
        if self.is_open and self.value != before:
            self._reset()

    def _navigate(self, move: Callable[[], bool], name: str) -> bool:
        if not self._interactive():
            return False
        moved = move()
        if not moved:
            logger.debug("%s blocked at %s", name, self.cursor)
        return moved
