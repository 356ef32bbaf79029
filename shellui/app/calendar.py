"""shellui.app.calendar

Server-rendered date/month picker.

Renders a `DatePicker` as a text field with a trailing calendar button and,
while open, a popover holding the header, navigation row and the active view
(day grid, month grid or year list). Every interactive element posts to the
picker's routes (see `datepicker.routes`) and the response replaces the whole
widget.

The outside-click / escape listener only exists in the markup while the
popover is open, so it is attached and released together with the Open state.
"""

from __future__ import annotations

from fasthtml.common import *

from datepicker.config import ROUTE_PREFIX
from datepicker.dates import DAY_NAMES
from datepicker.grid import DayCell, MonthCell, YearCell
from datepicker.picker import DatePicker, ViewMode

from ..components import (
    Field,
    FieldContent,
    FieldDescription,
    FieldLabel,
    IconButton,
    Input,
)
from ..core import cn
from ..daisy import CardRoot

_ICONS = {
    "event": '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><rect x="3" y="4" width="18" height="18" rx="2"/><line x1="16" y1="2" x2="16" y2="6"/><line x1="8" y1="2" x2="8" y2="6"/><line x1="3" y1="10" x2="21" y2="10"/></svg>',
    "before": '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><polyline points="15 18 9 12 15 6"/></svg>',
    "next": '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><polyline points="9 18 15 12 9 6"/></svg>',
}


def _root_id(name: str) -> str:
    return f"calendar-{name}"


def _nav_row(picker: DatePicker, url):
    if picker.view is ViewMode.DAYS:
        prev = ("prev-month", "Previous month", picker.can_go_prev_month)
        nxt = ("next-month", "Next month", picker.can_go_next_month)
    else:
        prev = ("prev-year", "Previous year", picker.can_go_prev_year)
        nxt = ("next-year", "Next year", picker.can_go_next_year)

    def chevron(icon: str, op: str, label: str, enabled: bool):
        return IconButton(
            _ICONS[icon],
            label=label,
            size="xs",
            disabled=not enabled,
            tabindex="-1",
            hx_post=url(f"nav/{op}"),
        )

    return Div(
        chevron("before", *prev),
        Span(picker.nav_label, cls="calendar-nav-label"),
        chevron("next", *nxt),
        cls="calendar-nav",
    )


def _day_cell(cell: DayCell, url):
    if cell.blank:
        return Div(cls="calendar-day calendar-day--empty")
    return Button(
        str(cell.day),
        type="button",
        cls=cn(
            "calendar-day",
            "calendar-day--selected" if cell.selected else "",
            "calendar-day--disabled" if cell.disabled else "",
        ),
        disabled=cell.disabled,
        tabindex="-1",
        hx_post=None if cell.disabled else url(f"day/{cell.day}"),
    )


def _month_cell(cell: MonthCell, url):
    return Button(
        cell.label,
        type="button",
        cls=cn(
            "calendar-month-cell",
            "calendar-month-cell--selected" if cell.selected else "",
            "calendar-month-cell--disabled" if cell.disabled else "",
        ),
        disabled=cell.disabled,
        tabindex="-1",
        hx_post=None if cell.disabled else url(f"month/{cell.index}"),
    )


def _year_cell(cell: YearCell, url, root_id: str):
    return Button(
        str(cell.year),
        type="button",
        id=f"{root_id}-selected-year" if cell.selected else None,
        cls=cn("calendar-year", "calendar-year--selected" if cell.selected else ""),
        tabindex="-1",
        hx_post=url(f"year/{cell.year}"),
    )


def CalendarDays(picker: DatePicker, url):
    return Div(
        _nav_row(picker, url),
        Div(
            *[Span(d, cls="calendar-day-header") for d in DAY_NAMES],
            cls="calendar-day-headers",
        ),
        Div(
            *[
                Div(*[_day_cell(c, url) for c in row], cls="calendar-day-row")
                for row in picker.day_grid()
            ],
            cls="calendar-day-grid",
        ),
        cls="calendar-body",
        data_view="days",
    )


def CalendarMonths(picker: DatePicker, url):
    return Div(
        _nav_row(picker, url),
        Div(
            *[
                Div(*[_month_cell(c, url) for c in row], cls="calendar-month-row")
                for row in picker.month_grid()
            ],
            cls="calendar-month-grid",
        ),
        cls="calendar-body",
        data_view="months",
    )


def CalendarYears(picker: DatePicker, url, root_id: str):
    return Div(
        *[_year_cell(c, url, root_id) for c in picker.year_list()],
        # Keep the selected year in view
        Script(
            f"document.getElementById('{root_id}-selected-year')"
            "?.scrollIntoView({block: 'center'});"
        ),
        cls="calendar-years-body",
        data_view="years",
    )


def CalendarPopover(picker: DatePicker, url, root_id: str):
    if picker.view is ViewMode.DAYS:
        body = CalendarDays(picker, url)
    elif picker.view is ViewMode.MONTHS:
        body = CalendarMonths(picker, url)
    else:
        body = CalendarYears(picker, url, root_id)

    return CardRoot(
        Div(
            Button(
                str(picker.header_year),
                type="button",
                cls="calendar-header-year",
                tabindex="-1",
                hx_post=url("years"),
            ),
            Div(picker.header_text, cls="calendar-header-date"),
            cls="calendar-header",
        ),
        body,
        cls="-border calendar-popover",
        data_slot="calendar-popover",
        hx_post=url("dismiss"),
        hx_trigger=(
            f"click[!target.closest('#{root_id}')] from:document, "
            "keyup[key=='Escape'] from:document"
        ),
    )


def CalendarPicker(
    picker: DatePicker,
    name: str,
    *,
    base_url: str | None = None,
    cls: str = "",
    **kw,
):
    """Render a picker.

    Args:
        picker: The picker state to render
        name: Registered picker name (also the field name prefix)
        base_url: Route root; defaults to `{CALENDAR_ROUTE_PREFIX}/{name}`
    """
    opts = picker.options
    base = base_url or f"{ROUTE_PREFIX}/{name}"
    root_id = _root_id(name)

    def url(action: str) -> str:
        return f"{base}/_/{action}"

    interactive = not opts.disabled
    sync = "closest [data-slot=calendar]:queue all"

    if opts.read_only:
        field_attrs = {"hx_post": url("field"), "hx_trigger": "click"} if interactive else {}
    else:
        field_attrs = {
            "hx_post": url("input"),
            "hx_trigger": "input changed",
            "hx_swap": "none",
        }

    text_field = Input(
        name="text",
        id=f"{root_id}-input",
        value=picker.display_text,
        placeholder=opts.effective_placeholder,
        size=opts.size,
        state=opts.state,
        disabled=opts.disabled,
        readonly=opts.read_only,
        autocomplete="off",
        cls="join-item cursor-pointer" if opts.read_only and interactive else "join-item",
        **field_attrs,
    )

    trigger = IconButton(
        _ICONS["event"],
        label="Open calendar",
        variant="outline",
        disabled=opts.disabled,
        cls="join-item",
        hx_post=url("toggle"),
    )

    control = Div(
        text_field,
        trigger,
        cls="join w-full",
        hx_post=url("commit"),
        hx_trigger="focusout, keydown[key=='Enter']",
    )

    bits = []
    if opts.show_label and opts.label:
        bits.append(
            FieldLabel(
                opts.label,
                for_=f"{root_id}-input",
                optional=opts.show_optional,
                info=opts.info_text if opts.show_info and opts.info_text else None,
            )
        )
    bits.append(FieldContent(control))
    if opts.show_legend and opts.legend:
        bits.append(FieldDescription(opts.legend))

    return Div(
        Field(*bits, invalid=opts.state == "error", disabled=opts.disabled),
        CalendarPopover(picker, url, root_id) if picker.is_open else "",
        id=root_id,
        cls=cn("calendar-container relative", opts.cls, cls),
        data_slot="calendar",
        data_mode=picker.mode,
        data_open=str(picker.is_open).lower(),
        hx_target="this",
        hx_swap="outerHTML",
        hx_sync=sync,
        **kw,
    )


__all__ = [
    "CalendarPicker",
    "CalendarPopover",
    "CalendarDays",
    "CalendarMonths",
    "CalendarYears",
]
