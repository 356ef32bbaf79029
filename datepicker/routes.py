"""datepicker.routes

FastHTML routes that drive registered pickers over HTMX.

Each picker lives in a module-level registry keyed by name. The registry
entry owns the committed value and feeds it back to the picker as a
controlled prop, the same way a page would.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Mapping

from fasthtml.common import APIRouter, Response

from datepicker.config import ROUTE_PREFIX
from datepicker.options import PickerOptions
from datepicker.picker import DatePicker
from shellui.app.calendar import CalendarPicker

logger = logging.getLogger(__name__)


@dataclass
class PickerEntry:
    name: str
    picker: DatePicker = field(repr=False)
    value: date | None = None
    history: list[date] = field(default_factory=list)

    def apply(self, value: date) -> None:
        self.value = value
        self.history.append(value)
        self.picker.update(value=value)


_pickers: dict[str, PickerEntry] = {}

ar = APIRouter()


def register_picker(
    name: str,
    options: PickerOptions | Mapping | None = None,
    value: date | None = None,
    *,
    today: Callable[[], date] = date.today,
) -> PickerEntry:
    """Create (or replace) a named picker in the registry."""
    if isinstance(options, Mapping):
        options = PickerOptions.model_validate(options)

    entry: PickerEntry | None = None

    def on_change(new: date) -> None:
        entry.apply(new)

    picker = DatePicker(options, value=value, on_change=on_change, today=today)
    entry = PickerEntry(name=name, picker=picker, value=value)

    if (old := _pickers.get(name)) is not None:
        old.picker.close()
    _pickers[name] = entry
    return entry


def get_value(name: str) -> date | None:
    entry = _pickers.get(name)
    return entry.value if entry else None


def clear_pickers() -> None:
    for entry in _pickers.values():
        entry.picker.close()
    _pickers.clear()


def mount_calendar_routes(
    app,
    pickers: Mapping[str, PickerOptions | Mapping | None] | None = None,
) -> None:
    """Register pickers and mount the calendar routes on the app."""
    for name, options in (pickers or {}).items():
        register_picker(name, options)
    ar.to_app(app)


def _render(entry: PickerEntry):
    return CalendarPicker(entry.picker, entry.name)


def _not_found(name: str) -> Response:
    logger.info("unknown picker %r", name)
    return Response("Picker not found", status_code=404)


def _event(name: str, handle: Callable[[DatePicker], object]):
    entry = _pickers.get(name)
    if entry is None:
        return _not_found(name)
    handle(entry.picker)
    return _render(entry)


_ACTIONS: dict[str, Callable[[DatePicker], object]] = {
    "toggle": DatePicker.click_icon,
    "field": DatePicker.click_field,
    "dismiss": DatePicker.dismiss,
    "years": DatePicker.click_year_header,
    "commit": DatePicker.commit,
}

_NAV_OPS: dict[str, Callable[[DatePicker], bool]] = {
    "prev-month": DatePicker.prev_month,
    "next-month": DatePicker.next_month,
    "prev-year": DatePicker.prev_year,
    "next-year": DatePicker.next_year,
}


@ar(f"{ROUTE_PREFIX}/{{name}}", methods=["GET"])
def calendar_widget(name: str):
    entry = _pickers.get(name)
    if entry is None:
        return _not_found(name)
    return _render(entry)


@ar(f"{ROUTE_PREFIX}/{{name}}/_/nav/{{op}}", methods=["POST"])
def calendar_nav(name: str, op: str):
    move = _NAV_OPS.get(op)
    if move is None:
        logger.info("unknown navigation %r for picker %r", op, name)
        return Response(f"Unknown navigation: {op}", status_code=400)
    return _event(name, move)


@ar(f"{ROUTE_PREFIX}/{{name}}/_/day/{{day}}", methods=["POST"])
def calendar_day(name: str, day: int):
    return _event(name, lambda p: p.select_day(day))


@ar(f"{ROUTE_PREFIX}/{{name}}/_/month/{{index}}", methods=["POST"])
def calendar_month(name: str, index: int):
    return _event(name, lambda p: p.select_month(index))


@ar(f"{ROUTE_PREFIX}/{{name}}/_/year/{{year}}", methods=["POST"])
def calendar_year(name: str, year: int):
    return _event(name, lambda p: p.select_year(year))


@ar(f"{ROUTE_PREFIX}/{{name}}/_/input", methods=["POST"])
async def calendar_input(name: str, req):
    entry = _pickers.get(name)
    if entry is None:
        return _not_found(name)
    form = await req.form()
    entry.picker.input_change(str(form.get("text", "")))
    # The field keeps the user's text; nothing to swap
    return Response("", status_code=204)


@ar(f"{ROUTE_PREFIX}/{{name}}/_/{{action}}", methods=["POST"])
def calendar_action(name: str, action: str):
    handle = _ACTIONS.get(action)
    if handle is None:
        logger.info("unknown action %r for picker %r", action, name)
        return Response(f"Unknown action: {action}", status_code=400)
    return _event(name, handle)
