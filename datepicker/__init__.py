"""datepicker

Date/month picker core for FastHTML.

Usage:
    from datepicker import DatePicker, PickerOptions, mount_calendars

    picker = DatePicker(PickerOptions(mode="month"), on_change=print)

    # In your app:
    app, rt = daisy_app()
    mount_calendars(app, {"period": {"mode": "month"}})
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from datepicker.options import PickerOptions
from datepicker.picker import DatePicker, ViewMode
from datepicker.text_sync import CommitOutcome, CommitResult

if TYPE_CHECKING:
    from datepicker.routes import PickerEntry


def mount_calendars(
    app,
    pickers: Mapping[str, PickerOptions | Mapping | None] | None = None,
) -> dict[str, "PickerEntry"]:
    """Register pickers and mount the calendar routes.

    Args:
        app: FastHTML app
        pickers: Mapping of picker name to options

    Returns:
        Dict mapping picker names to their registry entries
    """
    from datepicker.routes import _pickers, mount_calendar_routes

    mount_calendar_routes(app, pickers)
    return {name: _pickers[name] for name in pickers or {}}


__all__ = [
    "DatePicker",
    "PickerOptions",
    "ViewMode",
    "CommitOutcome",
    "CommitResult",
    "mount_calendars",
]
