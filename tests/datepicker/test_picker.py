from __future__ import annotations

from contextlib import contextmanager
from datetime import date

import pytest
from pydantic import ValidationError

from datepicker.navigation import DisplayCursor
from datepicker.options import PickerOptions
from datepicker.picker import DatePicker, ViewMode
from datepicker.state import UNSET
from datepicker.text_sync import CommitOutcome

TODAY = date(2024, 6, 10)


def _picker(changes: list | None = None, **opts) -> DatePicker:
    kw = {}
    for key in ("value", "open", "on_open_change", "dismiss_scope"):
        if key in opts:
            kw[key] = opts.pop(key)
    return DatePicker(
        PickerOptions(**opts),
        on_change=changes.append if changes is not None else None,
        today=lambda: TODAY,
        **kw,
    )


def test_opening_without_value_shows_today() -> None:
    picker = DatePicker()

    picker.click_icon()

    today = date.today()
    assert picker.is_open
    assert picker.cursor == DisplayCursor(today.year, today.month - 1)
    assert picker.view is ViewMode.DAYS


def test_opening_prefers_value_then_default_date() -> None:
    picker = _picker(value=date(2021, 3, 4), default_date=date(2019, 8, 1))
    picker.click_icon()
    assert picker.cursor == DisplayCursor(2021, 2)

    picker = _picker(default_date=date(2019, 8, 1))
    picker.click_icon()
    assert picker.cursor == DisplayCursor(2019, 7)


def test_reopening_resets_cursor_and_view() -> None:
    picker = _picker()
    picker.click_icon()
    picker.next_month()
    picker.click_year_header()

    picker.click_icon()
    picker.click_icon()

    assert picker.view is ViewMode.DAYS
    assert picker.cursor == DisplayCursor(2024, 5)


def test_select_day_commits_and_closes() -> None:
    changes: list[date] = []
    picker = _picker(changes)
    picker.click_icon()

    assert picker.select_day(15)

    assert changes == [date(2024, 6, 15)]
    assert not picker.is_open
    assert picker.value == date(2024, 6, 15)
    assert picker.display_text == "15/06/2024"


def test_disabled_day_is_inert() -> None:
    changes: list[date] = []
    picker = _picker(changes, min_date=date(2024, 6, 12))
    picker.click_icon()

    assert not picker.select_day(11)
    assert not picker.select_day(31)

    assert changes == []
    assert picker.is_open


def test_month_mode_selects_month_and_closes() -> None:
    changes: list[date] = []
    picker = _picker(changes, mode="month", default_date=date(2025, 1, 1))
    picker.click_icon()

    assert picker.view is ViewMode.MONTHS
    assert picker.select_month(3)

    assert changes == [date(2025, 4, 1)]
    assert not picker.is_open
    assert picker.display_text == "04/2025"


def test_month_pick_in_date_mode_moves_cursor_back_to_days() -> None:
    changes: list[date] = []
    picker = _picker(changes)
    picker.click_icon()
    picker.view = ViewMode.MONTHS

    assert picker.select_month(1)

    assert picker.view is ViewMode.DAYS
    assert picker.cursor == DisplayCursor(2024, 1)
    assert changes == []
    assert picker.is_open


def test_disabled_month_is_inert() -> None:
    changes: list[date] = []
    picker = _picker(changes, mode="month", max_date=date(2024, 6, 30))
    picker.click_icon()

    assert not picker.select_month(6)
    assert changes == []


def test_year_pick_returns_to_previous_view_and_stays_open() -> None:
    picker = _picker()
    picker.click_icon()

    assert picker.click_year_header()
    assert picker.view is ViewMode.YEARS
    assert picker.previous_view is ViewMode.DAYS

    assert picker.select_year(1995)

    assert picker.view is ViewMode.DAYS
    assert picker.cursor == DisplayCursor(1995, 5)
    assert picker.is_open


def test_year_pick_in_month_mode_returns_to_months() -> None:
    picker = _picker(mode="month")
    picker.click_icon()
    picker.click_year_header()

    picker.select_year(2030)

    assert picker.view is ViewMode.MONTHS
    assert picker.cursor.year == 2030


def test_year_outside_range_is_inert() -> None:
    picker = _picker(min_date=date(2020, 1, 1))
    picker.click_icon()
    picker.click_year_header()

    assert not picker.select_year(2019)
    assert picker.view is ViewMode.YEARS


def test_navigation_only_while_open() -> None:
    picker = _picker()

    assert not picker.next_month()
    picker.click_icon()
    assert picker.next_month()
    assert picker.cursor == DisplayCursor(2024, 6)


def test_blocked_navigation_is_a_no_op() -> None:
    picker = _picker(min_date=date(2024, 6, 1), max_date=date(2024, 6, 30))
    picker.click_icon()

    assert not picker.can_go_prev_month
    assert not picker.prev_month()
    assert not picker.next_month()
    assert not picker.prev_year()
    assert picker.cursor == DisplayCursor(2024, 5)


@pytest.mark.parametrize(
    "text, move",
    [("31/12/9999", "next_month"), ("01/01/0001", "prev_month")],
)
def test_navigation_past_the_last_representable_month_is_a_no_op(text, move) -> None:
    picker = _picker()
    picker.input_change(text)
    assert picker.blur().committed
    picker.click_icon()
    before = DisplayCursor(picker.cursor.year, picker.cursor.month)

    assert not getattr(picker, move)()
    assert picker.cursor == before
    assert picker.day_grid()


def test_manual_entry_within_bounds_commits() -> None:
    changes: list[date] = []
    picker = _picker(changes, min_date=date(2024, 1, 10), max_date=date(2024, 1, 20))

    picker.input_change("05/01/2024")
    assert picker.blur().outcome is CommitOutcome.OUT_OF_BOUNDS
    assert changes == []
    assert picker.display_text == ""

    picker.input_change("15/01/2024")
    assert picker.blur().committed
    assert changes == [date(2024, 1, 15)]


def test_manual_entry_does_not_open_or_close_popover() -> None:
    changes: list[date] = []
    picker = _picker(changes)

    picker.input_change("01/02/2024")
    picker.key_down("Enter")

    assert changes == [date(2024, 2, 1)]
    assert not picker.is_open


def test_enter_then_blur_commits_once() -> None:
    changes: list[date] = []
    picker = _picker(changes)

    picker.input_change("01/02/2024")
    assert picker.key_down("Enter").committed
    assert picker.blur().outcome is CommitOutcome.IDLE

    assert changes == [date(2024, 2, 1)]


def test_other_keys_do_not_commit() -> None:
    picker = _picker()
    picker.input_change("01/02/2024")

    assert picker.key_down("Tab") is None
    assert picker.editing


def test_empty_commit_keeps_value() -> None:
    changes: list[date] = []
    picker = _picker(changes, value=date(2024, 3, 3))

    picker.input_change("")
    assert picker.display_text == ""
    assert picker.blur().outcome is CommitOutcome.EMPTY

    assert changes == []
    assert picker.value == date(2024, 3, 3)
    assert picker.display_text == "03/03/2024"


def test_invalid_entry_reverts_to_committed_value() -> None:
    picker = _picker(value=date(2024, 3, 3))

    picker.input_change("99/99/9999")
    assert picker.blur().outcome is CommitOutcome.INVALID

    assert picker.display_text == "03/03/2024"


def test_typing_while_years_view_returns_to_previous_view() -> None:
    picker = _picker()
    picker.click_icon()
    picker.click_year_header()

    picker.input_change("1")

    assert picker.view is ViewMode.DAYS
    assert picker.editing


def test_year_header_click_commits_pending_text() -> None:
    changes: list[date] = []
    picker = _picker(changes)
    picker.click_icon()
    picker.input_change("02/03/2024")

    picker.click_year_header()

    assert changes == [date(2024, 3, 2)]
    assert not picker.editing
    assert picker.view is ViewMode.YEARS


def test_controlled_value_waits_for_caller() -> None:
    changes: list[date] = []
    picker = _picker(changes, value=None)
    picker.click_icon()

    picker.select_day(20)

    assert changes == [date(2024, 6, 20)]
    assert picker.value is None

    picker.update(value=changes[-1])
    assert picker.value == date(2024, 6, 20)


def test_controlled_open_routes_writes_through_callback() -> None:
    requests: list[bool] = []
    picker = _picker(open=False, on_open_change=requests.append)

    picker.click_icon()

    assert requests == [True]
    assert not picker.is_open

    picker.update(open=True)
    assert picker.is_open
    assert picker.cursor == DisplayCursor(2024, 5)

    picker.select_day(3)
    assert requests == [True, False]
    assert picker.is_open


def test_handing_open_state_back_to_picker() -> None:
    picker = _picker(open=True)
    assert picker.is_open

    picker.update(open=UNSET)
    assert not picker.is_open


def test_update_while_open_resets_on_value_change() -> None:
    picker = _picker(value=date(2024, 6, 1))
    picker.click_icon()
    picker.next_month()
    picker.next_month()

    picker.update(value=date(2030, 3, 3))

    assert picker.cursor == DisplayCursor(2030, 2)


def test_update_while_open_resets_on_mode_and_default_date() -> None:
    picker = _picker()
    picker.click_icon()

    picker.update(default_date=date(2001, 9, 9))
    assert picker.cursor == DisplayCursor(2001, 8)

    picker.update(mode="month")
    assert picker.view is ViewMode.MONTHS
    assert picker.display_text == ""


def test_update_of_unrelated_prop_keeps_cursor() -> None:
    picker = _picker()
    picker.click_icon()
    picker.next_month()

    picker.update(label="Due")

    assert picker.cursor == DisplayCursor(2024, 6)
    assert picker.options.label == "Due"


def test_update_rejects_unknown_options() -> None:
    picker = _picker()

    with pytest.raises(ValidationError):
        picker.update(colour="red")

    with pytest.raises(ValidationError):
        PickerOptions(mode="week")


def test_disabled_picker_ignores_everything() -> None:
    changes: list[date] = []
    requests: list[bool] = []
    picker = _picker(changes, disabled=True, read_only=True, on_open_change=requests.append)

    assert not picker.click_icon()
    assert not picker.click_field()
    assert not picker.request_open_change(True)
    assert not picker.input_change("01/01/2024")
    assert picker.blur().outcome is CommitOutcome.IDLE

    assert changes == []
    assert requests == []
    assert not picker.is_open


def test_read_only_field_click_toggles_popover() -> None:
    picker = _picker(read_only=True)

    assert not picker.input_change("01/01/2024")
    assert picker.click_field()
    assert picker.is_open
    assert picker.click_field()
    assert not picker.is_open


def test_editable_field_click_does_not_open() -> None:
    picker = _picker()

    assert not picker.click_field()
    assert not picker.is_open


def test_dismiss_listener_lives_while_open() -> None:
    events: list[str] = []
    dismissers = []

    @contextmanager
    def scope(dismiss):
        events.append("attach")
        dismissers.append(dismiss)
        try:
            yield
        finally:
            events.append("detach")

    picker = _picker(dismiss_scope=scope)
    assert events == []

    picker.click_icon()
    assert events == ["attach"]

    dismissers[-1]()
    assert not picker.is_open
    assert events == ["attach", "detach"]

    picker.click_icon()
    picker.close()
    assert events == ["attach", "detach", "attach", "detach"]


def test_context_manager_releases_listener() -> None:
    events: list[str] = []

    @contextmanager
    def scope(dismiss):
        events.append("attach")
        yield
        events.append("detach")

    with _picker(dismiss_scope=scope) as picker:
        picker.click_icon()

    assert events == ["attach", "detach"]


def test_header_shows_value_or_fallback() -> None:
    picker = _picker()
    picker.click_icon()
    assert picker.header_text == "Mon, Jun 10"
    assert picker.header_year == 2024
    assert picker.nav_label == "June 2024"

    picker = _picker(mode="month", value=date(2025, 4, 1))
    assert picker.header_text == "Apr 2025"
    picker.click_icon()
    assert picker.nav_label == "2025"
