from __future__ import annotations

from datetime import date

from fasthtml.common import to_xml

from datepicker.options import PickerOptions
from datepicker.picker import DatePicker
from shellui.app.calendar import CalendarPicker
from shellui.components import Button, IconButton, Input

TODAY = date(2024, 2, 10)


def _render(picker: DatePicker, name: str = "due") -> str:
    return to_xml(CalendarPicker(picker, name))


def test_closed_picker_renders_field_only() -> None:
    picker = DatePicker(PickerOptions(label="Due date"), value=date(2024, 2, 5), today=lambda: TODAY)

    html = _render(picker)

    assert 'data-slot="calendar"' in html
    assert "Due date" in html
    assert 'value="05/02/2024"' in html
    assert 'hx-post="/calendar/due/_/input"' in html
    assert 'hx-post="/calendar/due/_/commit"' in html
    assert "calendar-popover" not in html


def test_open_day_view_renders_blanks_and_selection() -> None:
    picker = DatePicker(value=date(2024, 2, 5), today=lambda: TODAY)
    picker.click_icon()

    html = _render(picker)

    assert html.count("calendar-day--empty") == 4
    assert html.count('class="calendar-day-row"') == 5
    assert "calendar-day calendar-day--selected" in html
    assert "February 2024" in html
    assert "Mon, Feb 5" in html
    assert 'aria-label="Previous month"' in html
    assert html.count('class="calendar-day-header"') == 7


def test_open_picker_disables_out_of_bounds_cells_and_chevrons() -> None:
    picker = DatePicker(
        PickerOptions(min_date=date(2024, 2, 8), max_date=date(2024, 2, 20)),
        today=lambda: TODAY,
    )
    picker.click_icon()

    html = _render(picker)

    assert html.count("calendar-day--disabled") == 7 + 9
    assert 'hx-post="/calendar/due/_/day/8"' in html
    assert 'hx-post="/calendar/due/_/day/7"' not in html
    assert 'hx-post="/calendar/due/_/day/21"' not in html


def test_month_view_renders_four_rows() -> None:
    picker = DatePicker(PickerOptions(mode="month"), value=date(2024, 4, 1), today=lambda: TODAY)
    picker.click_icon()

    html = _render(picker, "period")

    assert html.count('class="calendar-month-row"') == 4
    assert 'placeholder="mm/yyyy"' in html
    assert "calendar-month-cell calendar-month-cell--selected" in html
    assert 'hx-post="/calendar/period/_/month/11"' in html
    assert 'aria-label="Next year"' in html


def test_year_view_marks_selected_year() -> None:
    picker = DatePicker(PickerOptions(min_date=date(2020, 1, 1), max_date=date(2030, 12, 31)), today=lambda: TODAY)
    picker.click_icon()
    picker.click_year_header()

    html = _render(picker)

    assert html.count('hx-post="/calendar/due/_/year/') == 11
    assert 'id="calendar-due-selected-year"' in html
    assert "scrollIntoView" in html


def test_read_only_field_posts_field_clicks() -> None:
    picker = DatePicker(PickerOptions(read_only=True, show_optional=True), today=lambda: TODAY)

    html = _render(picker)

    assert 'hx-post="/calendar/due/_/field"' in html
    assert "readonly" in html
    assert "(Optional)" in html


def test_disabled_picker_has_no_field_actions() -> None:
    picker = DatePicker(PickerOptions(disabled=True, read_only=True), today=lambda: TODAY)

    html = _render(picker)

    assert 'hx-post="/calendar/due/_/field"' not in html
    assert 'data-disabled="true"' in html


def test_state_and_legend_are_rendered() -> None:
    picker = DatePicker(
        PickerOptions(state="error", legend="Pick a weekday", show_legend=True, show_info=True, info_text="Help"),
        today=lambda: TODAY,
    )

    html = _render(picker)

    assert "input-error" in html
    assert 'data-invalid="true"' in html
    assert "Pick a weekday" in html
    assert 'data-tip="Help"' in html


def test_custom_base_url() -> None:
    picker = DatePicker(today=lambda: TODAY)

    html = to_xml(CalendarPicker(picker, "due", base_url="/forms/due"))

    assert 'hx-post="/forms/due/_/toggle"' in html


def test_button_variants_map_to_daisy_modifiers() -> None:
    assert "btn-primary" in to_xml(Button("Save"))
    assert "btn-ghost" in to_xml(Button("Skip", variant="ghost"))
    html = to_xml(IconButton("<svg></svg>", label="Close"))
    assert 'aria-label="Close"' in html
    assert "btn-square" in html


def test_input_state_colors() -> None:
    assert "input-success" in to_xml(Input(name="x", state="valid"))
    assert "input-error" not in to_xml(Input(name="x"))
