import argparse
from datetime import date

from fasthtml.common import Div, H1, P, serve

from shellui.core import daisy_app
from shellui.app.calendar import CalendarPicker
from datepicker import PickerOptions, mount_calendars
from datepicker.config import configure_logging

configure_logging()

app, rt = daisy_app()

pickers = mount_calendars(
    app,
    {
        "start": PickerOptions(
            mode="date",
            label="Start date",
            legend="Between 1 Jan 2024 and 31 Dec 2026",
            show_legend=True,
            min_date=date(2024, 1, 1),
            max_date=date(2026, 12, 31),
        ),
        "period": PickerOptions(
            mode="month",
            label="Period",
            show_optional=True,
            read_only=True,
        ),
    },
)


@rt("/")
def index():
    return Div(
        H1("Pickers", cls="text-xl font-semibold"),
        P("Type a date or use the calendar.", cls="text-sm text-base-content/60"),
        *[CalendarPicker(entry.picker, name) for name, entry in pickers.items()],
        cls="max-w-sm mx-auto p-6 space-y-6",
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--port", type=int, default=5001)
    args = parser.parse_args()
    serve(port=args.port)
