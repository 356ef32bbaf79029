from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest
from starlette.testclient import TestClient

from datepicker.options import PickerOptions
from datepicker.routes import clear_pickers, mount_calendar_routes, register_picker
from shellui.core import daisy_app

TODAY = date(2024, 1, 15)
HX = {"HX-Request": "true"}


@dataclass
class CalendarTestEnv:
    client: TestClient

    def url(self, name: str, action: str | None = None) -> str:
        base = f"/calendar/{name}"
        return f"{base}/_/{action}" if action else base

    def post(self, name: str, action: str, **kw):
        return self.client.post(self.url(name, action), headers=HX, **kw)


@pytest.fixture
def calendar_env() -> CalendarTestEnv:
    clear_pickers()
    register_picker(
        "start",
        PickerOptions(mode="date", min_date=date(2024, 1, 10), max_date=date(2024, 1, 20)),
        today=lambda: TODAY,
    )
    register_picker("period", {"mode": "month", "read_only": True}, today=lambda: TODAY)

    app, _ = daisy_app()
    mount_calendar_routes(app)
    client = TestClient(app)

    yield CalendarTestEnv(client=client)

    client.close()
    clear_pickers()
