"""datepicker.options

Pydantic configuration model for a picker instance.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from datepicker.dates import PickerMode, placeholder_for

PickerSize = Literal["default", "sm", "xs", "lg"]
PickerState = Literal["default", "error", "valid"]


class PickerOptions(BaseModel):
    """Options recognised by `DatePicker`.

    Behavioural options:
        mode: 'date' picks a day, 'month' picks a month (day fixed to 1)
        min_date / max_date: inclusive bounds, compared at day granularity
        default_date: month shown on open when there is no value
        disabled: suppress all interaction
        read_only: no typing; clicking the field toggles the popover

    The remaining fields only affect rendering. `state` is supplied by the
    caller; the picker never computes it.
    """

    model_config = ConfigDict(extra="forbid")

    mode: PickerMode = "date"
    min_date: date | None = None
    max_date: date | None = None
    default_date: date | None = None
    disabled: bool = False
    read_only: bool = False

    label: str = "Label"
    legend: str = "Legend"
    size: PickerSize = "default"
    state: PickerState = "default"
    show_label: bool = True
    show_legend: bool = False
    show_optional: bool = False
    show_info: bool = False
    info_text: str = ""
    placeholder: str | None = None
    cls: str = ""

    @field_validator("min_date", "max_date", "default_date", mode="before")
    @classmethod
    def _drop_time(cls, value):
        if isinstance(value, datetime):
            return value.date()
        if value == "":
            return None
        return value

    @property
    def effective_placeholder(self) -> str:
        return self.placeholder or placeholder_for(self.mode)
