"""shellui.components.input

Text input. The base DaisyUI `input` already gives consistent height,
border and focus ring; this wrapper standardizes size and maps the caller's
validation state onto DaisyUI colors.
"""

from __future__ import annotations

from typing import Literal

from fasthtml.common import *

from ..core import cn
from ..daisy import Input as DaisyInput


InputSize = Literal["default", "sm", "xs", "lg"]
InputState = Literal["default", "error", "valid"]

_STATE_MODS = {
    "default": "",
    "error": "-error",
    "valid": "-success",
}


def Input(
    *,
    name: str | None = None,
    id: str | None = None,
    type: str = "text",
    value: str | None = None,
    placeholder: str | None = None,
    size: InputSize = "default",
    state: InputState = "default",
    disabled: bool = False,
    readonly: bool = False,
    cls: str = "",
    **kw,
):
    """Text input.

    Args:
        size:  default (compact), xs/sm/lg
        state: 'error' or 'valid' colors the border; computed by the caller
    """

    mods: list[str] = []

    if size == "default":
        mods.append("-sm")
    elif size in ("sm", "xs"):
        mods.append("-xs")
    elif size == "lg":
        mods.append("-md")

    if _STATE_MODS[state]:
        mods.append(_STATE_MODS[state])

    return DaisyInput(
        type=type,
        name=name,
        id=id,
        value=value,
        placeholder=placeholder,
        disabled=disabled,
        readonly=readonly,
        cls=cn(*mods, "w-full", cls),
        data_slot="input",
        data_size=size,
        data_state=state,
        **kw,
    )


__all__ = ["Input", "InputSize", "InputState"]
