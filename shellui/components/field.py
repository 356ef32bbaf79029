"""shellui.components.field

Field layout: label row, control, helper text.

Label row may carry an "(Optional)" suffix and an info icon with a tooltip.
"""

from __future__ import annotations

from fasthtml.common import *

from ..core import cn
from ..daisy import Tooltip

_INFO_ICON = '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><circle cx="12" cy="12" r="10"/><path d="M12 16v-4"/><path d="M12 8h.01"/></svg>'


def Field(
    *c,
    invalid: bool = False,
    disabled: bool = False,
    cls: str = "",
    **kw,
):
    return Div(
        *c,
        cls=cn(
            "flex flex-col gap-1",
            "data-[invalid=true]:[&_[data-slot=field-label]]:text-error",
            "data-[disabled=true]:opacity-60",
            cls,
        ),
        data_slot="field",
        data_invalid=str(invalid).lower(),
        data_disabled=str(disabled).lower(),
        **kw,
    )


def FieldLabel(
    *c,
    for_: str | None = None,
    optional: bool = False,
    info: str | None = None,
    cls: str = "",
    **kw,
):
    """Label row. `info` adds an icon whose tooltip shows the text."""
    bits = [
        Label(
            *c,
            Span(" (Optional)", cls="text-base-content/60 font-normal") if optional else "",
            for_=for_,
            cls="text-sm font-medium leading-snug",
            data_slot="field-label",
        )
    ]
    if info:
        bits.append(
            Tooltip(
                NotStr(_INFO_ICON),
                cls="text-base-content/60",
                data_tip=info,
                data_slot="field-info",
            )
        )
    return Div(*bits, cls=cn("flex items-center gap-1", cls), **kw)


def FieldContent(*c, cls: str = "", **kw):
    return Div(
        *c,
        cls=cn("flex flex-col gap-1", cls),
        data_slot="field-content",
        **kw,
    )


def FieldDescription(*c, cls: str = "", **kw):
    return P(
        *c,
        cls=cn("text-sm text-base-content/60 leading-normal", cls),
        data_slot="field-description",
        **kw,
    )


__all__ = [
    "Field",
    "FieldContent",
    "FieldDescription",
    "FieldLabel",
]
