"""shellui.components.button

Buttons built on DaisyUI `btn`: a `variant` + `size` API, plus the icon-only
variant used for field affordances and calendar navigation chevrons.
"""

from __future__ import annotations

from typing import Literal

from fasthtml.common import *

from shellui.core import cn
from shellui.daisy import Btn


ButtonVariant = Literal[
    "default",
    "secondary",
    "outline",
    "ghost",
]

ButtonSize = Literal[
    "default",
    "sm",
    "xs",
    "lg",
    "icon",
]

_VARIANT_MODS = {
    "default": "-primary",
    "secondary": "-secondary",
    "outline": "-outline",
    "ghost": "-ghost",
}

_SIZE_MODS = {
    "default": "-sm",
    "sm": "-xs",
    "xs": "-xs",
    "lg": "-md",
    "icon": "-square -sm",
}


def Button(
    *c,
    variant: ButtonVariant = "default",
    size: ButtonSize = "default",
    disabled: bool = False,
    cls: str = "",
    **kw,
):
    """Button with the kit's compact density.

    Always `type="button"` unless overridden, so buttons inside the picker
    never submit a surrounding form.
    """

    kw.setdefault("type", "button")
    attrs = {
        "data_variant": variant,
        "data_size": size,
        "data_slot": kw.pop("data_slot", "button"),
        "disabled": disabled,
    }

    return Btn(
        *c,
        cls=cn(_VARIANT_MODS[variant], _SIZE_MODS[size], cls),
        **attrs,
        **kw,
    )


def IconButton(
    icon: str,
    *,
    label: str,
    variant: ButtonVariant = "ghost",
    size: Literal["default", "xs"] = "default",
    cls: str = "",
    **kw,
):
    """Icon-only button. `icon` is inline SVG markup; `label` becomes aria-label."""

    return Button(
        NotStr(icon),
        variant=variant,
        size="icon",
        aria_label=label,
        cls=cn("[&_svg]:size-4", "btn-xs" if size == "xs" else "", cls),
        data_slot="icon-button",
        **kw,
    )


__all__ = ["Button", "IconButton", "ButtonVariant", "ButtonSize"]
