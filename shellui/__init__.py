"""shellui

FastHTML + DaisyUI component kit for the application shell.

    from shellui import *

Structure:
- `shellui.core`: class helpers, headers, `daisy_app`
- `shellui.components`: building blocks (Button, IconButton, Input, Field)
- `shellui.app`: compositions (CalendarPicker)
- `shellui.daisy`: low-level DaisyUI primitives (escape hatch)
"""

from .core import (
    daisy_app,
    daisy_hdrs,
    theme_css,
    ui_hdrs,
    cn,
    cls_join,
)

from .components import (
    Button,
    IconButton,
    ButtonVariant,
    ButtonSize,
    Input,
    InputSize,
    InputState,
    Field,
    FieldLabel,
    FieldContent,
    FieldDescription,
)

from .app import CalendarPicker

from . import daisy

__version__ = "0.3.0"

__all__ = [
    # Core
    "daisy_app",
    "daisy_hdrs",
    "ui_hdrs",
    "theme_css",
    "cn",
    "cls_join",
    # Components
    "Button",
    "IconButton",
    "ButtonVariant",
    "ButtonSize",
    "Input",
    "InputSize",
    "InputState",
    "Field",
    "FieldLabel",
    "FieldContent",
    "FieldDescription",
    # App
    "CalendarPicker",
    # Escape hatch module
    "daisy",
]
