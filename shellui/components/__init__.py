"""shellui.components

Building blocks used across the shell:

    from shellui.components import Button, IconButton, Input
"""

from .button import Button, IconButton, ButtonVariant, ButtonSize
from .input import Input, InputSize, InputState
from .field import Field, FieldContent, FieldDescription, FieldLabel

__all__ = [
    # Buttons
    "Button",
    "IconButton",
    "ButtonVariant",
    "ButtonSize",
    # Inputs
    "Input",
    "InputSize",
    "InputState",
    # Field
    "Field",
    "FieldContent",
    "FieldDescription",
    "FieldLabel",
]
