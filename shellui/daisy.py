"""shellui.daisy

Low-level DaisyUI primitives used by `shellui.components` and `shellui.app`.
`cls='-ghost -xs'` expands to `btn-ghost btn-xs` for `compcls='btn'`.
"""

from __future__ import annotations

from .core import mk_compfn

mk_compfn("btn", tag="Button", name="Btn", slot="button")

mk_compfn("input", tag="Input", name="Input", slot="input")

mk_compfn("card", tag="Div", name="CardRoot", slot="card")
mk_compfn("tooltip", tag="Span", name="Tooltip", slot="tooltip")


__all__ = [
    "Btn",
    "Input",
    "CardRoot",
    "Tooltip",
]
