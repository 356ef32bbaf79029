"""shellui.core

Core helpers for the shell component kit (FastHTML + DaisyUI).

- DaisyUI provides semantic component styling.
- Tailwind utilities are used for layout and spacing.
- Components expose shadcn-style `variant` + `size` APIs.

Tailwind is loaded via `@tailwindcss/browser` and DaisyUI via CDN, so
`shellui/theme.css` must be plain CSS. HTMX ships with FastHTML.
"""

from __future__ import annotations

import inspect
from importlib import resources as importlib_resources
from pathlib import Path

from fasthtml.common import *
import fasthtml.components as fh


# Negative Tailwind utility prefixes (kept out of modifier expansion)
_neg_twu_pfxs = set(
    "mt ml mr mb mx my translate rotate scale skew inset top bottom left right z space".split()
)


def _is_neg_twu(x: str) -> bool:
    """Check if string is a negative Tailwind utility (e.g., -mt-4)."""
    return x.startswith("-") and len(parts := x[1:].split("-")) >= 2 and parts[0] in _neg_twu_pfxs


def cls_join(*classes: str) -> str:
    """Join class strings, filtering falsy values."""
    return " ".join(c for c in classes if c)


cn = cls_join


daisy_link = Link(
    href="https://cdn.jsdelivr.net/npm/daisyui@5",
    rel="stylesheet",
    type="text/css",
)

tw_scr = Script(src="https://cdn.jsdelivr.net/npm/@tailwindcss/browser@4")

daisy_hdrs = (daisy_link, tw_scr)


def _read_pkg_text(filename: str) -> str:
    """Read a text file shipped inside the `shellui` package."""
    try:
        return importlib_resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError):
        here = Path(__file__).resolve().parent
        return (here / filename).read_text(encoding="utf-8")


def theme_css(path: str | None = None) -> Style:
    """<style> tag with the kit's theme (calendar included) or a CSS file from disk."""
    if path is None:
        return Style(_read_pkg_text("theme.css"))
    return Style(Path(path).read_text(encoding="utf-8"))


ui_hdrs = (*daisy_hdrs, theme_css())


def daisy_app(*, with_theme: bool = True, **kw):
    """Create a FastHTML app with DaisyUI (+ Tailwind runtime) headers.

    Returns:
        (app, rt)
    """

    hdrs = kw.pop("hdrs", ())
    base_hdrs = ui_hdrs if with_theme else daisy_hdrs
    return fast_app(hdrs=(*base_hdrs, *hdrs), pico=False, **kw)


def hyphens2camel(x: str) -> str:
    return "".join(o.title() for o in x.split("-"))


def mk_compfn(
    compcls: str,
    tag: str | None = None,
    name: str | None = None,
    xcls: str = "",
    *,
    slot: str | None = None,
    **compkw,
):
    """Create a thin DaisyUI primitive and register it in the caller's module.

    `cls='-primary -sm'` expands to '{compcls}-primary {compcls}-sm'.
    """

    if not name:
        name = hyphens2camel(compcls)
    if not tag:
        tag = name

    compfunc = getattr(fh, tag)

    def fn(*c, cls: str = "", **kw):
        cls_expanded = " ".join(
            f"{compcls if x and x.startswith('-') and not _is_neg_twu(x) else ''}{x}" for x in cls.split()
        )

        if slot is not None and "data_slot" not in kw:
            kw["data_slot"] = slot

        return compfunc(*c, cls=f"{compcls} {cls_expanded} {xcls}".strip(), **compkw, **kw)

    fn.__name__ = name
    fn.__doc__ = f"DaisyUI primitive: .{compcls}. Use cls='-modifier' to expand to {compcls}-modifier."

    inspect.currentframe().f_back.f_globals[name] = fn
    return fn
