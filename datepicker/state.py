"""datepicker.state

Controlled/uncontrolled state holder.

A `Controllable` is controlled when the caller supplies the value. Reads
resolve to the external value when controlled and to internal state
otherwise. Writes go through `set`, which only updates internal state when
uncontrolled and always notifies the callback.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


class Controllable(Generic[T]):
    def __init__(
        self,
        default: T,
        external: T | _Unset = UNSET,
        on_change: Callable[[T], None] | None = None,
    ):
        self._internal = default
        self._external = external
        self.on_change = on_change

    @property
    def controlled(self) -> bool:
        return not isinstance(self._external, _Unset)

    @property
    def value(self) -> T:
        if isinstance(self._external, _Unset):
            return self._internal
        return self._external

    def set(self, value: T) -> None:
        if not self.controlled:
            self._internal = value
        if self.on_change is not None:
            self.on_change(value)

    def sync(self, external: T | _Unset) -> bool:
        """Apply a new external value from the caller. Returns True if it changed."""
        before = self.value
        self._external = external
        return self.value != before
