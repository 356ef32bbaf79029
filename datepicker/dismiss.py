"""datepicker.dismiss

Lifetime of the click-outside listener.

The popover collaborator owns the actual listener; the picker only decides
when it exists. A `DismissScope` is a context-manager factory: it is entered
when the popover opens and exited when it closes or the picker is torn down.
"""

from __future__ import annotations

from contextlib import AbstractContextManager, ExitStack
from typing import Callable, Protocol


class DismissScope(Protocol):
    def __call__(self, dismiss: Callable[[], None]) -> AbstractContextManager: ...


class DismissListener:
    """Holds at most one active scope, tied to the Open state."""

    def __init__(self, scope: DismissScope | None = None):
        self.scope = scope
        self._stack: ExitStack | None = None

    @property
    def attached(self) -> bool:
        return self._stack is not None

    def attach(self, dismiss: Callable[[], None]) -> None:
        if self.scope is None or self._stack is not None:
            return
        stack = ExitStack()
        stack.enter_context(self.scope(dismiss))
        self._stack = stack

    def detach(self) -> None:
        stack, self._stack = self._stack, None
        if stack is not None:
            stack.close()
