"""datepicker.text_sync

Reconciles the free-text field with the committed value.

Two states: `Display` shows the formatted committed value, `Editing` shows the
raw buffer. The buffer only exists inside `Editing`, so a stale buffer outside
of an edit cannot be represented.

Commit (blur or Enter) always returns to `Display`. Committing from `Display`
is a no-op, which makes blur-after-Enter safe.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

from datepicker.dates import PickerMode, format_value, parse_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Display:
    pass


@dataclass(frozen=True)
class Editing:
    buffer: str


EditState = Display | Editing


class CommitOutcome(str, Enum):
    IDLE = "idle"  # nothing was being edited
    EMPTY = "empty"
    INVALID = "invalid"
    OUT_OF_BOUNDS = "out_of_bounds"
    COMMITTED = "committed"


@dataclass(frozen=True)
class CommitResult:
    outcome: CommitOutcome
    value: date | None = None

    @property
    def committed(self) -> bool:
        return self.outcome is CommitOutcome.COMMITTED


class TextSync:
    def __init__(self, mode: PickerMode = "date"):
        self.mode: PickerMode = mode
        self.state: EditState = Display()

    @property
    def editing(self) -> bool:
        return isinstance(self.state, Editing)

    def input(self, text: str) -> None:
        """Store a keystroke verbatim. No live validation."""
        self.state = Editing(text)

    def reset(self) -> None:
        self.state = Display()

    def display_text(self, value: date | None) -> str:
        if isinstance(self.state, Editing):
            return self.state.buffer
        return format_value(value, self.mode)

    def commit(
        self,
        min_date: date | None = None,
        max_date: date | None = None,
    ) -> CommitResult:
        """Parse the buffer and return to Display.

        The caller is responsible for emitting the change when the result is
        COMMITTED.
        """
        state = self.state
        if not isinstance(state, Editing):
            return CommitResult(CommitOutcome.IDLE)

        self.state = Display()
        text = state.buffer
        if text == "":
            return CommitResult(CommitOutcome.EMPTY)

        parsed = parse_value(text, self.mode)
        if parsed is None:
            logger.debug("rejected malformed %s input %r", self.mode, text)
            return CommitResult(CommitOutcome.INVALID)

        if (min_date and parsed < min_date) or (max_date and parsed > max_date):
            logger.debug("rejected out-of-bounds input %r", text)
            return CommitResult(CommitOutcome.OUT_OF_BOUNDS, parsed)

        return CommitResult(CommitOutcome.COMMITTED, parsed)
