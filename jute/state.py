"""Session state for the key-value editor.

Holds committed pairs, the two input buffers, and the screen/focus pair.
All mutations go through methods so focus never outlives the editing screen.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum


class Screen(Enum):
    """Top-level mode that selects the active key handler and overlay."""

    MAIN = "main"
    EDITING = "editing"
    EXITING = "exiting"


class EditingFocus(Enum):
    """Which input buffer receives typed characters."""

    NONE = "none"
    KEY = "key"
    VALUE = "value"


@dataclass
class AppState:
    """Mutable session state shared by the key handler and the renderer."""

    pairs: dict[str, str] = field(default_factory=dict)
    key_input: str = ""
    value_input: str = ""
    screen: Screen = Screen.MAIN
    focus: EditingFocus = EditingFocus.NONE

    def begin_edit(self) -> None:
        """Open the editing popup on the key box, keeping any leftover text."""
        self.screen = Screen.EDITING
        self.focus = EditingFocus.KEY

    def append_char(self, ch: str) -> None:
        """Add ``ch`` to the focused buffer."""
        if self.focus is EditingFocus.KEY:
            self.key_input += ch
        elif self.focus is EditingFocus.VALUE:
            self.value_input += ch

    def backspace(self) -> None:
        """Drop the last character of the focused buffer, if any."""
        if self.focus is EditingFocus.KEY:
            self.key_input = self.key_input[:-1]
        elif self.focus is EditingFocus.VALUE:
            self.value_input = self.value_input[:-1]

    def toggle_focus(self) -> None:
        """Swap focus between the key and value boxes; no-op without focus."""
        if self.focus is EditingFocus.KEY:
            self.focus = EditingFocus.VALUE
        elif self.focus is EditingFocus.VALUE:
            self.focus = EditingFocus.KEY

    def commit(self) -> None:
        """Store the buffered pair, then reset editing state back to main."""
        self.pairs[self.key_input] = self.value_input
        self.key_input = ""
        self.value_input = ""
        self.focus = EditingFocus.NONE
        self.screen = Screen.MAIN

    def cancel_edit(self) -> None:
        """Leave the editing popup without committing.

        Buffers are intentionally left as they are; reopening the popup shows
        the abandoned text again.
        """
        self.screen = Screen.MAIN
        self.focus = EditingFocus.NONE

    def serialize(self, indent: int | None = None, *, ensure_ascii: bool = False) -> str:
        """Return pairs as a JSON object in insertion order.

        The compact form uses no whitespace between tokens; an empty mapping
        is always ``{}``. Non-ASCII text is kept verbatim unless
        ``ensure_ascii`` asks for ``\\uXXXX`` escapes.
        """
        if indent is None:
            return json.dumps(self.pairs, ensure_ascii=ensure_ascii, separators=(",", ":"))
        return json.dumps(self.pairs, ensure_ascii=ensure_ascii, indent=indent)
