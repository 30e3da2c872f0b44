"""Keyboard dispatch for the main, editing, and exit-confirmation screens.

``handle_key`` is the whole input state machine: it mutates the session
state passed in and returns a signal telling the loop whether to keep going.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..state import AppState, EditingFocus, Screen
from .key_registry import KeyComboBinding, KeyComboRegistry

logger = logging.getLogger(__name__)


class KeyEventKind(Enum):
    PRESS = "press"
    RELEASE = "release"


class LoopSignal(Enum):
    """Loop-control outcome of handling one key event."""

    CONTINUE = "continue"
    EXIT_WITH_OUTPUT = "exit_with_output"
    EXIT_WITHOUT_OUTPUT = "exit_without_output"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key token plus its press/release phase."""

    key: str
    kind: KeyEventKind = KeyEventKind.PRESS


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a single character that can be typed into a box."""
    return len(key) == 1 and key.isprintable()


def _main_registry(state: AppState) -> KeyComboRegistry[LoopSignal]:
    def open_editor() -> LoopSignal:
        state.begin_edit()
        return LoopSignal.CONTINUE

    def ask_exit() -> LoopSignal:
        state.screen = Screen.EXITING
        return LoopSignal.CONTINUE

    return KeyComboRegistry[LoopSignal]().register_bindings(
        KeyComboBinding(("e",), open_editor),
        KeyComboBinding(("q",), ask_exit),
    )


def _exiting_registry() -> KeyComboRegistry[LoopSignal]:
    return KeyComboRegistry[LoopSignal]().register_bindings(
        KeyComboBinding(("y",), lambda: LoopSignal.EXIT_WITH_OUTPUT),
        KeyComboBinding(("n", "q"), lambda: LoopSignal.EXIT_WITHOUT_OUTPUT),
    )


def _editing_registry(state: AppState) -> KeyComboRegistry[LoopSignal]:
    def enter() -> LoopSignal:
        # Enter moves key -> value, then saves from the value box.
        if state.focus is EditingFocus.KEY:
            state.focus = EditingFocus.VALUE
        elif state.focus is EditingFocus.VALUE:
            state.commit()
            logger.debug("committed pair; %d pair(s) stored", len(state.pairs))
        return LoopSignal.CONTINUE

    def backspace() -> LoopSignal:
        state.backspace()
        return LoopSignal.CONTINUE

    def cancel() -> LoopSignal:
        state.cancel_edit()
        return LoopSignal.CONTINUE

    def toggle() -> LoopSignal:
        state.toggle_focus()
        return LoopSignal.CONTINUE

    def type_char(key: str) -> LoopSignal:
        if is_printable_key(key):
            state.append_char(key)
        return LoopSignal.CONTINUE

    return KeyComboRegistry[LoopSignal](fallback=type_char).register_bindings(
        KeyComboBinding(("ENTER",), enter),
        KeyComboBinding(("BACKSPACE",), backspace),
        KeyComboBinding(("ESC",), cancel),
        KeyComboBinding(("TAB",), toggle),
    )


def handle_key(state: AppState, event: KeyEvent) -> LoopSignal:
    """Apply one key event to ``state`` and return the loop-control signal.

    Release events and keys without a binding on the current screen leave the
    state untouched and return ``LoopSignal.CONTINUE``.
    """
    if event.kind is not KeyEventKind.PRESS:
        return LoopSignal.CONTINUE

    previous_screen = state.screen
    if state.screen is Screen.MAIN:
        registry = _main_registry(state)
    elif state.screen is Screen.EXITING:
        registry = _exiting_registry()
    else:
        registry = _editing_registry(state)

    signal = registry.dispatch(event.key)
    if signal is None:
        return LoopSignal.CONTINUE
    if state.screen is not previous_screen:
        logger.debug("screen %s -> %s", previous_screen.value, state.screen.value)
    return signal
