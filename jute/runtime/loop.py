"""Main interactive event loop for the terminal UI.

Each iteration redraws when needed, blocks for one key, and feeds it to the
input state machine. The loop only returns on an exit signal.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyEvent, LoopSignal, handle_key, read_key
from ..state import AppState
from .terminal import TerminalController

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_SIZE = (80, 24)


def _terminal_size() -> os.terminal_size:
    return shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 120


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    ``draw`` receives the state plus terminal columns and rows. Defaults for
    key reading and size lookup hit the real terminal.
    """

    draw: Callable[[AppState, int, int], None]
    read_key: Callable[[int, int | None], str] = read_key
    terminal_size: Callable[[], os.terminal_size] = _terminal_size


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Fold CR/LF tokens into ``ENTER``.

    Returns the key to dispatch (``None`` for a swallowed LF) and the new
    skip-LF flag; a CR arms the flag so the LF of a CR LF pair is dropped.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> LoopSignal:
    """Run the interactive TUI loop until the user confirms an exit choice.

    Returns ``EXIT_WITH_OUTPUT`` or ``EXIT_WITHOUT_OUTPUT``. Terminal state is
    restored before this returns or raises.
    """
    dirty = True
    skip_next_lf = False
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = callbacks.terminal_size()
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                dirty = True

            if dirty:
                callbacks.draw(state, term.columns, term.lines)
                dirty = False

            try:
                key = callbacks.read_key(stdin_fd, timing.key_poll_ms)
            except KeyboardInterrupt:
                # Ignore SIGINT-style interrupts; exit goes through the confirm screen.
                continue
            if key == "":
                continue

            dispatch_key, skip_next_lf = normalize_enter(key, skip_next_lf)
            if dispatch_key is None:
                continue

            signal = handle_key(state, KeyEvent(dispatch_key))
            if signal is not LoopSignal.CONTINUE:
                logger.info("loop finished with %s", signal.value)
                return signal
            dirty = True
