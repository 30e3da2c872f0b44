"""Interactive session bootstrap.

Wires the terminal controller, renderer, and event loop around a fresh
``AppState``. The display sink (a file descriptor) and the output sink (a
text stream) are supplied independently so redirecting one never affects
the other.
"""

from __future__ import annotations

import logging
from typing import TextIO

from ..input import LoopSignal
from ..output import emit_json
from ..render import RenderContext, render_frame
from ..state import AppState
from ..ui_theme import UITheme
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_session(
    *,
    stdin_fd: int,
    display_fd: int,
    output: TextIO,
    theme: UITheme,
    indent: int | None = None,
    color_output: bool = True,
    state: AppState | None = None,
    timing: RuntimeLoopTiming | None = None,
) -> AppState:
    """Run one editing session and emit JSON if the user asks for it.

    Terminal errors propagate to the caller after the terminal has been
    restored. Returns the final session state.
    """
    if state is None:
        state = AppState()
    terminal = TerminalController(stdin_fd, display_fd)

    def draw(current: AppState, columns: int, rows: int) -> None:
        render_frame(RenderContext.from_state(current, columns, rows, theme), display_fd)

    logger.info("session started (theme=%s)", theme.name)
    signal = run_main_loop(
        state,
        terminal,
        stdin_fd,
        timing or RuntimeLoopTiming(),
        RuntimeLoopCallbacks(draw=draw),
    )

    if signal is LoopSignal.EXIT_WITH_OUTPUT:
        emit_json(state, output, indent=indent, color=color_output)
        logger.info("emitted %d pair(s)", len(state.pairs))
    else:
        logger.info("exited without output")
    return state
