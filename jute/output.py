"""Emission of the collected pairs to the output sink.

Plain JSON when the sink is redirected; Pygments-highlighted JSON when the
sink is an interactive terminal and colors are enabled.
"""

from __future__ import annotations

import logging
from typing import TextIO

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer

from .state import AppState

logger = logging.getLogger(__name__)


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty()) if callable(isatty) else False


def colorize_json(text: str) -> str:
    """Return ``text`` with ANSI syntax colors; output always ends with a newline."""
    return highlight(text, JsonLexer(), TerminalFormatter())


def _write_json(text: str, stream: TextIO, color: bool) -> None:
    if color and _is_tty(stream):
        stream.write(colorize_json(text))
    else:
        stream.write(text + "\n")


def emit_json(state: AppState, stream: TextIO, *, indent: int | None = None, color: bool = True) -> str:
    """Write the serialized pairs plus a newline to ``stream``; return the JSON text written.

    A stream whose encoding cannot hold the typed text gets the same object
    with non-ASCII characters escaped.
    """
    text = state.serialize(indent=indent)
    try:
        _write_json(text, stream, color)
    except UnicodeEncodeError as exc:
        logger.info("output encoding %s rejected pair text; escaping non-ASCII", exc.encoding)
        text = state.serialize(indent=indent, ensure_ascii=True)
        _write_json(text, stream, color)
    stream.flush()
    return text
