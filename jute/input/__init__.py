"""Input-layer public API for key decoding and screen handlers.

Exports are split between low-level terminal decoding (`read_key`) and the
state machine used by the runtime loop (`handle_key`).
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import (
    KeyEvent,
    KeyEventKind,
    LoopSignal,
    handle_key,
    is_printable_key,
)

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyEvent",
    "KeyEventKind",
    "LoopSignal",
    "handle_key",
    "is_printable_key",
]
