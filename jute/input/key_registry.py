"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class KeyComboBinding(Generic[ResultT]):
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], ResultT]


class KeyComboRegistry(Generic[ResultT]):
    """Small key-dispatch table with an optional catch-all for unbound keys."""

    def __init__(self, fallback: Callable[[str], ResultT | None] | None = None) -> None:
        """Initialize empty registry; ``fallback`` receives keys with no binding."""
        self._fallback = fallback
        self._handlers: dict[str, Callable[[], ResultT]] = {}

    def register_binding(self, binding: KeyComboBinding[ResultT]) -> KeyComboRegistry[ResultT]:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding[ResultT]) -> KeyComboRegistry[ResultT]:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> ResultT | None:
        """Invoke the handler bound to ``key``, else the fallback, else ``None``."""
        handler = self._handlers.get(key)
        if handler is not None:
            return handler()
        if self._fallback is not None:
            return self._fallback(key)
        return None
