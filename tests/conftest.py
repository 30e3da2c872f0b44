"""Pytest bootstrap for local source imports and shared reader cleanup.

The ``pytest`` console script can run with a sys.path that excludes the
repository root, so the root is inserted to make ``import jute`` resolve to
the local package. Bytes queued by the key reader are dropped between tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jute.input import _PENDING_BYTES  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_pending_key_bytes():
    _PENDING_BYTES.clear()
    yield
    _PENDING_BYTES.clear()
