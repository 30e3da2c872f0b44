"""Session bootstrap tests: display and output sinks stay separate."""

from __future__ import annotations

import io
import json
import os
import unittest
from contextlib import contextmanager
from unittest import mock

from jute.input import LoopSignal
from jute.runtime.app import run_session
from jute.state import AppState
from jute.ui_theme import PLAIN_THEME


class _FakeTerminal:
    def __init__(self, stdin_fd: int, display_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.display_fd = display_fd

    @contextmanager
    def raw_mode(self):
        yield


class RunSessionTests(unittest.TestCase):
    def _run(self, signal: LoopSignal, state: AppState, **kwargs) -> tuple[str, list[tuple[int, bytes]]]:
        output = io.StringIO()
        writes: list[tuple[int, bytes]] = []

        def fake_loop(loop_state, _terminal, _stdin_fd, _timing, callbacks):
            callbacks.draw(loop_state, 80, 24)
            return signal

        def capture(fd: int, data: bytes) -> int:
            writes.append((fd, data))
            return len(data)

        with mock.patch("jute.runtime.app.TerminalController", _FakeTerminal), mock.patch(
            "jute.runtime.app.run_main_loop", side_effect=fake_loop
        ), mock.patch("jute.render.os.write", side_effect=capture):
            run_session(stdin_fd=0, display_fd=9, output=output, theme=PLAIN_THEME, state=state, **kwargs)
        return output.getvalue(), writes

    def test_exit_with_output_writes_json_to_output_sink_only(self) -> None:
        state = AppState(pairs={"name": "42", "lang": "py"})

        out, writes = self._run(LoopSignal.EXIT_WITH_OUTPUT, state)

        self.assertEqual(out, '{"name":"42","lang":"py"}\n')
        self.assertEqual(json.loads(out), state.pairs)
        self.assertTrue(writes)
        self.assertTrue(all(fd == 9 for fd, _data in writes))
        self.assertFalse(any(b'"name"' in data for _fd, data in writes))

    def test_exit_without_output_writes_nothing(self) -> None:
        out, _writes = self._run(LoopSignal.EXIT_WITHOUT_OUTPUT, AppState(pairs={"a": "1"}))

        self.assertEqual(out, "")

    def test_empty_store_emits_bare_braces(self) -> None:
        out, _writes = self._run(LoopSignal.EXIT_WITH_OUTPUT, AppState())

        self.assertEqual(out, "{}\n")

    def test_indent_is_applied_to_output(self) -> None:
        out, _writes = self._run(LoopSignal.EXIT_WITH_OUTPUT, AppState(pairs={"a": "1"}), indent=2)

        self.assertEqual(out, '{\n  "a": "1"\n}\n')

    def test_loop_failure_propagates_without_output(self) -> None:
        output = io.StringIO()
        with mock.patch("jute.runtime.app.TerminalController", _FakeTerminal), mock.patch(
            "jute.runtime.app.run_main_loop", side_effect=OSError("read failed")
        ):
            with self.assertRaises(OSError):
                run_session(stdin_fd=0, display_fd=9, output=output, theme=PLAIN_THEME)

        self.assertEqual(output.getvalue(), "")

    def test_real_loop_with_pipe_input(self) -> None:
        read_fd, write_fd = os.pipe()
        output = io.StringIO()
        try:
            os.write(write_fd, b"ek\rv\rqy")
            with mock.patch("jute.runtime.app.TerminalController", _FakeTerminal), mock.patch(
                "jute.render.os.write", return_value=0
            ):
                state = run_session(stdin_fd=read_fd, display_fd=9, output=output, theme=PLAIN_THEME)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(state.pairs, {"k": "v"})
        self.assertEqual(output.getvalue(), '{"k":"v"}\n')


if __name__ == "__main__":
    unittest.main()
