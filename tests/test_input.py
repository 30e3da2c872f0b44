"""Regression tests for raw-key decoding.

Covers ESC timing, arrow and unknown escape sequences, control-key tokens,
and multi-byte UTF-8 characters read from a pipe.
"""

import os
import time
import unittest

from jute.input import reader as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, data: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, data)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        # Esc waits briefly for sequence bytes, but should not require another key press.
        self.assertLess(elapsed, 0.2)

    def test_timeout_without_input_returns_empty_token(self) -> None:
        self.assertEqual(self._read_all(b"", 1), [""])

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(
            self._read_all(b"\x1b[A\x1b[B\x1bOC\x1b[D", 4),
            ["UP", "DOWN", "RIGHT", "LEFT"],
        )

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_delete_sequence_is_consumed_whole(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[3~x", 2), ["UNKNOWN", "x"])

    def test_control_keys_map_to_tokens(self) -> None:
        self.assertEqual(
            self._read_all(b"\t\x7f\x08\r\n\x03", 6),
            ["TAB", "BACKSPACE", "BACKSPACE", "ENTER_CR", "ENTER_LF", "CTRL_C"],
        )

    def test_multibyte_utf8_characters_decode_as_one_key(self) -> None:
        self.assertEqual(
            self._read_all("é名😀a".encode("utf-8"), 4),
            ["é", "名", "😀", "a"],
        )

    def test_truncated_utf8_sequence_does_not_eat_next_key(self) -> None:
        self.assertEqual(self._read_all(b"\xc3a", 2), ["�", "a"])


if __name__ == "__main__":
    unittest.main()
