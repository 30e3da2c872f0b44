"""Frame rendering tests for the main screen, editor popup, and exit popup."""

from __future__ import annotations

import unittest
from unittest import mock

from jute.ansi import ANSI_ESCAPE_RE, display_width
from jute.layout import centered_rect, frame_layout
from jute.render import RenderContext, build_frame, format_pair_row, render_frame, tail_to_width
from jute.state import AppState, EditingFocus, Screen
from jute.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _plain(frame: str) -> str:
    return ANSI_ESCAPE_RE.sub("\n", frame)


def _context(state: AppState, width: int = 80, height: int = 24, theme=PLAIN_THEME) -> RenderContext:
    return RenderContext.from_state(state, width, height, theme)


class RenderMainScreenTests(unittest.TestCase):
    def test_main_screen_shows_title_pairs_and_hints(self) -> None:
        state = AppState(pairs={"name": "42", "lang": "python"})

        text = _plain(build_frame(_context(state)))

        self.assertIn("JUTE: Create JSON keypairs in your terminal!", text)
        self.assertIn(format_pair_row("name", "42"), text)
        self.assertIn(format_pair_row("lang", "python"), text)
        self.assertIn("Normal Mode", text)
        self.assertIn("Not Editing Anything", text)
        self.assertIn("(q) to quit / (e) to make new pair", text)
        self.assertNotIn("Enter a new key-value pair", text)

    def test_pair_rows_pad_keys_to_fixed_column(self) -> None:
        self.assertEqual(format_pair_row("name", "42"), "name" + " " * 21 + " : 42")

    def test_wide_character_keys_align_separator_by_columns(self) -> None:
        row = format_pair_row("名前", "x")

        self.assertEqual(row, "名前" + " " * 21 + " : x")
        self.assertEqual(display_width(row.split(" : ")[0]), 25)

    def test_pair_rows_beyond_list_height_are_not_drawn(self) -> None:
        pairs = {f"key{i}": str(i) for i in range(30)}
        state = AppState(pairs=pairs)
        list_rows = frame_layout(80, 24).pairs.height

        text = _plain(build_frame(_context(state)))

        self.assertIn(format_pair_row(f"key{list_rows - 1}", str(list_rows - 1)), text)
        self.assertNotIn(format_pair_row(f"key{list_rows}", str(list_rows)), text)

    def test_colored_theme_emits_theme_sequences(self) -> None:
        frame = build_frame(_context(AppState(pairs={"a": "b"}), theme=DEFAULT_THEME))

        self.assertIn(DEFAULT_THEME.title, frame)
        self.assertIn(DEFAULT_THEME.pair_row, frame)

    def test_tiny_terminal_does_not_raise(self) -> None:
        state = AppState(pairs={"a": "b"})
        state.begin_edit()

        build_frame(_context(state, width=3, height=2))
        state.screen = Screen.EXITING
        state.focus = EditingFocus.NONE
        build_frame(_context(state, width=1, height=1))


class RenderPopupTests(unittest.TestCase):
    def test_editing_popup_shows_both_boxes_and_focus_label(self) -> None:
        state = AppState()
        state.begin_edit()
        state.key_input = "name"
        state.value_input = "42"

        text = _plain(build_frame(_context(state)))

        self.assertIn("Enter a new key-value pair", text)
        self.assertIn("Key", text)
        self.assertIn("Value", text)
        self.assertIn("name", text)
        self.assertIn("Editing Mode", text)
        self.assertIn("Editing Json Key", text)
        self.assertIn("(ESC) to cancel", text)

    def test_focused_box_uses_active_style(self) -> None:
        state = AppState()
        state.begin_edit()
        state.toggle_focus()

        frame = build_frame(_context(state, theme=DEFAULT_THEME))

        self.assertIn(DEFAULT_THEME.popup_active_box + "┌", frame)
        self.assertIn("Editing Json Value", _plain(frame))

    def test_exit_popup_asks_for_confirmation(self) -> None:
        state = AppState(pairs={"name": "42"}, screen=Screen.EXITING)

        text = _plain(build_frame(_context(state)))

        self.assertIn("Exit", text)
        self.assertIn("Would you like to output", text)
        self.assertIn("(y/n)", text)
        self.assertIn("╭", text)

    def test_long_input_shows_its_tail(self) -> None:
        self.assertEqual(tail_to_width("abcdef", 3), "def")
        self.assertEqual(tail_to_width("名前ab", 4), "前ab")
        self.assertEqual(tail_to_width("abc", 0), "")

    def test_centered_rect_covers_requested_share(self) -> None:
        rect = centered_rect(100, 40)

        self.assertEqual((rect.x, rect.y, rect.width, rect.height), (20, 15, 60, 10))


class RenderFrameWriteTests(unittest.TestCase):
    def test_render_frame_writes_once_to_given_fd(self) -> None:
        writes: list[tuple[int, bytes]] = []

        def capture(fd: int, data: bytes) -> int:
            writes.append((fd, data))
            return len(data)

        with mock.patch("jute.render.os.write", side_effect=capture):
            render_frame(_context(AppState(pairs={"名": "値"})), 2)

        self.assertEqual(len(writes), 1)
        fd, data = writes[0]
        self.assertEqual(fd, 2)
        self.assertIn("名".encode("utf-8"), data)


if __name__ == "__main__":
    unittest.main()
