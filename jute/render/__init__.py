"""Frame rendering for the key-value editor.

Builds one fully composed ANSI frame from a read-only view of the session
and writes it to the display fd in a single call. Nothing here mutates state.
"""

from __future__ import annotations

import os
import textwrap
from dataclasses import dataclass

from ..ansi import char_display_width, clip_ansi_line, display_width, fit_ansi_line
from ..layout import Rect, centered_rect, frame_layout
from ..state import AppState, EditingFocus, Screen
from ..ui_theme import DEFAULT_THEME, UITheme

TITLE_TEXT = "JUTE: Create JSON keypairs in your terminal!"
EDIT_POPUP_TITLE = "Enter a new key-value pair"
EXIT_POPUP_TITLE = "Exit"
EXIT_PROMPT = "Would you like to output the buffer as json? (y/n)"
PAIR_KEY_COLUMNS = 25
EXIT_POPUP_PADDING_X = 2
EXIT_POPUP_PADDING_Y = 1

SCREEN_HINTS: dict[Screen, str] = {
    Screen.MAIN: "(q) to quit / (e) to make new pair",
    Screen.EDITING: "(ESC) to cancel / (Tab) to switch boxes / (ENTER) to complete",
    Screen.EXITING: "(y) to output json / (n) or (q) to quit without output",
}

SQUARE_BORDER = ("┌", "┐", "└", "┘", "─", "│")
ROUNDED_BORDER = ("╭", "╮", "╰", "╯", "─", "│")


@dataclass
class RenderContext:
    pairs: dict[str, str]
    key_input: str
    value_input: str
    screen: Screen
    focus: EditingFocus
    width: int
    height: int
    theme: UITheme = DEFAULT_THEME

    @classmethod
    def from_state(cls, state: AppState, width: int, height: int, theme: UITheme) -> RenderContext:
        return cls(
            pairs=state.pairs,
            key_input=state.key_input,
            value_input=state.value_input,
            screen=state.screen,
            focus=state.focus,
            width=width,
            height=height,
            theme=theme,
        )


def format_pair_row(key: str, value: str) -> str:
    """Return one list row with the key padded to a fixed display width."""
    padding = " " * max(0, PAIR_KEY_COLUMNS - display_width(key))
    return f"{key}{padding} : {value}"


def tail_to_width(text: str, max_cols: int) -> str:
    """Return the longest suffix of ``text`` fitting in ``max_cols`` columns.

    Input boxes show the end of the buffer so the typing position stays visible.
    """
    if max_cols <= 0:
        return ""
    cols = 0
    start = len(text)
    while start > 0:
        w = char_display_width(text[start - 1])
        if cols + w > max_cols:
            break
        cols += w
        start -= 1
    return text[start:]


class _Canvas:
    """Collects cursor-addressed writes, dropping cells outside the screen."""

    def __init__(self, width: int, height: int, theme: UITheme) -> None:
        self.width = width
        self.height = height
        self.theme = theme
        self.out: list[str] = ["\033[H\033[J"]

    def put(self, x: int, y: int, text: str, style: str = "", max_cols: int | None = None) -> None:
        """Write ``text`` at a 0-based cell, clipped to the screen edge."""
        if y < 0 or y >= self.height or x < 0 or x >= self.width:
            return
        limit = self.width - x if max_cols is None else min(max_cols, self.width - x)
        clipped = clip_ansi_line(text, limit)
        if not clipped:
            return
        self.out.append(f"\033[{y + 1};{x + 1}H{style}{clipped}{self.theme.reset}")

    def fill(self, rect: Rect, style: str) -> None:
        """Paint every cell of ``rect`` as a styled blank."""
        for row in range(rect.height):
            self.put(rect.x, rect.y + row, " " * rect.width, style)

    def clear(self, rect: Rect) -> None:
        self.fill(rect, self.theme.reset)

    def box(
        self,
        rect: Rect,
        style: str,
        *,
        title: str = "",
        title_style: str = "",
        center_title: bool = False,
        rounded: bool = False,
    ) -> None:
        """Draw a bordered box over ``rect`` with an optional title in the top edge."""
        if rect.width < 2 or rect.height < 2:
            return
        top_left, top_right, bottom_left, bottom_right, horizontal, vertical = (
            ROUNDED_BORDER if rounded else SQUARE_BORDER
        )
        inner_w = rect.width - 2
        self.put(rect.x, rect.y, top_left + horizontal * inner_w + top_right, style)
        for row in range(1, rect.height - 1):
            self.put(rect.x, rect.y + row, vertical + " " * inner_w + vertical, style)
        self.put(rect.x, rect.y + rect.height - 1, bottom_left + horizontal * inner_w + bottom_right, style)
        if title:
            title = clip_ansi_line(title, inner_w)
            offset = (inner_w - display_width(title)) // 2 if center_title else 0
            self.put(rect.x + 1 + offset, rect.y, title, title_style or style)

    def text(self) -> str:
        """Return the composed frame."""
        return "".join(self.out)


def _mode_label(screen: Screen, theme: UITheme) -> tuple[str, str]:
    if screen is Screen.EDITING:
        return "Editing Mode", theme.mode_editing
    if screen is Screen.EXITING:
        return "Exiting", theme.mode_exiting
    return "Normal Mode", theme.mode_main


def _focus_label(focus: EditingFocus, theme: UITheme) -> tuple[str, str]:
    if focus is EditingFocus.KEY:
        return "Editing Json Key", theme.focus_key
    if focus is EditingFocus.VALUE:
        return "Editing Json Value", theme.focus_value
    return "Not Editing Anything", theme.focus_none


def _draw_base(canvas: _Canvas, context: RenderContext) -> None:
    theme = context.theme
    layout = frame_layout(context.width, context.height)

    title_box = layout.title
    canvas.box(title_box, theme.border)
    inner_w = max(0, title_box.width - 2)
    title = clip_ansi_line(TITLE_TEXT, inner_w)
    canvas.put(title_box.x + 1 + (inner_w - display_width(title)) // 2, title_box.y + 1, title, theme.title)

    pairs_area = layout.pairs
    canvas.fill(pairs_area, theme.list_backdrop)
    for row, (key, value) in enumerate(context.pairs.items()):
        if row >= pairs_area.height:
            break
        canvas.put(
            pairs_area.x,
            pairs_area.y + row,
            fit_ansi_line(format_pair_row(key, value), pairs_area.width),
            theme.list_backdrop + theme.pair_row,
        )

    mode_area, hint_area = layout.footer.split_columns()
    canvas.box(mode_area, theme.border)
    mode_text, mode_style = _mode_label(context.screen, theme)
    focus_text, focus_style = _focus_label(context.focus, theme)
    status = (
        f"{mode_style}{mode_text}{theme.reset}"
        f"{theme.divider} | {theme.reset}"
        f"{focus_style}{focus_text}{theme.reset}"
    )
    canvas.put(mode_area.x + 1, mode_area.y + 1, status, max_cols=mode_area.width - 2)

    canvas.box(hint_area, theme.border)
    canvas.put(hint_area.x + 1, hint_area.y + 1, SCREEN_HINTS[context.screen], theme.key_hint, hint_area.width - 2)


def _draw_input_box(canvas: _Canvas, rect: Rect, title: str, text: str, style: str) -> None:
    canvas.fill(rect, style)
    canvas.box(rect, style, title=title)
    if rect.height > 2:
        canvas.put(rect.x + 1, rect.y + 1, tail_to_width(text, rect.width - 2), style)


def _draw_editing_popup(canvas: _Canvas, context: RenderContext) -> None:
    theme = context.theme
    area = centered_rect(context.width, context.height)
    canvas.fill(area, theme.popup)
    canvas.put(area.x, area.y, EDIT_POPUP_TITLE, theme.popup, area.width)

    key_area, value_area = area.inner(1).split_columns()
    key_style = theme.popup_active_box if context.focus is EditingFocus.KEY else theme.popup
    value_style = theme.popup_active_box if context.focus is EditingFocus.VALUE else theme.popup
    _draw_input_box(canvas, key_area, "Key", context.key_input, key_style)
    _draw_input_box(canvas, value_area, "Value", context.value_input, value_style)


def _draw_exit_popup(canvas: _Canvas, context: RenderContext) -> None:
    theme = context.theme
    canvas.clear(Rect(0, 0, context.width, context.height))
    area = centered_rect(context.width, context.height)
    canvas.fill(area, theme.exit_popup)
    canvas.box(
        area,
        theme.exit_popup,
        title=EXIT_POPUP_TITLE,
        title_style=theme.exit_title,
        center_title=True,
        rounded=True,
    )
    body = Rect(
        area.x + 1 + EXIT_POPUP_PADDING_X,
        area.y + 1 + EXIT_POPUP_PADDING_Y,
        area.width - 2 - 2 * EXIT_POPUP_PADDING_X,
        area.height - 2 - 2 * EXIT_POPUP_PADDING_Y,
    )
    if body.width <= 0:
        return
    for row, line in enumerate(textwrap.wrap(EXIT_PROMPT, body.width)):
        if row >= body.height:
            break
        canvas.put(body.x, body.y + row, line, theme.exit_popup)


def build_frame(context: RenderContext) -> str:
    """Compose the full ANSI frame for ``context`` as one string."""
    canvas = _Canvas(max(1, context.width), max(1, context.height), context.theme)
    _draw_base(canvas, context)
    if context.focus is not EditingFocus.NONE:
        _draw_editing_popup(canvas, context)
    if context.screen is Screen.EXITING:
        _draw_exit_popup(canvas, context)
    return canvas.text()


def render_frame(context: RenderContext, fd: int) -> None:
    """Draw one frame to the display file descriptor."""
    os.write(fd, build_frame(context).encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "build_frame",
    "format_pair_row",
    "render_frame",
    "tail_to_width",
]
