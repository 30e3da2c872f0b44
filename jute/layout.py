"""Screen-area geometry for the frame and its popups."""

from __future__ import annotations

from dataclasses import dataclass

TITLE_ROWS = 3
FOOTER_ROWS = 3
POPUP_PERCENT_X = 60
POPUP_PERCENT_Y = 25


@dataclass(frozen=True)
class Rect:
    """Zero-based cell rectangle."""

    x: int
    y: int
    width: int
    height: int

    def inner(self, margin: int = 1) -> Rect:
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )

    def split_columns(self) -> tuple[Rect, Rect]:
        """Split into left/right halves; the right half takes any odd column."""
        left_width = self.width // 2
        return (
            Rect(self.x, self.y, left_width, self.height),
            Rect(self.x + left_width, self.y, self.width - left_width, self.height),
        )


@dataclass(frozen=True)
class FrameLayout:
    title: Rect
    pairs: Rect
    footer: Rect


def frame_layout(width: int, height: int) -> FrameLayout:
    """Cut the screen into a fixed title box, a flexible list, and a footer."""
    width = max(1, width)
    height = max(1, height)
    list_rows = max(1, height - TITLE_ROWS - FOOTER_ROWS)
    return FrameLayout(
        title=Rect(0, 0, width, TITLE_ROWS),
        pairs=Rect(0, TITLE_ROWS, width, list_rows),
        footer=Rect(0, TITLE_ROWS + list_rows, width, FOOTER_ROWS),
    )


def centered_rect(
    width: int,
    height: int,
    percent_x: int = POPUP_PERCENT_X,
    percent_y: int = POPUP_PERCENT_Y,
) -> Rect:
    """Return a rectangle covering the given share of the screen, centered."""
    rect_width = max(1, width * percent_x // 100)
    rect_height = max(1, height * percent_y // 100)
    return Rect(
        (width - rect_width) // 2,
        (height - rect_height) // 2,
        rect_width,
        rect_height,
    )
