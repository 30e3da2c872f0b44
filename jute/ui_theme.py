"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the frame chrome, the pair list, and the two
popups. ``PLAIN_THEME`` is used whenever colors are disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    title: str
    pair_row: str
    list_backdrop: str
    mode_main: str
    mode_editing: str
    mode_exiting: str
    divider: str
    focus_key: str
    focus_value: str
    focus_none: str
    key_hint: str
    popup: str
    popup_active_box: str
    exit_popup: str
    exit_title: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;250m",
    title="\033[32m",
    pair_row="\033[33m",
    list_backdrop="\033[48;2;15;15;15m",
    mode_main="\033[32m",
    mode_editing="\033[33m",
    mode_exiting="\033[91m",
    divider="\033[37m",
    focus_key="\033[32m",
    focus_value="\033[92m",
    focus_none="\033[90m",
    key_hint="\033[31m",
    popup="\033[100m",
    popup_active_box="\033[1;3;30;103m",
    exit_popup="\033[96;48;2;123;3;35m",
    exit_title="\033[1;96;48;2;123;3;35m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    pair_row="\033[38;5;153m",
    list_backdrop="\033[48;5;17m",
    mode_main="\033[38;5;45m",
    mode_editing="\033[38;5;215m",
    mode_exiting="\033[38;5;203m",
    divider="\033[38;5;110m",
    focus_key="\033[38;5;84m",
    focus_value="\033[38;5;117m",
    focus_none="\033[2;38;5;110m",
    key_hint="\033[38;5;229m",
    popup="\033[48;5;24m",
    popup_active_box="\033[1;3;38;5;17;48;5;117m",
    exit_popup="\033[38;5;153;48;5;17m",
    exit_title="\033[1;38;5;45;48;5;17m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    pair_row="",
    list_backdrop="",
    mode_main="",
    mode_editing="",
    mode_exiting="",
    divider="",
    focus_key="",
    focus_value="",
    focus_none="",
    key_hint="",
    popup="",
    # Reverse video keeps the focused box visible without colors.
    popup_active_box="\033[7m",
    exit_popup="",
    exit_title="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
