"""Command-line front door for jute.

Parses CLI options, merges them with persisted config, and launches the
interactive session with stderr as the display and stdout as the JSON sink.
"""

from __future__ import annotations

import argparse
import os
import sys
import termios

from .config import load_json_indent, load_theme_name, save_theme_name
from .logging_setup import setup_logging
from .runtime import run_session
from .ui_theme import available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jute",
        description=(
            "Create JSON key-value pairs in your terminal. "
            "The interface is drawn on stderr; the JSON is printed to stdout."
        ),
    )
    parser.add_argument(
        "--theme",
        default=None,
        choices=available_theme_names(),
        help="UI theme name; the choice is remembered for later sessions.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors in the UI and the JSON output.")
    parser.add_argument(
        "--indent",
        type=_positive_int,
        default=None,
        help="Pretty-print the JSON output with this many spaces (default: compact).",
    )
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Log level used with --log-file.",
    )
    return parser


def main() -> None:
    """Parse CLI arguments and run one interactive session.

    Terminal failures are reported as ``SystemExit`` messages once the
    terminal has been restored.
    """
    args = build_parser().parse_args()
    try:
        setup_logging(args.log_level, args.log_file)
    except OSError as exc:
        raise SystemExit(f"jute: cannot open log file: {exc}") from exc

    stdin_fd = sys.stdin.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("jute: stdin is not a terminal")

    if args.theme is not None:
        save_theme_name(args.theme)
        theme_name = args.theme
    else:
        theme_name = load_theme_name()
    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))
    indent = args.indent if args.indent is not None else load_json_indent()

    try:
        run_session(
            stdin_fd=stdin_fd,
            display_fd=sys.stderr.fileno(),
            output=sys.stdout,
            theme=resolve_theme(theme_name, no_color=no_color),
            indent=indent,
            color_output=not no_color,
        )
    except (OSError, termios.error) as exc:
        raise SystemExit(f"jute: terminal error: {exc}") from exc


if __name__ == "__main__":
    main()
