"""Application settings and command-line parsing."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from dataclasses import dataclass

from blockade.ui.i18n import LANGUAGES

THEMES: list[str] = ["Classic", "Slate"]
LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_valid_moves: bool = True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockade",
        description="Two-player race across a 9x9 board with obstacles",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default=os.getenv("BLOCKADE_LANGUAGE", "English"),
        help="UI language",
    )
    parser.add_argument(
        "--theme",
        choices=THEMES,
        default=os.getenv("BLOCKADE_THEME", "Classic"),
        help="Board colour theme",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("BLOCKADE_LOG_LEVEL", "WARNING").upper(),
        help="Logging verbosity",
    )
    parser.add_argument(
        "--hide-coordinates",
        action="store_true",
        help="Do not draw row letters and column digits",
    )
    parser.add_argument(
        "--hide-valid-moves",
        action="store_true",
        help="Do not highlight valid destinations of a selected piece",
    )
    return parser


def settings_from_args(argv: Sequence[str] | None = None) -> AppSettings:
    """Parse *argv* (defaults to ``sys.argv[1:]``) into :class:`AppSettings`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    # Environment defaults bypass argparse choices.
    for name, value, choices in (
        ("language", args.language, LANGUAGES),
        ("theme", args.theme, THEMES),
        ("log-level", args.log_level, LOG_LEVELS),
    ):
        if value not in choices:
            allowed = ", ".join(choices)
            parser.error(f"invalid --{name} {value!r} (choose from {allowed})")
    return AppSettings(
        language=args.language,
        log_level=args.log_level,
        board_theme=args.theme,
        show_coordinates=not args.hide_coordinates,
        show_valid_moves=not args.hide_valid_moves,
    )
