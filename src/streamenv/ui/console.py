"""Shared consoles for the streamenv CLI."""

from __future__ import annotations

from rich.console import Console

from streamenv.ui.theme import THEME

_CONSOLE = Console(theme=THEME, highlight=False)
_ERR_CONSOLE = Console(theme=THEME, highlight=False, stderr=True)


def get_console() -> Console:
    return _CONSOLE


def get_error_console() -> Console:
    return _ERR_CONSOLE
