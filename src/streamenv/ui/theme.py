"""Rich theme for the streamenv CLI."""

from __future__ import annotations

from rich.theme import Theme

THEME = Theme(
    {
        "title": "bold bright_blue",
        "border": "bright_blue",
        "error": "bold red3",
        "label": "yellow",
        "value": "blue",
    }
)
