"""Render helpers for the streamenv CLI."""

from __future__ import annotations

from typing import Iterable

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from streamenv.ui.console import get_console, get_error_console


def render_error(text: str) -> None:
    console = get_error_console()
    panel = Panel(
        Text(text, style="error"),
        box=box.ROUNDED,
        border_style="error",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_environment_table(entries: Iterable[tuple[str, str]], title: str) -> None:
    console = get_console()
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="label", no_wrap=True, justify="right")
    table.add_column(style="value")
    for key, value in entries:
        table.add_row(Text(key, style="label"), Text(value, style="value"))
    panel = Panel(
        table,
        title=Text(title, style="title"),
        title_align="left",
        border_style="border",
        box=box.ROUNDED,
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)
