"""CLI entrypoint for streamenv."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer

from streamenv.config import LoaderConfig
from streamenv.errors import DotenvError, describe_error, error_code
from streamenv.loader import load_from_path
from streamenv.logger import configure_logging
from streamenv.ui.render import render_environment_table, render_error

app = typer.Typer(add_completion=False, help="Load a dotenv file and print the resulting environment.")


@app.command()
def load(
    path: Path = typer.Argument(Path(".env"), help="Dotenv file to load."),
    strict: bool = typer.Option(False, "--strict", help="Reject keys that are not POSIX names."),
    no_utf_guards: bool = typer.Option(
        False,
        "--no-utf-guards",
        help="Do not reject UTF-16/UTF-32 byte-order marks.",
    ),
    chunk_size: Optional[int] = typer.Option(None, "--chunk-size", min=4, help="Bytes read per chunk."),
    only_loaded: bool = typer.Option(False, "--only-loaded", help="Print only keys set by the file."),
    table: bool = typer.Option(False, "--table", help="Render the output as a table."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser events to stderr."),
) -> None:
    """Load PATH into the environment, then print every KEY=VALUE."""
    configure_logging(verbose)
    try:
        config = LoaderConfig.from_env(
            chunk_size=chunk_size,
            strict_keys=True if strict else None,
            utf_guards=False if no_utf_guards else None,
        )
    except ValueError as exc:
        render_error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    try:
        report = load_from_path(path, config=config)
    except (OSError, DotenvError) as exc:
        message = str(exc) if isinstance(exc, DotenvError) else describe_error(exc)
        render_error(f"Error loading dotenv from '{path}': {message}")
        raise typer.Exit(code=error_code(exc)) from exc

    if only_loaded:
        keys = list(dict.fromkeys(report.published))
        entries = [(key, os.environ[key]) for key in keys if key in os.environ]
    else:
        entries = list(os.environ.items())

    if table:
        render_environment_table(entries, title=str(path))
        return
    for key, value in entries:
        typer.echo(f"{key}={value}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
