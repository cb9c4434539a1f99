"""Analyze command - infer the column types of a delimited file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from file2ddl.cli.common import JsonFlag, VerboseOption, console, setup_logging
from file2ddl.core.config import get_settings
from file2ddl.core.models.base import QuoteMode
from file2ddl.sources.files import analyze_file


def analyze(
    file: Annotated[
        Path,
        typer.Argument(
            help="Delimited text file; the first line is the header",
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    delimiter: Annotated[
        str,
        typer.Option("--delim", "-d", help="Field delimiter character (required)"),
    ],
    flavor: Annotated[
        str | None,
        typer.Option("--flavor", help="Database flavor (default: postgresql)"),
    ] = None,
    quotes: Annotated[
        QuoteMode | None,
        typer.Option("--quotes", help="Quote character that protects delimiters"),
    ] = None,
    ncols: Annotated[
        int | None,
        typer.Option("--ncols", min=1, help="Expected number of columns in the header"),
    ] = None,
    output_json: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Infer the most specific storage type of every column."""
    setup_logging(verbose)
    settings = get_settings()

    if len(delimiter) != 1:
        console.print("[red]Error: Delimiter must be a single character[/red]")
        raise typer.Exit(1)

    result = analyze_file(
        file,
        delimiter,
        quote_mode=quotes or settings.default_quote_mode,
        expected_columns=ncols,
        dialect=flavor or settings.default_dialect,
    )

    if not result.success:
        console.print(f"[red]Error: {escape(result.error or '')}[/red]")
        raise typer.Exit(1)

    analysis = result.unwrap()

    if output_json:
        console.print_json(analysis.model_dump_json())
        return

    console.print("Column Analysis:", highlight=False)
    for line in analysis.render_lines():
        console.print(line, highlight=False, markup=False, soft_wrap=True)
