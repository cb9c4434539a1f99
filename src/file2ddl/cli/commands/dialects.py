"""Dialects command - list supported database flavors and their types."""

from __future__ import annotations

from rich.table import Table as RichTable

from file2ddl.analysis.typing.dialects import available_dialects, get_catalog
from file2ddl.cli.common import console


def dialects() -> None:
    """List database flavors and their types in promotion order."""
    for name in available_dialects():
        catalog = get_catalog(name)

        console.print(f"\n[bold]{name}[/bold]")
        table = RichTable(show_header=True, header_style="bold")
        table.add_column("Rank", justify="right")
        table.add_column("Type")
        table.add_column("Max Length", justify="right")
        table.add_column("Compatible With")

        for candidate in catalog:
            table.add_row(
                str(int(candidate.rank)),
                candidate.name,
                str(candidate.max_length) if candidate.max_length is not None else "",
                ", ".join(candidate.compatible_with),
            )

        console.print(table)
