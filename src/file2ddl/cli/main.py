"""Main CLI application entry point."""

from __future__ import annotations

import typer

from file2ddl.cli.commands import analyze, dialects

app = typer.Typer(
    name="file2ddl",
    help="Infer column storage types from delimited text files.",
    no_args_is_help=True,
)

# Register commands
app.command()(analyze.analyze)
app.command()(dialects.dialects)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
