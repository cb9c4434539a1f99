"""Shared CLI utilities and constants."""

from __future__ import annotations

from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from file2ddl.core.config import get_settings
from file2ddl.core.logging import configure_logging

# Load .env file from current directory
load_dotenv()

# Shared console instance
console = Console()

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(verbosity: int = 0) -> None:
    """Configure structured logging based on verbosity level.

    Without -v flags the level and format come from settings
    (FILE2DDL_LOG_LEVEL, FILE2DDL_LOG_FORMAT).

    Args:
        verbosity: 0=settings level, 1=INFO, 2+=DEBUG
    """
    settings = get_settings()
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = settings.log_level

    configure_logging(
        log_level=level,
        log_format=settings.log_format,
        show_timestamps=verbosity >= 1,
        color=settings.log_format == "console",
    )
