"""Delimited text files as line sources.

Files are read lazily, one line at a time, with line terminators removed.
Analysis and I/O failures are expected outcomes here and are returned as
``Result.fail`` instead of raised.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from file2ddl.analysis.analyzer import Analyzer
from file2ddl.analysis.typing.catalog import TypeCatalog
from file2ddl.analysis.typing.dialects import get_catalog
from file2ddl.core.errors import AnalysisError
from file2ddl.core.logging import get_logger, log_context
from file2ddl.core.models.base import AnalysisResult, QuoteMode, Result

logger = get_logger(__name__)


def read_lines(path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of ``path`` without ``\\n`` / ``\\r\\n`` terminators.

    Lines end at ``\\n`` only; a bare ``\\r`` inside a line is data.
    """
    with open(path, encoding=encoding, newline="\n") as f:
        for line in f:
            yield line.removesuffix("\n").removesuffix("\r")


def analyze_file(
    path: Path,
    delimiter: str,
    quote_mode: QuoteMode | str = QuoteMode.NONE,
    expected_columns: int | None = None,
    dialect: str = "postgresql",
    catalog: TypeCatalog | None = None,
    encoding: str = "utf-8",
) -> Result[AnalysisResult]:
    """Infer column types for a delimited text file.

    Args:
        path: File to scan; the first line is the header
        delimiter: Single-character field separator
        quote_mode: "none", "single" or "double"
        expected_columns: Optional header field count to enforce
        dialect: Database flavor used when ``catalog`` is not given
        catalog: Explicit type catalog
        encoding: Text encoding of the file

    Returns:
        Result containing the AnalysisResult, or the error message
    """
    if not path.exists():
        return Result.fail(f"File not found: {path}")
    if not path.is_file():
        return Result.fail(f"Not a file: {path}")

    with log_context(source=str(path)):
        try:
            if catalog is None:
                catalog = get_catalog(dialect)
            analyzer = Analyzer(catalog, delimiter, quote_mode, expected_columns)
            result = analyzer.analyze(read_lines(path, encoding))
        except AnalysisError as e:
            logger.warning("analysis_failed", error=str(e))
            return Result.fail(str(e))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("read_failed", error=str(e))
            return Result.fail(f"Error reading file: {e}")

    return Result.ok(result)
