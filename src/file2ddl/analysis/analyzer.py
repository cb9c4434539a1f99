"""Column type analyzer.

Scans a delimited text stream line by line and promotes each column to the
least specific type needed to hold every value observed in it. The first
line is the header; it fixes the column names and the field count every
data row must have.

Promotion is monotone: a column's rank only ever goes up during a scan, so
the final rank of a column is the maximum of the ranks of its values.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from file2ddl.analysis.typing.catalog import TypeCatalog, TypeRank
from file2ddl.analysis.typing.dialects import get_catalog
from file2ddl.analysis.typing.tokenizer import split_fields
from file2ddl.core.config import get_settings
from file2ddl.core.errors import ConfigurationError, StructuralError
from file2ddl.core.logging import get_logger
from file2ddl.core.models.base import AnalysisResult, ColumnType, QuoteMode

logger = get_logger(__name__)


@dataclass
class ColumnState:
    """Running promotion state for one column."""

    index: int
    name: str
    rank: TypeRank
    max_length: int = 0

    def observe(self, value: str, catalog: TypeCatalog) -> bool:
        """Fold one field value into the state.

        Returns:
            True if the column was promoted
        """
        field_rank = catalog.infer_rank(value)
        bounded = catalog.bounded_text
        if bounded is not None and field_rank == bounded.rank:
            self.max_length = max(self.max_length, len(value))

        if field_rank > self.rank:
            self.rank = field_rank
            return True
        return False

    def column_type(self, catalog: TypeCatalog) -> ColumnType:
        candidate = catalog.candidate(self.rank)
        if candidate.is_bounded_text:
            return ColumnType(name=candidate.name, length=self.max_length)
        return ColumnType(name=candidate.name)


class Analyzer:
    """Infers column types for one delimited text stream.

    Args:
        catalog: Candidate types of the target dialect
        delimiter: Single-character field separator
        quote_mode: Quote handling for the tokenizer
        expected_columns: If given, the header must have exactly this many fields
    """

    def __init__(
        self,
        catalog: TypeCatalog,
        delimiter: str,
        quote_mode: QuoteMode | str = QuoteMode.NONE,
        expected_columns: int | None = None,
    ):
        if len(delimiter) != 1:
            raise ConfigurationError("delimiter must be a single character")
        if expected_columns is not None and expected_columns <= 0:
            raise ConfigurationError(
                f"expected column count must be positive, got {expected_columns}"
            )
        try:
            quote_mode = QuoteMode(quote_mode)
        except ValueError:
            supported = ", ".join(m.value for m in QuoteMode)
            raise ConfigurationError(
                f"unsupported quote mode: {quote_mode}. Supported modes: {supported}"
            ) from None
        if quote_mode.quote_char == delimiter:
            raise ConfigurationError(
                f"delimiter {delimiter!r} cannot be the {quote_mode.value} quote character"
            )

        self.catalog = catalog
        self.delimiter = delimiter
        self.quote_mode = quote_mode
        self.expected_columns = expected_columns

    def _split(self, line: str) -> list[str]:
        return split_fields(line, self.delimiter, self.quote_mode)

    def analyze(self, lines: Iterable[str]) -> AnalysisResult:
        """Scan ``lines`` and return the inferred type of every column.

        Lines are consumed one at a time; memory use depends on the number of
        columns only.

        Raises:
            ConfigurationError: If the header disagrees with ``expected_columns``
            StructuralError: At the first data row with the wrong field count
        """
        iterator = iter(lines)
        header_line = next(iterator, None)
        headers = self._split(header_line) if header_line is not None else []

        if self.expected_columns is not None and len(headers) != self.expected_columns:
            raise ConfigurationError(
                f"header line has {len(headers)} fields, expected {self.expected_columns}"
            )

        if header_line is None:
            logger.info("analysis_complete", columns=0, rows=0)
            return AnalysisResult(dialect=self.catalog.dialect)

        columns = [
            ColumnState(index=i, name=name, rank=self.catalog.most_specific)
            for i, name in enumerate(headers)
        ]
        expected = len(columns)

        rows = 0
        for line_number, line in enumerate(iterator, start=2):
            fields = self._split(line)
            if len(fields) != expected:
                logger.warning(
                    "field_count_mismatch",
                    line=line_number,
                    expected=expected,
                    actual=len(fields),
                )
                raise StructuralError(line_number, expected, len(fields))

            for column, value in zip(columns, fields, strict=True):
                if column.observe(value, self.catalog):
                    logger.debug(
                        "column_promoted",
                        column=column.name,
                        to_type=self.catalog.candidate(column.rank).name,
                        line=line_number,
                    )
            rows += 1

        logger.info("analysis_complete", columns=expected, rows=rows)
        return AnalysisResult(
            column_names=headers,
            column_types=[c.column_type(self.catalog) for c in columns],
            dialect=self.catalog.dialect,
            rows_scanned=rows,
        )


def analyze(
    lines: Iterable[str],
    delimiter: str,
    quote_mode: QuoteMode | str = QuoteMode.NONE,
    expected_columns: int | None = None,
    catalog: TypeCatalog | None = None,
) -> AnalysisResult:
    """Infer column types for a sequence of text lines.

    Args:
        lines: Header line followed by data lines, without line terminators
        delimiter: Single-character field separator
        quote_mode: "none", "single" or "double"
        expected_columns: Optional header field count to enforce
        catalog: Type catalog, defaults to the configured default dialect

    Returns:
        AnalysisResult with column names and their inferred types

    Raises:
        ConfigurationError: Invalid parameters or header/expected count mismatch
        StructuralError: A data row with the wrong field count
    """
    if catalog is None:
        catalog = get_catalog(get_settings().default_dialect)

    return Analyzer(catalog, delimiter, quote_mode, expected_columns).analyze(lines)
