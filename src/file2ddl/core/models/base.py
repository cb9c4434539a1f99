"""Base models and types used across all modules.

This module contains the fundamental types shared by the analyzer, the
file source and the CLI.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value

    def map(self, fn: Callable[[T], Any]) -> Result[Any]:
        """Transform the value if successful."""
        if self.success and self.value is not None:
            return Result.ok(fn(self.value), self.warnings)
        return self


# === Enums ===


class QuoteMode(str, Enum):
    """Tokenizer quote handling."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"

    @property
    def quote_char(self) -> str | None:
        """Quote character for this mode, None when quoting is off."""
        if self is QuoteMode.SINGLE:
            return "'"
        if self is QuoteMode.DOUBLE:
            return '"'
        return None


# === Analysis Models ===


class ColumnType(BaseModel):
    """Inferred storage type of one column.

    ``length`` is only set for bounded-length text types.
    """

    name: str
    length: int | None = None

    def __str__(self) -> str:
        if self.length is not None:
            return f"{self.name}({self.length})"
        return self.name


class AnalysisResult(BaseModel):
    """Outcome of a completed scan."""

    column_names: list[str] = Field(default_factory=list)
    column_types: list[ColumnType] = Field(default_factory=list)
    dialect: str | None = None
    rows_scanned: int = 0

    def columns(self) -> Iterator[tuple[str, ColumnType]]:
        """Iterate (column name, type) pairs in header order."""
        return zip(self.column_names, self.column_types, strict=True)

    def render_lines(self) -> list[str]:
        """Human-readable ``<name>: <type>`` lines."""
        return [f"{name}: {column_type}" for name, column_type in self.columns()]
