"""Shared models."""

from file2ddl.core.models.base import AnalysisResult, ColumnType, QuoteMode, Result

__all__ = [
    "AnalysisResult",
    "ColumnType",
    "QuoteMode",
    "Result",
]
