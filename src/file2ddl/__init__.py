"""file2ddl - infer column storage types from delimited text files."""

from file2ddl.analysis.analyzer import Analyzer, analyze
from file2ddl.analysis.typing.catalog import TypeCatalog
from file2ddl.analysis.typing.dialects import get_catalog
from file2ddl.core.models import AnalysisResult, ColumnType, QuoteMode

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "Analyzer",
    "ColumnType",
    "QuoteMode",
    "TypeCatalog",
    "analyze",
    "get_catalog",
]
