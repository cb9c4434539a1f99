"""Core module - configuration, logging, errors and shared models."""

from file2ddl.core.config import Settings, get_settings
from file2ddl.core.errors import AnalysisError, ConfigurationError, StructuralError
from file2ddl.core.models.base import AnalysisResult, ColumnType, QuoteMode, Result

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "AnalysisError",
    "ConfigurationError",
    "StructuralError",
    # Models
    "AnalysisResult",
    "ColumnType",
    "QuoteMode",
    "Result",
]
