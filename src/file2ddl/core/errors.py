"""Fatal analysis errors."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for errors that abort a scan."""


class ConfigurationError(AnalysisError):
    """Scan parameters are invalid or disagree with the header row."""


class StructuralError(AnalysisError):
    """A data row does not have the column count established by the header."""

    def __init__(self, line_number: int, expected: int, actual: int):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(f"line {line_number} has {actual} fields, expected {expected}")
