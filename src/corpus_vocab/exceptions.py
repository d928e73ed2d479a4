"""
Exceptions for corpus-vocab.

All errors raised by the package derive from VocabularyError so callers
can catch a single type at the CLI or use case boundary.
"""

from typing import Optional, Union
from pathlib import Path


class VocabularyError(Exception):
    """Base exception for vocabulary extraction errors."""


class VocabularyIOError(VocabularyError, OSError):
    """Raised when an input file cannot be read or an output file cannot be written."""

    def __init__(
        self,
        path: Union[str, Path],
        operation: str,
        message: str,
        cause: Optional[BaseException] = None,
    ):
        self.path = Path(path)
        self.operation = operation
        self.message = message
        self.cause = cause
        super().__init__(f"Unable to {operation} {self.path}: {message}")


class ConfigError(VocabularyError):
    """Raised for invalid configuration values."""
