"""Command-line interface for corpus-vocab."""

from .commands import app

__all__ = ["app"]
