"""Utility helpers for corpus-vocab."""

from .file_io import ensure_dir, read_term_list, read_text, write_text

__all__ = ["ensure_dir", "read_term_list", "read_text", "write_text"]
