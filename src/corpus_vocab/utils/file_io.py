"""
File I/O utilities for vocabulary extraction.

This module contains the only places where the package touches the
filesystem. Every failure is re-raised as a VocabularyIOError carrying the
path and the attempted operation.
"""

from pathlib import Path
from typing import List, Union

from loguru import logger

from ..exceptions import VocabularyIOError


def ensure_dir(path: Path) -> None:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    path.mkdir(parents=True, exist_ok=True)


def read_text(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a whole text file into memory.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        The file content, verbatim

    Raises:
        VocabularyIOError: If the file is missing, unreadable or not decodable
    """
    path = Path(path)
    try:
        # newline="" keeps "\r" so the tokenizer sees the bytes as written
        with open(path, "r", encoding=encoding, newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise VocabularyIOError(path, "read", str(e), cause=e) from e


def write_text(path: Union[str, Path], content: str, encoding: str = "utf-8") -> Path:
    """Write text to a file, replacing any existing content.

    Args:
        path: Destination file
        content: Text to write
        encoding: Text encoding of the file

    Returns:
        The destination path

    Raises:
        VocabularyIOError: If the destination cannot be written
    """
    path = Path(path)
    try:
        with open(path, "w", encoding=encoding, newline="") as fh:
            fh.write(content)
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}")
        raise VocabularyIOError(path, "write", str(e), cause=e) from e
    return path


def read_term_list(path: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    """Load an acronym or proper-noun list, one term per line.

    Blank lines are skipped and surrounding whitespace is removed; the
    order of the file is kept.
    """
    terms = []
    for line in read_text(path, encoding=encoding).splitlines():
        term = line.strip()
        if term:
            terms.append(term)
    logger.debug(f"Loaded {len(terms)} terms from {path}")
    return terms
