"""
Vocabulary Writer

This module contains the writer for exporting an extracted vocabulary.
"""

from pathlib import Path
from typing import Union

from loguru import logger

from .core.extractor import VocabularyExtractor
from .utils.file_io import ensure_dir, write_text


class VocabularyWriter:
    """Writer for vocabulary output files."""

    def __init__(self, encoding: str = "utf-8", create_dirs: bool = True):
        """Initialize the writer.

        Args:
            encoding: Text encoding of written files
            create_dirs: Create missing parent directories before writing
        """
        self.encoding = encoding
        self.create_dirs = create_dirs
        self.logger = logger.bind(writer="vocabulary")

    def render(self, extractor: VocabularyExtractor, sort: bool = True) -> str:
        """Render a vocabulary as newline-delimited text."""
        if sort:
            return extractor.get_sorted_pretty_vocabulary()
        return extractor.get_pretty_vocabulary()

    def write(
        self,
        extractor: VocabularyExtractor,
        path: Union[str, Path],
        sort: bool = True,
    ) -> Path:
        """Write a vocabulary to a file, one word per line.

        Args:
            extractor: Extractor holding the vocabulary
            path: Destination file; existing content is replaced
            sort: Sort the words by code point before writing

        Returns:
            Path to the written file

        Raises:
            VocabularyIOError: If the file cannot be written
        """
        path = Path(path)
        if self.create_dirs and path.parent != Path("."):
            ensure_dir(path.parent)

        write_text(path, self.render(extractor, sort=sort), encoding=self.encoding)
        self.logger.info(f"Wrote {len(extractor)} words to {path}")
        return path
