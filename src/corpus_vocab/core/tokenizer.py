"""
Tokenization for vocabulary extraction.

Text is split on "\n" and then on the literal space character. Tabs and
other whitespace are left inside tokens; empty tokens produced by
consecutive delimiters are kept at this stage.
"""

from pathlib import Path
from typing import Tuple, Union

from loguru import logger

from ..utils.file_io import read_text
from .normalize import OrderedVocabulary

LINE_DELIMITER = "\n"
WORD_DELIMITER = " "


def tokenize(text: str) -> OrderedVocabulary:
    """Split text into a deduplicated collection of raw tokens."""
    tokens = OrderedVocabulary()
    for line in text.split(LINE_DELIMITER):
        for token in line.split(WORD_DELIMITER):
            tokens.add(token)
    return tokens


def tokenize_file(
    path: Union[str, Path], encoding: str = "utf-8"
) -> Tuple[str, OrderedVocabulary]:
    """Read a file and tokenize it.

    Args:
        path: Input text file
        encoding: Text encoding of the file

    Returns:
        Tuple of (raw_text, raw_tokens)

    Raises:
        VocabularyIOError: If the file cannot be read
    """
    text = read_text(path, encoding=encoding)
    tokens = tokenize(text)
    logger.debug(f"Tokenized {path}: {len(text)} characters, {len(tokens)} distinct raw tokens")
    return text, tokens
