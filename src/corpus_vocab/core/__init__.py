"""Core tokenization, normalization and extraction logic."""

from .extractor import VocabularyExtractor
from .normalize import (
    OrderedVocabulary,
    filter_numeric,
    fold_case,
    is_numeric,
    strip_punctuation,
    strip_token,
)
from .tokenizer import tokenize, tokenize_file

__all__ = [
    "VocabularyExtractor",
    "OrderedVocabulary",
    "filter_numeric",
    "fold_case",
    "is_numeric",
    "strip_punctuation",
    "strip_token",
    "tokenize",
    "tokenize_file",
]
