"""
corpus-vocab: extract the normalized vocabulary of a text file.

Works for any language whose words are separated by a space (U+0020).
"""

from .config import DEFAULT_PUNCTUATION, VocabularyConfig, get_default_config, load_config
from .core import OrderedVocabulary, VocabularyExtractor
from .exceptions import ConfigError, VocabularyError, VocabularyIOError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PUNCTUATION",
    "ConfigError",
    "OrderedVocabulary",
    "VocabularyConfig",
    "VocabularyError",
    "VocabularyExtractor",
    "VocabularyIOError",
    "get_default_config",
    "load_config",
]
