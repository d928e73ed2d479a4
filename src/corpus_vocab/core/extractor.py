"""
Vocabulary Extractor

Holds the raw text of a document together with its normalization settings
and the vocabulary derived from it. Construction tokenizes the text and
runs the full pipeline once:

    strip_punctuation -> fold_case -> filter_numeric

Each stage can also be re-run on its own, for example after extending the
punctuation set with add_punctuation().

Example:
    >>> x = VocabularyExtractor(
    ...     "somepath/somefile.txt",
    ...     acronyms=["EU", "etc.", "i.e.", "e.g."],
    ...     proper_nouns=["Germany", "France", "Belgium", "Italy"],
    ... )
    >>> print(x.get_sorted_pretty_vocabulary())
    >>> x.write_to_file("somepath/vocabulary.txt")
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from loguru import logger

from ..config import DEFAULT_PUNCTUATION, VocabularyConfig
from ..utils.file_io import write_text
from .normalize import OrderedVocabulary, filter_numeric, fold_case, strip_punctuation
from .tokenizer import tokenize, tokenize_file


class VocabularyExtractor:
    """Extracts and normalizes the distinct words of a text file."""

    def __init__(
        self,
        path: Union[str, Path],
        acronyms: Iterable[str] = (),
        proper_nouns: Iterable[str] = (),
        punctuation: Optional[str] = None,
        encoding: str = "utf-8",
    ):
        """Read a text file and derive its vocabulary.

        Args:
            path: Input text file
            acronyms: Tokens kept verbatim (no stripping, no lowercasing)
            proper_nouns: Tokens whose case is kept
            punctuation: Punctuation characters; defaults to DEFAULT_PUNCTUATION
            encoding: Text encoding of the input file

        Raises:
            VocabularyIOError: If the file cannot be read
        """
        text, tokens = tokenize_file(path, encoding=encoding)
        self._setup(text, tokens, acronyms, proper_nouns, punctuation, encoding)
        self.logger.info(f"Extracted {len(self)} words from {path}")

    @classmethod
    def from_text(
        cls,
        text: str,
        acronyms: Iterable[str] = (),
        proper_nouns: Iterable[str] = (),
        punctuation: Optional[str] = None,
    ) -> "VocabularyExtractor":
        """Build an extractor from an in-memory string instead of a file."""
        extractor = cls.__new__(cls)
        extractor._setup(text, tokenize(text), acronyms, proper_nouns, punctuation, "utf-8")
        extractor.logger.debug(f"Extracted {len(extractor)} words from in-memory text")
        return extractor

    @classmethod
    def from_config(
        cls, path: Union[str, Path], config: VocabularyConfig
    ) -> "VocabularyExtractor":
        """Build an extractor using the settings of a VocabularyConfig."""
        return cls(
            path,
            acronyms=config.acronyms,
            proper_nouns=config.proper_nouns,
            punctuation=config.punctuation,
            encoding=config.encoding,
        )

    def _setup(
        self,
        text: str,
        tokens: OrderedVocabulary,
        acronyms: Iterable[str],
        proper_nouns: Iterable[str],
        punctuation: Optional[str],
        encoding: str,
    ) -> None:
        self.text = text
        self.acronyms: List[str] = list(acronyms)
        self.proper_nouns: List[str] = list(proper_nouns)
        self.punctuation = DEFAULT_PUNCTUATION if punctuation is None else punctuation
        self.encoding = encoding
        self.logger = logger.bind(component="vocabulary_extractor")
        self._vocabulary = tokens

        self.strip_punctuation()
        self.fold_case()
        self.filter_numeric()

    # ------------------------------------------------------------------ #
    # Pipeline stages
    # ------------------------------------------------------------------ #

    def _replace(self, stage: str, vocabulary: OrderedVocabulary) -> None:
        self.logger.debug(f"{stage}: {len(self._vocabulary)} -> {len(vocabulary)} tokens")
        self._vocabulary = vocabulary

    def strip_punctuation(self) -> None:
        """Strip punctuation from the edges of the current vocabulary.

        Runs during construction, and can be called again after
        add_punctuation() to apply new characters. Works on the current
        vocabulary, so repeated calls only ever strip further.
        """
        self._replace(
            "strip_punctuation",
            strip_punctuation(self._vocabulary, self.punctuation, self.acronyms),
        )

    def fold_case(self) -> None:
        """Lowercase every token that is not an acronym or proper noun."""
        self._replace(
            "fold_case", fold_case(self._vocabulary, self.acronyms, self.proper_nouns)
        )

    def filter_numeric(self) -> None:
        """Remove tokens that are plain numbers."""
        self._replace("filter_numeric", filter_numeric(self._vocabulary))

    def add_punctuation(self, characters: str) -> None:
        """Append characters to the punctuation set.

        The vocabulary is not re-processed; call strip_punctuation() to
        apply the change.
        """
        self.punctuation += characters

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def vocabulary(self) -> OrderedVocabulary:
        return self._vocabulary

    def get_vocabulary(self) -> List[str]:
        return self._vocabulary.to_list()

    def get_pretty_vocabulary(self) -> str:
        return "".join(f"{token}\n" for token in self._vocabulary)

    def get_sorted_vocabulary(self) -> List[str]:
        return sorted(self._vocabulary)

    def get_sorted_pretty_vocabulary(self) -> str:
        return "".join(f"{token}\n" for token in self.get_sorted_vocabulary())

    def get_length(self) -> int:
        return len(self._vocabulary)

    def write_to_file(self, path: Union[str, Path]) -> Path:
        """Write the sorted vocabulary to a file, one word per line.

        Any existing content is replaced.

        Raises:
            VocabularyIOError: If the file cannot be written
        """
        written = write_text(path, self.get_sorted_pretty_vocabulary(), encoding=self.encoding)
        self.logger.info(f"Wrote {len(self)} words to {written}")
        return written

    def copy(self) -> "VocabularyExtractor":
        """Return an independent copy that can be modified separately."""
        clone = self.__class__.__new__(self.__class__)
        clone.text = self.text
        clone.acronyms = list(self.acronyms)
        clone.proper_nouns = list(self.proper_nouns)
        clone.punctuation = self.punctuation
        clone.encoding = self.encoding
        clone.logger = self.logger
        clone._vocabulary = self._vocabulary.copy()
        return clone

    __copy__ = copy

    def __len__(self) -> int:
        return self.get_length()

    def __iter__(self) -> Iterator[str]:
        return iter(self._vocabulary)

    def __contains__(self, token: object) -> bool:
        return token in self._vocabulary

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(words={len(self)}, "
            f"acronyms={len(self.acronyms)}, proper_nouns={len(self.proper_nouns)})"
        )
