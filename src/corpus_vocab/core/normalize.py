"""
Vocabulary normalization stages.

Each stage takes one OrderedVocabulary snapshot and returns a new one;
nothing is mutated in place. The stages are run in this order by
VocabularyExtractor:

    strip_punctuation -> fold_case -> filter_numeric
"""

import re
from typing import Iterable, Iterator, List, Optional

# Optional sign, then either a decimal (digits with optional fraction or a bare
# fraction, optional exponent) or one of the special values inf/infinity/nan.
NUMERIC_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf|infinity|nan)",
    flags=re.ASCII | re.IGNORECASE,
)


class OrderedVocabulary:
    """Deduplicating collection of tokens that remembers first-insertion order.

    Backed by a dict so membership is O(1) and iteration order is stable
    from one run to the next.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Optional[Iterable[str]] = None):
        self._tokens = dict.fromkeys(tokens) if tokens is not None else {}

    def add(self, token: str) -> None:
        self._tokens[token] = None

    def to_list(self) -> List[str]:
        return list(self._tokens)

    def copy(self) -> "OrderedVocabulary":
        return OrderedVocabulary(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedVocabulary):
            return self._tokens.keys() == other._tokens.keys()
        if isinstance(other, (set, frozenset)):
            return self._tokens.keys() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"OrderedVocabulary({self.to_list()!r})"


def strip_token(token: str, punctuation: Iterable[str]) -> str:
    """Strip punctuation from the edges of a single token.

    Trailing punctuation is removed one character at a time. A leading
    punctuation character is removed everywhere it occurs in the token,
    not just at the front, so "'rock'n'roll" becomes "rocknroll".
    """
    punct = punctuation if isinstance(punctuation, (set, frozenset, str)) else set(punctuation)
    while token:
        if token[-1] in punct:
            token = token[:-1]
        elif token[0] in punct:
            token = token.replace(token[0], "")
        else:
            break
    return token


def strip_punctuation(
    vocabulary: Iterable[str], punctuation: Iterable[str], acronyms: Iterable[str] = ()
) -> OrderedVocabulary:
    """Strip edge punctuation from every token that is not an acronym.

    Args:
        vocabulary: Current tokens
        punctuation: Characters treated as punctuation
        acronyms: Tokens left exactly as they are (e.g. "e.g.", "U.S.")

    Returns:
        New vocabulary of cleaned tokens
    """
    punct = frozenset(punctuation)
    exempt = frozenset(acronyms)
    result = OrderedVocabulary()
    for token in vocabulary:
        result.add(token if token in exempt else strip_token(token, punct))
    return result


def fold_case(
    vocabulary: Iterable[str], acronyms: Iterable[str] = (), proper_nouns: Iterable[str] = ()
) -> OrderedVocabulary:
    """Lowercase every token except exact acronym and proper-noun matches."""
    exempt = frozenset(acronyms) | frozenset(proper_nouns)
    result = OrderedVocabulary()
    for token in vocabulary:
        result.add(token if token in exempt else token.lower())
    return result


def is_numeric(token: str) -> bool:
    """Return True if the token parses as a float, e.g. "42", "-7", "3.14e2" or "NaN"."""
    return NUMERIC_PATTERN.fullmatch(token) is not None


def filter_numeric(vocabulary: Iterable[str]) -> OrderedVocabulary:
    """Drop numeric tokens, and the empty token left behind by tokenization or stripping."""
    result = OrderedVocabulary()
    for token in vocabulary:
        if token and not is_numeric(token):
            result.add(token)
    return result
