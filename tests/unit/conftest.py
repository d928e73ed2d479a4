"""
Pytest configuration for corpus-vocab tests.
"""

from pathlib import Path

import pytest

VOCAB_ENV_VARS = (
    "VOCAB_EXTRA_PUNCTUATION",
    "VOCAB_ACRONYMS",
    "VOCAB_PROPER_NOUNS",
    "VOCAB_ENCODING",
    "VOCAB_OUTPUT_PATH",
    "VOCAB_LOG_LEVEL",
)

SAMPLE_TEXT = "Hello world. EU says HELLO.\nFrance 2020!"


@pytest.fixture(autouse=True)
def clean_vocab_env(monkeypatch):
    """Keep VOCAB_* settings from the developer's shell or a .env file out of the tests."""
    for name in VOCAB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("corpus_vocab.config.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def sample_file(tmp_path) -> Path:
    """A small input file with acronyms, proper nouns and numbers."""
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def empty_file(tmp_path) -> Path:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    return path
