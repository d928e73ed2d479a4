"""
Unit tests for the corpus-vocab CLI

Tests cover:
- extract to stdout and to a file
- exception lists from options and files
- stats output
- error handling
"""

import sys

import pytest
from loguru import logger
from typer.testing import CliRunner

from corpus_vocab.cli.commands import app


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep loguru output out of the captured CLI output."""
    monkeypatch.setenv("VOCAB_LOG_LEVEL", "CRITICAL")
    yield
    # The CLI points loguru at the runner's stderr; restore the default sink
    logger.remove()
    logger.add(sys.stderr)


class TestExtractCommand:
    """Test the extract CLI command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_extract_to_stdout(self, sample_file):
        result = self.runner.invoke(
            app, ["extract", str(sample_file), "-a", "EU", "-p", "France"]
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["EU", "France", "hello", "says", "world"]

    def test_extract_unsorted(self, sample_file):
        result = self.runner.invoke(app, ["extract", str(sample_file), "--unsorted"])

        assert result.exit_code == 0
        assert sorted(result.stdout.splitlines()) == ["eu", "france", "hello", "says", "world"]

    def test_extract_to_file(self, sample_file, tmp_path):
        output = tmp_path / "vocab.txt"

        result = self.runner.invoke(
            app, ["extract", str(sample_file), "--output", str(output), "--acronym", "EU"]
        )

        assert result.exit_code == 0
        assert "Wrote 5 words" in result.stdout
        assert output.read_text(encoding="utf-8") == "EU\nfrance\nhello\nsays\nworld\n"

    def test_extract_with_term_files(self, sample_file, tmp_path):
        acronyms = tmp_path / "acronyms.txt"
        acronyms.write_text("EU\n", encoding="utf-8")
        proper_nouns = tmp_path / "proper_nouns.txt"
        proper_nouns.write_text("France\n", encoding="utf-8")

        result = self.runner.invoke(
            app,
            [
                "extract",
                str(sample_file),
                "--acronyms-file",
                str(acronyms),
                "--proper-nouns-file",
                str(proper_nouns),
            ],
        )

        assert result.exit_code == 0
        assert "EU" in result.stdout.splitlines()
        assert "France" in result.stdout.splitlines()

    def test_extract_with_extra_punctuation(self, tmp_path):
        path = tmp_path / "ja.txt"
        path.write_text("終わり。", encoding="utf-8")

        result = self.runner.invoke(
            app, ["extract", str(path), "--extra-punctuation", "。"]
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["終わり"]

    def test_extract_missing_input(self, tmp_path):
        result = self.runner.invoke(app, ["extract", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1

    def test_extract_missing_term_file(self, sample_file, tmp_path):
        result = self.runner.invoke(
            app, ["extract", str(sample_file), "--acronyms-file", str(tmp_path / "none.txt")]
        )

        assert result.exit_code == 1


class TestStatsCommand:
    """Test the stats CLI command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_stats(self, sample_file):
        result = self.runner.invoke(app, ["stats", str(sample_file), "-a", "EU"])

        assert result.exit_code == 0
        assert "Words: 5" in result.stdout
        assert f"Characters: {len(sample_file.read_text(encoding='utf-8'))}" in result.stdout

    def test_stats_empty_file(self, empty_file):
        result = self.runner.invoke(app, ["stats", str(empty_file)])

        assert result.exit_code == 0
        assert "Words: 0" in result.stdout

    def test_stats_does_not_write_configured_output(self, sample_file, tmp_path, monkeypatch):
        output = tmp_path / "vocab.txt"
        monkeypatch.setenv("VOCAB_OUTPUT_PATH", str(output))

        result = self.runner.invoke(app, ["stats", str(sample_file)])

        assert result.exit_code == 0
        assert "Words: 5" in result.stdout
        assert not output.exists()

    def test_extract_writes_configured_output(self, sample_file, tmp_path, monkeypatch):
        output = tmp_path / "vocab.txt"
        monkeypatch.setenv("VOCAB_OUTPUT_PATH", str(output))

        result = self.runner.invoke(app, ["extract", str(sample_file)])

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8") == "eu\nfrance\nhello\nsays\nworld\n"


class TestTermFileEncoding:
    """Test that term files are read with the configured encoding."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_proper_nouns_file_uses_configured_encoding(self, tmp_path, monkeypatch):
        monkeypatch.setenv("VOCAB_ENCODING", "latin-1")
        text = tmp_path / "input.txt"
        text.write_bytes("Visite à Sète".encode("latin-1"))
        proper_nouns = tmp_path / "proper_nouns.txt"
        proper_nouns.write_bytes("Sète\n".encode("latin-1"))

        result = self.runner.invoke(
            app, ["extract", str(text), "--proper-nouns-file", str(proper_nouns)]
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Sète", "visite", "à"]
