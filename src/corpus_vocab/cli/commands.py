"""
CLI Commands for Vocabulary Extraction

This module provides the command-line interface for extracting the
vocabulary of a text file.
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger

from ..config import get_default_config
from ..exceptions import VocabularyError
from ..usecase import VocabularyUseCase
from ..utils.file_io import read_term_list

app = typer.Typer(
    name="corpus-vocab", help="Extract the normalized vocabulary of a text file"
)


def setup_logging(level: str) -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def _collect_terms(
    terms: Optional[List[str]], terms_file: Optional[Path], encoding: str = "utf-8"
) -> List[str]:
    collected = list(terms or [])
    if terms_file is not None:
        collected.extend(read_term_list(terms_file, encoding=encoding))
    return collected


def _run(
    input_path: Path,
    acronyms: Optional[List[str]],
    acronyms_file: Optional[Path],
    proper_nouns: Optional[List[str]],
    proper_nouns_file: Optional[Path],
    extra_punctuation: str,
    verbose: bool,
    output: Optional[Path] = None,
    sort: bool = True,
    write: bool = True,
):
    try:
        config = get_default_config()
        setup_logging("DEBUG" if verbose else config.log_level)
        config.sort_output = sort

        usecase = VocabularyUseCase(config)
        summary = usecase.run(
            input_path,
            output_path=output,
            write=write,
            extra_punctuation=extra_punctuation,
            extra_acronyms=_collect_terms(acronyms, acronyms_file, config.encoding),
            extra_proper_nouns=_collect_terms(
                proper_nouns, proper_nouns_file, config.encoding
            ),
        )
    except VocabularyError as e:
        typer.echo(f"Extraction failed: {e}", err=True)
        raise typer.Exit(1)

    return usecase, summary


@app.command("extract")
def extract(
    input_path: Path = typer.Argument(..., help="Text file to read"),
    acronyms: Optional[List[str]] = typer.Option(
        None, "--acronym", "-a", help="Acronym kept verbatim (repeatable)"
    ),
    acronyms_file: Optional[Path] = typer.Option(
        None, "--acronyms-file", help="File with one acronym per line"
    ),
    proper_nouns: Optional[List[str]] = typer.Option(
        None, "--proper-noun", "-p", help="Proper noun whose case is kept (repeatable)"
    ),
    proper_nouns_file: Optional[Path] = typer.Option(
        None, "--proper-nouns-file", help="File with one proper noun per line"
    ),
    extra_punctuation: str = typer.Option(
        "", "--extra-punctuation", help="Characters to strip in addition to the defaults"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the vocabulary here instead of stdout"
    ),
    unsorted: bool = typer.Option(
        False, "--unsorted", help="Keep first-seen order instead of sorting"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """
    Extract the vocabulary of INPUT_PATH.

    Prints one word per line, or writes the words to --output.
    """
    usecase, summary = _run(
        input_path,
        acronyms,
        acronyms_file,
        proper_nouns,
        proper_nouns_file,
        extra_punctuation,
        verbose,
        output=output,
        sort=not unsorted,
    )

    if summary["output_path"]:
        typer.echo(f"Wrote {summary['vocabulary_size']} words to {summary['output_path']}")
    else:
        typer.echo(usecase.writer.render(usecase.extractor, sort=not unsorted), nl=False)


@app.command("stats")
def stats(
    input_path: Path = typer.Argument(..., help="Text file to read"),
    acronyms: Optional[List[str]] = typer.Option(
        None, "--acronym", "-a", help="Acronym kept verbatim (repeatable)"
    ),
    acronyms_file: Optional[Path] = typer.Option(
        None, "--acronyms-file", help="File with one acronym per line"
    ),
    proper_nouns: Optional[List[str]] = typer.Option(
        None, "--proper-noun", "-p", help="Proper noun whose case is kept (repeatable)"
    ),
    proper_nouns_file: Optional[Path] = typer.Option(
        None, "--proper-nouns-file", help="File with one proper noun per line"
    ),
    extra_punctuation: str = typer.Option(
        "", "--extra-punctuation", help="Characters to strip in addition to the defaults"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Print vocabulary size and input size for INPUT_PATH."""
    _, summary = _run(
        input_path,
        acronyms,
        acronyms_file,
        proper_nouns,
        proper_nouns_file,
        extra_punctuation,
        verbose,
        write=False,
    )

    typer.echo(f"Input: {summary['input_path']}")
    typer.echo(f"Characters: {summary['raw_characters']}")
    typer.echo(f"Words: {summary['vocabulary_size']}")


if __name__ == "__main__":
    app()
