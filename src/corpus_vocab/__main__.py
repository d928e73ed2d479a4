"""
Main entry point for corpus-vocab

This allows the extractor to be run as a module:
    python -m corpus_vocab --help
"""

from .cli.commands import app

if __name__ == "__main__":
    app()
