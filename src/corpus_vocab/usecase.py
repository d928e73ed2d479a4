"""
Vocabulary Extraction Use Case

This module ties configuration, extraction and output together for a
single input file.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from loguru import logger

from .config import VocabularyConfig, get_default_config
from .core.extractor import VocabularyExtractor
from .writer import VocabularyWriter


class VocabularyUseCase:
    """Main use case for extracting the vocabulary of a text file."""

    def __init__(self, config: Optional[VocabularyConfig] = None):
        """Initialize the use case.

        Args:
            config: Extraction configuration; loaded from the environment if omitted
        """
        self.config = config or get_default_config()
        self.writer = VocabularyWriter(encoding=self.config.encoding)
        self.extractor: Optional[VocabularyExtractor] = None

    def extract(
        self,
        input_path: Union[str, Path],
        extra_punctuation: str = "",
        extra_acronyms: Iterable[str] = (),
        extra_proper_nouns: Iterable[str] = (),
    ) -> VocabularyExtractor:
        """Build an extractor for the input file.

        Extra terms and punctuation are appended to the configured values
        for this call only.
        """
        config = self.config.model_copy(
            update={
                "punctuation": self.config.punctuation + extra_punctuation,
                "acronyms": [*self.config.acronyms, *extra_acronyms],
                "proper_nouns": [*self.config.proper_nouns, *extra_proper_nouns],
            }
        )
        extractor = VocabularyExtractor.from_config(input_path, config)
        self.extractor = extractor
        return extractor

    def run(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
        write: bool = True,
        **extract_kwargs: Any,
    ) -> Dict[str, Any]:
        """Extract a vocabulary and optionally write it out.

        Args:
            input_path: Text file to read
            output_path: Destination file; falls back to config.output_path
            write: When False nothing is written, even if an output path is configured
            **extract_kwargs: Passed through to extract()

        Returns:
            Summary of the run
        """
        logger.info(f"Extracting vocabulary from {input_path}")
        extractor = self.extract(input_path, **extract_kwargs)

        destination = output_path or self.config.output_path
        written = None
        if write and destination is not None:
            written = self.writer.write(extractor, destination, sort=self.config.sort_output)

        return {
            "input_path": str(input_path),
            "output_path": str(written) if written else None,
            "vocabulary_size": extractor.get_length(),
            "raw_characters": len(extractor.text),
            "acronyms": list(extractor.acronyms),
            "proper_nouns": list(extractor.proper_nouns),
        }
