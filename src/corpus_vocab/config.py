"""
Vocabulary Extraction Configuration

This module provides the configuration model and default settings for the
vocabulary extractor. Defaults can be overridden through environment
variables (or a .env file):

    VOCAB_EXTRA_PUNCTUATION   characters appended to the default punctuation
    VOCAB_ACRONYMS            comma-separated acronym list
    VOCAB_PROPER_NOUNS        comma-separated proper-noun list
    VOCAB_ENCODING            input/output text encoding
    VOCAB_OUTPUT_PATH         default output file
    VOCAB_LOG_LEVEL           loguru sink level
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError

DEFAULT_PUNCTUATION = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~“”„‚‘’（）"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class VocabularyConfig(BaseModel):
    """Main configuration for vocabulary extraction."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    # Normalization configuration
    punctuation: str = Field(
        default=DEFAULT_PUNCTUATION,
        description="Characters stripped from token edges",
    )
    acronyms: List[str] = Field(
        default_factory=list,
        description="Exact-match tokens exempt from stripping and lowercasing",
    )
    proper_nouns: List[str] = Field(
        default_factory=list,
        description="Exact-match tokens exempt from lowercasing",
    )

    # I/O configuration
    encoding: str = Field(default="utf-8", description="Text encoding for input and output")
    output_path: Optional[Path] = Field(
        default=None, description="Where to write the vocabulary, if anywhere"
    )
    sort_output: bool = Field(
        default=True, description="Sort the vocabulary before printing"
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("punctuation")
    @classmethod
    def _punctuation_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("punctuation must contain at least one character")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def _split_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def get_default_config() -> VocabularyConfig:
    """Get default vocabulary configuration with environment variable overrides.

    Returns:
        VocabularyConfig: Default configuration

    Raises:
        ConfigError: If an override does not validate
    """
    load_dotenv()  # Load environment variables from .env if present

    output_path = os.getenv("VOCAB_OUTPUT_PATH")
    try:
        config = VocabularyConfig(
            punctuation=DEFAULT_PUNCTUATION + os.getenv("VOCAB_EXTRA_PUNCTUATION", ""),
            acronyms=_split_list(os.getenv("VOCAB_ACRONYMS")),
            proper_nouns=_split_list(os.getenv("VOCAB_PROPER_NOUNS")),
            encoding=os.getenv("VOCAB_ENCODING", "utf-8"),
            output_path=Path(output_path) if output_path else None,
            log_level=os.getenv("VOCAB_LOG_LEVEL", "INFO"),
        )
    except ValidationError as e:
        logger.error(f"Error loading configuration: {e}")
        raise ConfigError(str(e)) from e

    return config


def load_config() -> VocabularyConfig:
    """Alias for get_default_config."""
    return get_default_config()
