"""
Number Parser package.
"""

__version__ = "1.0.0"

from number_parser.casting import parse_numbers, sort_descending
from number_parser.config_models import FormatType, NumberParserConfig
from number_parser.errors import (
    NumberFormatError,
    NumberParserError,
    PersistError,
    UnsupportedFormatError,
)
from number_parser.models import InputTokens, RunResult
from number_parser.orchestrator import run, sort_and_persist
from number_parser.writers import create_writer, supported_formats

__all__ = [
    "FormatType",
    "NumberParserConfig",
    "InputTokens",
    "RunResult",
    "NumberParserError",
    "NumberFormatError",
    "UnsupportedFormatError",
    "PersistError",
    "parse_numbers",
    "sort_descending",
    "create_writer",
    "supported_formats",
    "sort_and_persist",
    "run",
]
