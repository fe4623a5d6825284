"""
Writer modules for the supported output formats.

Format names are matched case-insensitively against WRITER_REGISTRY.
"""

from typing import Dict, List, Optional, Type

from number_parser.config_models import FormatType, NumberParserConfig
from number_parser.errors import UnsupportedFormatError
from number_parser.writers.base_writer import BaseWriter
from number_parser.writers.json_writer import JSONWriter
from number_parser.writers.text_writer import TextWriter
from number_parser.writers.xml_writer import XMLWriter

WRITER_REGISTRY: Dict[FormatType, Type[BaseWriter]] = {
    FormatType.TEXT: TextWriter,
    FormatType.JSON: JSONWriter,
    FormatType.XML: XMLWriter,
}


def supported_formats() -> List[str]:
    """Return the format names that have a writer."""
    return [format_type.value for format_type in WRITER_REGISTRY]


def create_writer(format_name: str, config: Optional[NumberParserConfig] = None) -> BaseWriter:
    """Return a writer for format_name.

    Raises:
        UnsupportedFormatError: If no writer handles the format
    """
    try:
        format_type = FormatType(format_name.lower())
    except ValueError:
        raise UnsupportedFormatError(f"Unsupported format: {format_name}") from None
    return WRITER_REGISTRY[format_type](config)


__all__ = [
    "BaseWriter",
    "TextWriter",
    "JSONWriter",
    "XMLWriter",
    "WRITER_REGISTRY",
    "supported_formats",
    "create_writer",
]
