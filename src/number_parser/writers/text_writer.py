"""
Plain delimited text writer.
"""

from typing import Sequence

from number_parser.config_models import FormatType
from number_parser.writers.base_writer import BaseWriter


class TextWriter(BaseWriter):
    """Writes numbers joined by the configured delimiter, no trailing newline."""

    format_type = FormatType.TEXT

    def serialize(self, numbers: Sequence[int]) -> bytes:
        text = self.config.text_delimiter.join(str(n) for n in numbers)
        return text.encode(self.config.encoding)
