"""
JSON array writer.
"""

import json
from typing import Sequence

from number_parser.config_models import FormatType
from number_parser.writers.base_writer import BaseWriter


class JSONWriter(BaseWriter):
    """Writes numbers as a JSON array, compact unless pretty_print is set."""

    format_type = FormatType.JSON

    def serialize(self, numbers: Sequence[int]) -> bytes:
        if self.config.pretty_print:
            text = json.dumps(list(numbers), indent=2)
        else:
            text = json.dumps(list(numbers), separators=(",", ":"))
        return text.encode(self.config.encoding)
