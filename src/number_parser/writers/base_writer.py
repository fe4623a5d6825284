"""
Base writer class with common functionality.

Each concrete writer only knows how to serialize a sequence of integers;
creating the output directory and writing the file is shared here.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from number_parser.config_models import FormatType, NumberParserConfig
from number_parser.errors import PersistError

logger = logging.getLogger(__name__)


class BaseWriter:
    """Base class for all output format writers."""

    format_type: FormatType

    def __init__(self, config: Optional[NumberParserConfig] = None):
        self.config = config or NumberParserConfig()

    def serialize(self, numbers: Sequence[int]) -> bytes:
        """Encode numbers into the writer's output format."""
        raise NotImplementedError

    def persist(self, numbers: Sequence[int], file_path: Path) -> int:
        """Write numbers to file_path, replacing any existing file.

        Args:
            numbers: Numbers in the order they should appear
            file_path: Destination file

        Returns:
            Number of bytes written

        Raises:
            PersistError: If the output cannot be encoded or the file
                cannot be written
        """
        try:
            payload = self.serialize(numbers)
        except (LookupError, UnicodeError) as e:
            raise PersistError(
                f"Failed to encode {self.format_type.value} output as '{self.config.encoding}': {e}"
            ) from e

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(payload)
        except OSError as e:
            raise PersistError(f"Failed to write {file_path}: {e}") from e

        logger.debug(f"Wrote {len(payload)} bytes of {self.format_type.value} to {file_path}")
        return len(payload)
