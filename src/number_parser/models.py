"""
Data models and structures for the number parser.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class InputTokens:
    """Numbers token and format token extracted from raw input."""
    numbers_token: str
    format_token: str


@dataclass
class RunResult:
    """Outcome of a successful sort-and-persist run."""
    numbers: List[int]
    format_token: str
    file_path: Path
    bytes_written: int = 0
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None

    @property
    def duration(self) -> float:
        """Get run duration in seconds."""
        end = self.end_time or time.time()
        return end - self.start_time

    @property
    def confirmation(self) -> str:
        """Message shown to the user once the file is written."""
        return f"Numbers sorted and persisted in {self.format_token} format at {self.file_path}"
