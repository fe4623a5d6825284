"""
Numeric parsing and ordering of the numbers token.
"""

import logging
import re
from typing import Iterable, List

from number_parser.errors import NumberFormatError

logger = logging.getLogger(__name__)

# Optional sign, ASCII digits, surrounding whitespace allowed
_INTEGER_RE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


def parse_numbers(token: str) -> List[int]:
    """Parse a comma-separated list of signed integers.

    Args:
        token: Raw numbers token, e.g. "5,-3,9"

    Returns:
        Parsed integers in input order

    Raises:
        NumberFormatError: If any piece is not an integer. No partial
            result is returned.
    """
    numbers = []
    for position, piece in enumerate(token.split(","), 1):
        if not _INTEGER_RE.fullmatch(piece):
            raise NumberFormatError(
                f"Invalid integer '{piece}' at position {position} in '{token}'"
            )
        numbers.append(int(piece))

    logger.debug(f"Parsed {len(numbers)} number(s) from '{token}'")
    return numbers


def sort_descending(numbers: Iterable[int]) -> List[int]:
    """Return a new list with the same values ordered largest first."""
    return sorted(numbers, reverse=True)
