"""
Extraction of the numbers token and format token from raw input.
"""

import logging
from typing import Callable, Optional, Sequence

from number_parser.models import InputTokens

logger = logging.getLogger(__name__)

PROMPT = "Enter numbers separated by commas:"
USAGE = "Usage: NumberParser <numbers> <format>"


def prompt_for_line() -> str:
    """Show the prompt and read one line from stdin.

    End of input is treated as an empty line.
    """
    print(PROMPT)
    try:
        return input()
    except EOFError:
        return ""


def resolve_tokens(
    args: Sequence[str],
    read_line: Optional[Callable[[], str]] = None
) -> Optional[InputTokens]:
    """Resolve (numbers, format) tokens from arguments or an interactive line.

    With two or more arguments the first two are used and the rest ignored.
    Otherwise one line is read and split on single spaces, so "5, 3 json"
    yields the tokens "5,", "3" and "json".

    Args:
        args: Positional command-line arguments
        read_line: Callable returning one input line (default: prompt on stdin)

    Returns:
        InputTokens, or None when fewer than two tokens are available
    """
    if len(args) >= 2:
        tokens = list(args)
    else:
        line = (read_line or prompt_for_line)()
        tokens = line.split(" ")

    if len(tokens) < 2:
        logger.debug(f"Only {len(tokens)} token(s) available, need 2")
        return None

    if len(tokens) > 2:
        logger.debug(f"Ignoring {len(tokens) - 2} extra token(s): {tokens[2:]}")

    return InputTokens(numbers_token=tokens[0], format_token=tokens[1])
