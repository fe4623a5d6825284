"""
Orchestration logic for sorting and persisting numbers.

This module contains the core pipeline, independent of CLI concerns:
parse -> sort -> resolve format -> write. The file is written as the
last step, so any failure before it leaves the filesystem untouched.
"""

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from number_parser.casting import parse_numbers, sort_descending
from number_parser.config_models import NumberParserConfig
from number_parser.errors import NumberParserError
from number_parser.input_parser import USAGE, resolve_tokens
from number_parser.models import RunResult
from number_parser.observability import (
    Event,
    EventType,
    LoggingHook,
    ObservabilityHook,
    emit_error,
    emit_event,
)
from number_parser.writers import create_writer

logger = logging.getLogger(__name__)


def build_output_path(format_token: str, config: NumberParserConfig) -> Path:
    """Return <output_dir>/<file_stem>.<lowercased format>."""
    return config.output_dir / f"{config.file_stem}.{format_token.lower()}"


def sort_and_persist(
    numbers_token: str,
    format_token: str,
    config: Optional[NumberParserConfig] = None,
    hooks: Optional[Sequence[ObservabilityHook]] = None
) -> RunResult:
    """Parse, sort descending and write numbers in the requested format.

    Args:
        numbers_token: Comma-separated integers, e.g. "5,3,9,1"
        format_token: Output format name, matched case-insensitively
        config: Output configuration (default: NumberParserConfig())
        hooks: Observability hooks (default: [LoggingHook()])

    Returns:
        RunResult describing the written file

    Raises:
        NumberFormatError: If the numbers token contains a non-integer
        UnsupportedFormatError: If the format has no writer
        PersistError: If the file cannot be written
    """
    config = config or NumberParserConfig()
    hooks = [LoggingHook()] if hooks is None else list(hooks)
    start_time = time.time()

    try:
        numbers = parse_numbers(numbers_token)
        emit_event(hooks, Event(EventType.NUMBERS_PARSED, details={"count": len(numbers)}))

        ordered = sort_descending(numbers)

        writer = create_writer(format_token, config)
        emit_event(hooks, Event(EventType.FORMAT_RESOLVED, details={"format": writer.format_type.value}))

        file_path = build_output_path(format_token, config)
        bytes_written = writer.persist(ordered, file_path)
    except NumberParserError as e:
        emit_error(hooks, e, {"numbers": numbers_token, "format": format_token})
        raise

    result = RunResult(
        numbers=ordered,
        format_token=format_token,
        file_path=file_path,
        bytes_written=bytes_written,
        start_time=start_time,
        end_time=time.time(),
    )
    emit_event(hooks, Event(
        EventType.FILE_WRITTEN,
        file_path=file_path,
        details={"bytes": bytes_written, "duration": f"{result.duration:.4f}s"},
    ))
    return result


def run(
    args: Sequence[str],
    config: Optional[NumberParserConfig] = None,
    hooks: Optional[Sequence[ObservabilityHook]] = None,
    read_line: Optional[Callable[[], str]] = None
) -> Optional[RunResult]:
    """Resolve input, sort and persist, then print the confirmation.

    Returns:
        RunResult, or None when the usage message was printed instead
    """
    tokens = resolve_tokens(args, read_line)
    if tokens is None:
        print(USAGE)
        return None

    hook_list: List[ObservabilityHook] = [LoggingHook()] if hooks is None else list(hooks)
    emit_event(hook_list, Event(
        EventType.INPUT_RESOLVED,
        details={"numbers": tokens.numbers_token, "format": tokens.format_token},
    ))

    result = sort_and_persist(tokens.numbers_token, tokens.format_token, config, hook_list)
    print(result.confirmation)
    return result
