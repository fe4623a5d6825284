"""
Observability hooks for monitoring sort-and-persist runs.

Hooks receive an Event at each step of a run and the exception when a
run fails. LoggingHook is the default; CollectingHook keeps events in
memory for inspection.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of events that can be emitted."""
    INPUT_RESOLVED = "input_resolved"
    NUMBERS_PARSED = "numbers_parsed"
    FORMAT_RESOLVED = "format_resolved"
    FILE_WRITTEN = "file_written"
    RUN_ERROR = "run_error"


@dataclass
class Event:
    """Represents a run event."""
    event_type: EventType
    timestamp: float = field(default_factory=time.time)
    file_path: Optional[Path] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [self.event_type.value]
        if self.file_path:
            parts.append(f"file={self.file_path}")
        if self.details:
            details_str = ",".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(details_str)
        return " ".join(parts)


class ObservabilityHook:
    """Base class for observability hooks."""

    def on_event(self, event: Event) -> None:
        """Called when an event occurs."""
        pass

    def on_error(self, error: Exception, context: Dict[str, Any]) -> None:
        """Called when a run fails."""
        pass


class LoggingHook(ObservabilityHook):
    """Hook that logs events to Python logging."""

    def on_event(self, event: Event) -> None:
        logger.info(f"EVENT: {event}")

    def on_error(self, error: Exception, context: Dict[str, Any]) -> None:
        logger.debug(f"ERROR: {type(error).__name__}: {error} | Context: {context}")


class CollectingHook(ObservabilityHook):
    """Hook that keeps events and errors in memory."""

    def __init__(self):
        self.events: List[Event] = []
        self.errors: List[Exception] = []

    def on_event(self, event: Event) -> None:
        self.events.append(event)

    def on_error(self, error: Exception, context: Dict[str, Any]) -> None:
        self.errors.append(error)
        self.events.append(Event(EventType.RUN_ERROR, details=dict(context, error=type(error).__name__)))

    def event_types(self) -> List[EventType]:
        return [event.event_type for event in self.events]


def emit_event(hooks: Sequence[ObservabilityHook], event: Event) -> None:
    """Deliver event to every hook. A failing hook never aborts the run."""
    for hook in hooks:
        try:
            hook.on_event(event)
        except Exception as e:
            logger.warning(f"Observability hook {type(hook).__name__} failed: {e}")


def emit_error(hooks: Sequence[ObservabilityHook], error: Exception, context: Dict[str, Any]) -> None:
    """Deliver a run failure to every hook."""
    for hook in hooks:
        try:
            hook.on_error(error, context)
        except Exception as e:
            logger.warning(f"Observability hook {type(hook).__name__} failed: {e}")
