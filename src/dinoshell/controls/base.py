"""Abstract base class for key event delivery.

The touch translator produces KeyEvents; a sink delivers them to
whatever renders the game (a browser view, a test recorder, ...).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from dinoshell.controls.models import KeyEvent

logger = logging.getLogger(__name__)


class KeyEventSink(ABC):
    """Abstract interface for delivering simulated key events."""

    @abstractmethod
    def dispatch(self, event: KeyEvent) -> None:
        """Deliver one key event to the game view."""
        ...


class RecordingKeySink(KeyEventSink):
    """Keeps every dispatched event in order."""

    def __init__(self) -> None:
        self.events: list[KeyEvent] = []

    def dispatch(self, event: KeyEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()


class LoggingKeySink(KeyEventSink):
    """Logs each event; used when no view is attached."""

    def dispatch(self, event: KeyEvent) -> None:
        logger.debug("Key %s %s (down_time=%d)", event.key, event.action.value, event.down_time)
