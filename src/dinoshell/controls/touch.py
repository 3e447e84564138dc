"""Touch to key event translation.

Maps taps on the game view to arrow key presses so a touchscreen can
play a keyboard-driven game:

    status unset / STOPPED / PAUSED  -> no key
    PREPARED                         -> Up (starts the game)
    RUNNING, x >= width / 2          -> Up (jump)
    RUNNING, x <  width / 2          -> Down (duck)

Touch DOWN becomes key DOWN; touch UP or CANCEL becomes key UP. MOVE is
ignored. The touch itself is never consumed, so the view still sees it.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from dinoshell.controls.base import KeyEventSink
from dinoshell.controls.models import (
    DUCK_KEY,
    JUMP_KEY,
    GameStatus,
    KeyAction,
    KeyEvent,
    StatusCell,
    TouchAction,
    TouchEvent,
)

logger = logging.getLogger(__name__)


def uptime_millis() -> int:
    return time.monotonic_ns() // 1_000_000


class TouchTranslator:
    """Turns touch events into simulated key events for the game view."""

    def __init__(
        self,
        status: StatusCell,
        sink: KeyEventSink,
        clock: Callable[[], int] = uptime_millis,
    ) -> None:
        self._status = status
        self._sink = sink
        self._clock = clock
        self._down_time = 0

    def translate(self, event: TouchEvent, view_width: float) -> KeyEvent | None:
        """Return the key event for a touch, or None if nothing is sent."""
        status = self._status.get()
        if status is None or status in (GameStatus.STOPPED, GameStatus.PAUSED):
            return None

        if status == GameStatus.PREPARED or event.x >= view_width / 2:
            key = JUMP_KEY
        else:
            key = DUCK_KEY

        if event.action == TouchAction.DOWN:
            self._down_time = self._clock()
            action = KeyAction.DOWN
        elif event.action in (TouchAction.UP, TouchAction.CANCEL):
            action = KeyAction.UP
        else:
            return None

        return KeyEvent(
            action=action,
            key=key,
            down_time=self._down_time,
            event_time=self._clock(),
        )

    def on_touch(self, event: TouchEvent, view_width: float) -> bool:
        """Translate and dispatch a touch. Always returns False (not consumed)."""
        key_event = self.translate(event, view_width)
        if key_event is not None:
            self._sink.dispatch(key_event)
        return False
