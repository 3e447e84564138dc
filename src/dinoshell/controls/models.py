"""Domain models for the touch and key input layer.

These are the values flowing between the hosted page (status reports),
the touchscreen (touch events) and the game (simulated key events).
"""

from __future__ import annotations

import enum
import threading

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class GameStatus(enum.IntEnum):
    """Game state codes reported by the hosted page."""

    PREPARED = 0  # Waiting for the first jump to start
    RUNNING = 1
    STOPPED = 2  # Game over
    PAUSED = 3


class TouchAction(str, enum.Enum):
    DOWN = "down"
    UP = "up"
    CANCEL = "cancel"
    MOVE = "move"


class KeyAction(str, enum.Enum):
    DOWN = "down"
    UP = "up"


# Key names follow the usual "Up"/"Down" arrow naming.
JUMP_KEY = "Up"
DUCK_KEY = "Down"


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class TouchEvent(BaseModel):
    """A single pointer event on the game view."""

    model_config = ConfigDict(frozen=True)

    action: TouchAction
    x: float = Field(description="Horizontal position in view pixels")
    y: float = Field(default=0.0, description="Vertical position in view pixels")


class KeyEvent(BaseModel):
    """A simulated key press or release delivered to the game."""

    model_config = ConfigDict(frozen=True)

    action: KeyAction
    key: str
    down_time: int = Field(description="Monotonic ms when the key went down")
    event_time: int = Field(description="Monotonic ms when this event was created")


# ---------------------------------------------------------------------------
# Shared status cell
# ---------------------------------------------------------------------------


class StatusCell:
    """Holds the most recently reported game status.

    Shared by reference between the bridge (writer) and the touch
    translator (reader). Last write wins; there is no ordering guarantee
    relative to a touch event already being translated.
    """

    def __init__(self, status: GameStatus | None = None) -> None:
        self._lock = threading.Lock()
        self._status = status

    def get(self) -> GameStatus | None:
        with self._lock:
            return self._status

    def set(self, status: GameStatus) -> None:
        with self._lock:
            self._status = GameStatus(status)

    def clear(self) -> None:
        with self._lock:
            self._status = None

    def __repr__(self) -> str:
        return f"StatusCell({self.get()!r})"
