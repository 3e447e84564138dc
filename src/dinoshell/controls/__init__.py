"""Touch controls and host bridge for the hosted game.

Public API:
    StatusCell -- Shared last-write-wins game status
    HostBridge / NativeBridge -- Calls the page can make into the host
    TouchTranslator -- Touch -> arrow key translation
    KeyEventSink -- Abstract key event delivery
"""

from dinoshell.controls.base import KeyEventSink, LoggingKeySink, RecordingKeySink
from dinoshell.controls.bridge import BridgeError, HostBridge, NativeBridge
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
from dinoshell.controls.touch import TouchTranslator

__all__ = [
    "BridgeError",
    "DUCK_KEY",
    "GameStatus",
    "HostBridge",
    "JUMP_KEY",
    "KeyAction",
    "KeyEvent",
    "KeyEventSink",
    "LoggingKeySink",
    "NativeBridge",
    "RecordingKeySink",
    "StatusCell",
    "TouchAction",
    "TouchEvent",
    "TouchTranslator",
]
