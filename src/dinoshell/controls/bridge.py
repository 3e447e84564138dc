"""Host bridge exposed to the hosted game page.

The page may only ask the host to exit and report its game status.
Nothing else is reachable through the bridge.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from dinoshell.controls.models import GameStatus, StatusCell

logger = logging.getLogger(__name__)


class HostBridge(ABC):
    """Capability interface for calls coming from page content."""

    @abstractmethod
    def request_exit(self) -> None:
        """Ask the host to tear down the game UI."""
        ...

    @abstractmethod
    def report_status(self, code: int) -> None:
        """Record the game's current state code.

        Raises:
            BridgeError: If ``code`` is not a known GameStatus.
        """
        ...


class BridgeError(ValueError):
    """Raised when the page sends an invalid bridge call."""


class NativeBridge(HostBridge):
    """Bridge that writes status into a shared cell and forwards exit."""

    def __init__(self, status: StatusCell, on_exit: Callable[[], None]) -> None:
        self._status = status
        self._on_exit = on_exit

    def request_exit(self) -> None:
        logger.info("Exit requested by hosted page")
        self._on_exit()

    def report_status(self, code: int) -> None:
        try:
            status = GameStatus(code)
        except ValueError as e:
            raise BridgeError(f"Unknown game status code: {code!r}") from e
        self._status.set(status)
        logger.debug("Game status -> %s", status.name)

    # Names used by the page script.
    def exit(self) -> None:
        self.request_exit()

    def post_status(self, status: int) -> None:
        self.report_status(status)
