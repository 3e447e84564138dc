"""Game host lifecycle.

Wires the asset server, the shared game status, the page bridge and the
touch translator together, and owns their start/stop ordering:

    show()    -> start the asset server, return the entry page URL
    destroy() -> stop the server exactly once
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from dinoshell.assets.base import AssetStore
from dinoshell.config.settings import Settings
from dinoshell.controls.base import KeyEventSink, LoggingKeySink
from dinoshell.controls.bridge import NativeBridge
from dinoshell.controls.models import StatusCell
from dinoshell.controls.touch import TouchTranslator
from dinoshell.server.runner import AssetServer

logger = logging.getLogger(__name__)


class GameHost:
    """Hosts the game: serves its assets and routes input to it.

    Args:
        settings: Root settings; only the ``server`` section is used here.
        store: Optional asset store (defaults to the configured directory).
        sink: Where translated key events go (defaults to logging them).
        on_exit: Called once when the host is destroyed.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        store: AssetStore | None = None,
        sink: KeyEventSink | None = None,
        on_exit: Callable[[], None] | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.server = AssetServer(self.settings.server, store)
        self.status = StatusCell()
        self.bridge = NativeBridge(self.status, on_exit=self.destroy)
        self.translator = TouchTranslator(self.status, sink or LoggingKeySink())
        self._on_exit = on_exit
        self._lock = threading.Lock()
        self._destroyed = False

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def show(self) -> str:
        """Start serving and return the URL the view should load.

        A failed server start is logged by the server; the URL is still
        returned and loading it will simply fail.
        """
        if self._destroyed:
            raise RuntimeError("GameHost has been destroyed")
        if not self.server.launch():
            logger.warning("Continuing without asset server")
        url = self.server.main_page_url
        logger.info("Game page: %s", url)
        return url

    def destroy(self) -> None:
        """Stop the server and fire ``on_exit``. Later calls do nothing."""
        with self._lock:
            if self._destroyed:
                return
            self._destroyed = True
        self.server.stop()
        self.status.clear()
        if self._on_exit is not None:
            self._on_exit()
        logger.info("Game host destroyed")

    def __enter__(self) -> GameHost:
        self.show()
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.destroy()
