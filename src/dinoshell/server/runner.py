"""Background uvicorn runner for the asset server.

``AssetServer`` owns the listening socket and a daemon thread running
uvicorn. The socket is bound synchronously in ``launch()`` so a busy port
is reported to the caller right away instead of surfacing inside the
server thread.
"""

from __future__ import annotations

import logging
import socket
import threading
import time

import uvicorn

from dinoshell.assets.base import AssetStore
from dinoshell.config.settings import ServerConfig
from dinoshell.server.app import create_app

logger = logging.getLogger(__name__)


class AssetServer:
    """Loopback HTTP server for the hosted game's assets.

    ``launch()`` and ``stop()`` are both safe to call repeatedly. A bind
    failure is logged and leaves the instance stopped; the caller decides
    whether to carry on without a server.

    Example usage::

        server = AssetServer(ServerConfig())
        if server.launch():
            print(server.main_page_url)
        ...
        server.stop()
    """

    def __init__(
        self,
        config: ServerConfig | None = None,
        store: AssetStore | None = None,
    ) -> None:
        self._config = config or ServerConfig()
        self._app = create_app(self._config, store)
        self._lock = threading.Lock()
        self._socket: socket.socket | None = None
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def config(self) -> ServerConfig:
        return self._config

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def port(self) -> int:
        """The bound port (differs from the configured one when that is 0)."""
        if self._socket is not None:
            return self._socket.getsockname()[1]
        return self._config.port

    @property
    def base_url(self) -> str:
        return f"http://{self._config.host}:{self.port}"

    @property
    def main_page_url(self) -> str:
        return f"{self.base_url}{self._config.entry_path}"

    def launch(self) -> bool:
        """Bind the port and start serving in a background thread.

        Returns:
            True if the server is running, False if it failed to start.
        """
        with self._lock:
            if self.is_running:
                return True
            try:
                sock = self._bind()
            except OSError as e:
                logger.error(
                    "Could not bind asset server to %s:%d: %s",
                    self._config.host, self._config.port, e,
                )
                return False

            server = uvicorn.Server(
                uvicorn.Config(
                    self._app,
                    log_config=None,
                    access_log=False,
                    lifespan="off",
                )
            )
            thread = threading.Thread(
                target=server.run,
                kwargs={"sockets": [sock]},
                name="dinoshell-assets",
                daemon=True,
            )
            self._socket, self._server, self._thread = sock, server, thread
            thread.start()

            if not self._wait_started(server, thread):
                logger.error("Asset server failed to start on %s", self.base_url)
                self._shutdown()
                return False

            logger.info("Asset server listening on %s", self.base_url)
            return True

    def stop(self) -> None:
        """Stop serving and close the socket. No-op if not running."""
        with self._lock:
            if self._server is None:
                return
            self._shutdown()
            logger.info("Asset server stopped")

    def _bind(self) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self._config.host, self._config.port))
            sock.listen(128)
        except OSError:
            sock.close()
            raise
        sock.set_inheritable(True)
        return sock

    def _wait_started(self, server: uvicorn.Server, thread: threading.Thread) -> bool:
        deadline = time.monotonic() + self._config.startup_timeout
        while time.monotonic() < deadline:
            if server.started:
                return True
            if not thread.is_alive():
                return False
            time.sleep(0.01)
        return server.started

    def _shutdown(self) -> None:
        server, thread, sock = self._server, self._thread, self._socket
        self._server = self._thread = None
        if server is not None:
            server.should_exit = True
        if thread is not None:
            thread.join(timeout=self._config.startup_timeout)
            if thread.is_alive():
                logger.warning("Asset server thread did not exit in time")
        if sock is not None:
            sock.close()
        self._socket = None

    def __enter__(self) -> AssetServer:
        self.launch()
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.stop()
