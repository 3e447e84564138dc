"""Shared test fixtures for the dinoshell test suite.

Provides a small on-disk asset tree, an equivalent in-memory store,
server configuration pointing at them, and input-layer fixtures.
"""

from __future__ import annotations

import itertools
import logging
from pathlib import Path

import pytest

from dinoshell.assets import DirectoryAssetStore, MemoryAssetStore
from dinoshell.config.settings import ServerConfig, Settings
from dinoshell.controls import RecordingKeySink, StatusCell, TouchTranslator
from dinoshell.utils.logging import CONFIGURED_LOGGERS, reset_logging


# ---------------------------------------------------------------------------
# Asset Fixtures
# ---------------------------------------------------------------------------

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4
WASM_BYTES = b"\x00asm\x01\x00\x00\x00" + b"\x00" * 120
LARGE_BYTES = bytes(i % 251 for i in range(300_000))

ASSET_FILES: dict[str, bytes] = {
    "dino3d/index.html": b"<!DOCTYPE html><html><body><canvas></canvas></body></html>\n",
    "dino3d/main.js": b"console.log('dino');\n",
    "dino3d/style.css": b"body { margin: 0; }\n",
    "dino3d/img/logo.png": PNG_BYTES,
    "dino3d/engine.wasm": WASM_BYTES,
    "dino3d/levels/level1.json": b'{"speed": 6}',
    "dino3d/big.data": LARGE_BYTES,
    "private/secret.txt": b"do not serve",
}


@pytest.fixture
def asset_files() -> dict[str, bytes]:
    return dict(ASSET_FILES)


@pytest.fixture
def asset_dir(tmp_path: Path, asset_files: dict[str, bytes]) -> Path:
    """An asset tree on disk mirroring ASSET_FILES."""
    root = tmp_path / "assets"
    for rel, data in asset_files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    return root


@pytest.fixture
def directory_store(asset_dir: Path) -> DirectoryAssetStore:
    return DirectoryAssetStore(asset_dir)


@pytest.fixture
def memory_store(asset_files: dict[str, bytes]) -> MemoryAssetStore:
    return MemoryAssetStore(asset_files)


# ---------------------------------------------------------------------------
# Config Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def server_config(asset_dir: Path) -> ServerConfig:
    """Loopback config on an ephemeral port serving the test tree."""
    return ServerConfig(port=0, asset_dir=asset_dir, chunk_size=4096)


@pytest.fixture
def settings(server_config: ServerConfig) -> Settings:
    return Settings(server=server_config)


# ---------------------------------------------------------------------------
# Input Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def status() -> StatusCell:
    return StatusCell()


@pytest.fixture
def sink() -> RecordingKeySink:
    return RecordingKeySink()


@pytest.fixture
def clock():
    """A fake millisecond clock that advances by 10 on every call."""
    counter = itertools.count(1000, 10)
    return lambda: next(counter)


@pytest.fixture
def translator(status: StatusCell, sink: RecordingKeySink, clock) -> TouchTranslator:
    return TouchTranslator(status, sink, clock=clock)


# ---------------------------------------------------------------------------
# Logging Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def restore_loggers():
    """Undo handler and level changes made by setup_logging.

    The CLI commands call setup_logging, whose stderr handler would otherwise
    outlive the test and write to a closed capture stream.
    """
    saved = {}
    for name in CONFIGURED_LOGGERS:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, list(logger.handlers))
    yield
    reset_logging()
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.setLevel(level)
        logger.handlers = handlers
