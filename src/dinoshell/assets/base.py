"""Abstract base class for read-only asset stores.

An asset store is an immutable mapping from relative path to bytes,
bundled with the application and never written at runtime. The HTTP
server resolves every request against one, so implementations must be
safe to read from many threads at once without locking.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import BinaryIO

logger = logging.getLogger(__name__)


class Asset:
    """An opened asset entry.

    Wraps an open binary stream. ``size`` is known up front so the
    server can send an exact ``Content-Length``. The content can be
    consumed once, after which the stream is closed.
    """

    def __init__(self, path: str, size: int, stream: BinaryIO) -> None:
        self.path = path
        self.size = size
        self._stream = stream

    def iter_chunks(self, chunk_size: int = 64 * 1024) -> Iterator[bytes]:
        """Yield the content in chunks and close the stream when done."""
        try:
            while True:
                chunk = self._stream.read(chunk_size)
                if not chunk:
                    break
                yield chunk
        finally:
            self.close()

    def read(self) -> bytes:
        return b"".join(self.iter_chunks())

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> Asset:
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Asset(path={self.path!r}, size={self.size})"


class AssetStore(ABC):
    """Abstract interface for a read-only asset tree.

    Paths are relative and use ``/`` separators, e.g.
    ``"dino3d/index.html"``. Leading slashes are not accepted; callers
    strip them first.

    Example usage::

        store = DirectoryAssetStore("/srv/bundle")
        asset = store.open("dino3d/index.html")
        for chunk in asset.iter_chunks():
            ...
    """

    @abstractmethod
    def open(self, path: str) -> Asset:
        """Open an entry for reading.

        Raises:
            AssetError: If the entry is missing, unreadable, or resolves
                outside the store.
        """
        ...

    @abstractmethod
    def list(self, prefix: str = "") -> list[str]:
        """Return every entry path under ``prefix``, sorted."""
        ...

    def exists(self, path: str) -> bool:
        try:
            asset = self.open(path)
        except AssetError:
            return False
        asset.close()
        return True


class AssetError(Exception):
    """Raised when an asset cannot be opened or read."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


def normalize_path(path: str) -> str:
    """Validate a relative asset path and return it in canonical form.

    Empty segments and ``.`` are dropped. Any ``..`` segment is rejected
    so an entry can never resolve outside the store.

    Raises:
        AssetError: If the path is empty, absolute, or escapes the root.
    """
    if not path or path.startswith("/"):
        raise AssetError(f"{path}: invalid asset path", path=path)
    parts = []
    for part in path.replace("\\", "/").split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            raise AssetError(f"{path}: path escapes the asset root", path=path)
        parts.append(part)
    if not parts:
        raise AssetError(f"{path}: invalid asset path", path=path)
    return "/".join(parts)
