"""Asset store backed by a directory on disk.

The default store points at the ``bundle/`` directory shipped inside the
dinoshell package, which plays the role of the application's packaged
assets.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from dinoshell.assets.base import Asset, AssetError, AssetStore, normalize_path

logger = logging.getLogger(__name__)


def bundled_asset_dir() -> Path:
    """Return the directory holding the assets bundled with the package."""
    return Path(str(resources.files("dinoshell") / "bundle"))


class DirectoryAssetStore(AssetStore):
    """Serves entries from files under a root directory.

    Nothing is cached; each ``open()`` hits the filesystem, which keeps
    the store free of mutable state.
    """

    def __init__(self, root: Path | str | None = None) -> None:
        self._root = Path(root) if root is not None else bundled_asset_dir()
        self._resolved_root = self._root.resolve()
        if not self._root.is_dir():
            logger.warning("Asset directory %s does not exist", self._root)

    @property
    def root(self) -> Path:
        return self._root

    def open(self, path: str) -> Asset:
        """Open a file under the root directory."""
        rel = normalize_path(path)
        target = (self._resolved_root / rel).resolve()
        if not target.is_relative_to(self._resolved_root):
            raise AssetError(f"{rel}: path escapes the asset root", path=rel)
        if not target.is_file():
            raise AssetError(f"{rel}: no such asset", path=rel)
        try:
            size = target.stat().st_size
            stream = open(target, "rb")
        except OSError as e:
            raise AssetError(f"{rel}: {e.strerror or e}", path=rel) from e
        logger.debug("Opened asset %s (%d bytes)", rel, size)
        return Asset(rel, size, stream)

    def list(self, prefix: str = "") -> list[str]:
        if not self._resolved_root.is_dir():
            return []
        entries = (
            p.relative_to(self._resolved_root).as_posix()
            for p in self._resolved_root.rglob("*")
            if p.is_file()
        )
        return sorted(e for e in entries if e.startswith(prefix))

    def exists(self, path: str) -> bool:
        try:
            rel = normalize_path(path)
        except AssetError:
            return False
        target = (self._resolved_root / rel).resolve()
        return target.is_relative_to(self._resolved_root) and target.is_file()
