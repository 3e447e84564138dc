"""In-memory asset store."""

from __future__ import annotations

import io
from collections.abc import Mapping
from types import MappingProxyType

from dinoshell.assets.base import Asset, AssetError, AssetStore, normalize_path


class MemoryAssetStore(AssetStore):
    """Serves entries from a path -> bytes mapping fixed at construction."""

    def __init__(self, files: Mapping[str, bytes | str]) -> None:
        entries: dict[str, bytes] = {}
        for path, content in files.items():
            data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
            entries[normalize_path(path)] = data
        self._files = MappingProxyType(entries)

    def open(self, path: str) -> Asset:
        rel = normalize_path(path)
        try:
            data = self._files[rel]
        except KeyError:
            raise AssetError(f"{rel}: no such asset", path=rel) from None
        return Asset(rel, len(data), io.BytesIO(data))

    def list(self, prefix: str = "") -> list[str]:
        return sorted(p for p in self._files if p.startswith(prefix))

    def __len__(self) -> int:
        return len(self._files)
