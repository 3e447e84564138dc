"""Read-only asset stores for dinoshell.

Public API:
    AssetStore -- Abstract base class
    Asset -- An opened entry with a known byte size
    AssetError -- Raised when an entry cannot be opened
    DirectoryAssetStore -- Files under a directory (bundled by default)
    MemoryAssetStore -- Fixed in-memory mapping
"""

from dinoshell.assets.base import Asset, AssetError, AssetStore, normalize_path
from dinoshell.assets.directory import DirectoryAssetStore, bundled_asset_dir
from dinoshell.assets.memory import MemoryAssetStore

__all__ = [
    "Asset",
    "AssetError",
    "AssetStore",
    "DirectoryAssetStore",
    "MemoryAssetStore",
    "bundled_asset_dir",
    "normalize_path",
]
