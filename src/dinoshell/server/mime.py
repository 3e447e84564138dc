"""File extension -> MIME type mapping for served assets.

Uses the standard ``mimetypes`` table with a few explicit entries for
types that game bundles rely on and that older tables get wrong or lack.
Lookup is deterministic: explicit entries first, then ``mimetypes``,
then ``application/octet-stream``.
"""

from __future__ import annotations

import mimetypes
import posixpath

DEFAULT_MIME_TYPE = "application/octet-stream"

EXTRA_TYPES: dict[str, str] = {
    ".wasm": "application/wasm",
    ".mjs": "text/javascript",
    ".js": "text/javascript",
    ".json": "application/json",
    ".data": "application/octet-stream",
    ".glb": "model/gltf-binary",
    ".gltf": "model/gltf+json",
    ".webp": "image/webp",
}


def guess_mime_type(path: str) -> str:
    """Return the content type for a request path based on its extension."""
    _, ext = posixpath.splitext(path)
    ext = ext.lower()
    if ext in EXTRA_TYPES:
        return EXTRA_TYPES[ext]
    mime, _ = mimetypes.guess_type(f"asset{ext}", strict=False)
    return mime or DEFAULT_MIME_TYPE
