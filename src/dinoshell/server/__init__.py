"""Loopback static asset server for dinoshell.

Public API:
    create_app -- FastAPI app resolving requests against an AssetStore
    guess_mime_type -- Extension -> content type lookup
    AssetServer -- Background uvicorn runner with idempotent start/stop
"""

from dinoshell.server.app import create_app
from dinoshell.server.mime import DEFAULT_MIME_TYPE, guess_mime_type

__all__ = ["AssetServer", "DEFAULT_MIME_TYPE", "create_app", "guess_mime_type"]


def __getattr__(name: str) -> type:
    """Lazy import for the runner, which pulls in uvicorn."""
    if name == "AssetServer":
        from dinoshell.server.runner import AssetServer
        return AssetServer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
