"""FastAPI application serving the bundled game assets.

Routes (``dino3d`` is the default asset root)::

    /                      -> 302, Location: /dino3d/index.html
    /dino3d/<path>         -> 200 asset bytes, or 500 "Internal Error: ..."
    <anything else>        -> 404 "Not Found"

Every request is resolved independently against the read-only asset
store; the app holds no per-request state.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, RedirectResponse, Response, StreamingResponse
from starlette.background import BackgroundTask

from dinoshell.assets.base import AssetError, AssetStore
from dinoshell.assets.directory import DirectoryAssetStore
from dinoshell.config.settings import ServerConfig
from dinoshell.server.mime import guess_mime_type

logger = logging.getLogger(__name__)

# Requests are not branched on method; every verb gets the same answer.
SERVED_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"]


def create_app(
    config: ServerConfig | None = None,
    store: AssetStore | None = None,
) -> FastAPI:
    """Create the asset server application.

    Args:
        config: Server configuration (asset root, index page, etc.).
        store: Optional pre-built asset store (for testing). Defaults to a
            DirectoryAssetStore over ``config.asset_dir`` or the bundle.
    """
    if config is None:
        config = ServerConfig()
    if store is None:
        store = DirectoryAssetStore(config.asset_dir)

    prefix = f"/{config.asset_root}"

    app = FastAPI(
        title="dinoshell assets",
        description="Loopback static asset server for the hosted game",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.store = store

    @app.api_route("/{path:path}", methods=SERVED_METHODS)
    def serve_asset(request: Request) -> Response:
        uri = request.url.path
        if uri == "/":
            return RedirectResponse(config.entry_path, status_code=config.redirect_status)
        if not uri.startswith(prefix):
            return PlainTextResponse("Not Found", status_code=404)

        s: AssetStore = app.state.store
        try:
            asset = s.open(uri[1:])
        except AssetError as e:
            logger.warning("Failed to open asset for %s: %s", uri, e)
            return PlainTextResponse(f"Internal Error: {e}", status_code=500)

        headers = {"Content-Length": str(asset.size)}
        media_type = guess_mime_type(uri)
        if request.method == "HEAD":
            asset.close()
            return Response(headers=headers, media_type=media_type)

        logger.debug("Serving %s (%d bytes)", uri, asset.size)
        # Closes the stream even when the body iterator never starts.
        return StreamingResponse(
            asset.iter_chunks(config.chunk_size),
            media_type=media_type,
            headers=headers,
            background=BackgroundTask(asset.close),
        )

    return app
