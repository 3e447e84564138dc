"""Command-line interface for dinoshell.

Provides the main entry point for serving the game assets, checking a
running server, and listing the bundled assets.
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="dinoshell",
        description="Loopback host for a keyboard-driven web game",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/dinoshell.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Serve the game assets until interrupted")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    serve_parser.add_argument(
        "--asset-dir", type=Path, default=None,
        help="Directory to serve instead of the bundled assets",
    )

    check_parser = subparsers.add_parser("check", help="Fetch the entry page from a running server")
    check_parser.add_argument(
        "--url", type=str, default=None,
        help="URL to fetch (default: the configured main page)",
    )
    check_parser.add_argument("--timeout", type=float, default=5.0)

    subparsers.add_parser("assets", help="List the servable assets")

    return parser.parse_args(argv)


def _serve(settings, args) -> int:
    """Run the game host in the foreground until Ctrl-C."""
    from dinoshell.host import GameHost

    overrides = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.asset_dir is not None:
        overrides["asset_dir"] = args.asset_dir
    if overrides:
        settings.server = settings.server.model_copy(update=overrides)

    done = threading.Event()
    host = GameHost(settings, on_exit=done.set)
    url = host.show()
    if not host.server.is_running:
        host.destroy()
        return 1

    print(f"Serving game at {url}")
    try:
        done.wait()
    except KeyboardInterrupt:
        print()
    finally:
        host.destroy()
    return 0


def _check(settings, args) -> int:
    """GET the entry page and report what came back."""
    import httpx

    url = args.url or settings.server.main_page_url
    try:
        resp = httpx.get(url, timeout=args.timeout, follow_redirects=True)
    except httpx.HTTPError as e:
        print(f"{url}: request failed: {e}")
        return 1

    print(f"{url}: {resp.status_code}")
    print(f"  Content-Type:   {resp.headers.get('content-type', '-')}")
    print(f"  Content-Length: {resp.headers.get('content-length', '-')}")
    return 0 if resp.status_code == 200 else 1


def _list_assets(settings) -> int:
    from dinoshell.assets.directory import DirectoryAssetStore

    store = DirectoryAssetStore(settings.server.asset_dir)
    prefix = f"{settings.server.asset_root}/"
    entries = store.list(prefix)
    for entry in entries:
        print(f"/{entry}")
    if not entries:
        print(f"No assets under /{prefix} in {store.root}")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the dinoshell CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return 0

    from dinoshell.config.settings import load_settings
    from dinoshell.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "serve":
        logger.info("Starting game host")
        return _serve(settings, args)
    if args.command == "check":
        return _check(settings, args)
    if args.command == "assets":
        return _list_assets(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
