"""Tests for the dinoshell command-line interface."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest

from dinoshell.cli import main, parse_args


class TestParseArgs:
    def test_serve_options(self) -> None:
        args = parse_args(["-v", "serve", "--port", "9000", "--asset-dir", "/tmp/a"])
        assert args.command == "serve"
        assert args.verbose is True
        assert args.port == 9000
        assert args.asset_dir == Path("/tmp/a")
        assert args.host is None

    def test_check_defaults(self) -> None:
        args = parse_args(["check"])
        assert args.url is None
        assert args.timeout == 5.0

    def test_no_command(self) -> None:
        assert parse_args([]).command is None


@pytest.fixture
def config_file(tmp_path: Path, asset_dir: Path) -> Path:
    path = tmp_path / "dinoshell.yaml"
    path.write_text(f"server:\n  asset_dir: {asset_dir}\n  port: 0\n")
    return path


class TestAssetsCommand:
    def test_lists_assets_under_root(
        self, config_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["-c", str(config_file), "assets"]) == 0
        out = capsys.readouterr().out
        assert "/dino3d/index.html" in out
        assert "/dino3d/img/logo.png" in out
        assert "secret.txt" not in out

    def test_empty_tree_fails(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text(f"server:\n  asset_dir: {tmp_path / 'none'}\n")
        assert main(["-c", str(path), "assets"]) == 1
        assert "No assets" in capsys.readouterr().out


class TestCheckCommand:
    def test_ok(self, config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        resp = httpx.Response(
            200, headers={"content-type": "text/html", "content-length": "13"}, content=b"<html></html>"
        )
        with patch("httpx.get", return_value=resp) as get:
            assert main(["-c", str(config_file), "check", "--url", "http://x/dino3d/index.html"]) == 0
        get.assert_called_once()
        out = capsys.readouterr().out
        assert "200" in out
        assert "text/html" in out

    def test_error_status(self, config_file: Path) -> None:
        resp = httpx.Response(500, content=b"Internal Error: boom")
        with patch("httpx.get", return_value=resp):
            assert main(["-c", str(config_file), "check"]) == 1

    def test_connection_failure(self, config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("httpx.get", side_effect=httpx.ConnectError("refused")):
            assert main(["-c", str(config_file), "check"]) == 1
        assert "request failed" in capsys.readouterr().out


class TestServeCommand:
    def test_serve_runs_until_interrupted(self, config_file: Path) -> None:
        fake_host = MagicMock()
        fake_host.show.return_value = "http://127.0.0.1:1/dino3d/index.html"
        fake_host.server.is_running = True
        with patch("dinoshell.host.GameHost", return_value=fake_host) as cls, \
                patch("threading.Event.wait", side_effect=KeyboardInterrupt):
            assert main(["-c", str(config_file), "serve", "--port", "0"]) == 0
        settings = cls.call_args.args[0]
        assert settings.server.port == 0
        fake_host.destroy.assert_called()

    def test_serve_fails_when_server_down(self, config_file: Path) -> None:
        fake_host = MagicMock()
        fake_host.server.is_running = False
        with patch("dinoshell.host.GameHost", return_value=fake_host):
            assert main(["-c", str(config_file), "serve"]) == 1
        fake_host.destroy.assert_called_once_with()


class TestRepeatedCommands:
    def test_logging_handlers_not_stacked(self, config_file: Path) -> None:
        before = len(logging.getLogger("dinoshell").handlers)
        main(["-c", str(config_file), "assets"])
        main(["-c", str(config_file), "assets"])
        assert len(logging.getLogger("dinoshell").handlers) == before + 1
