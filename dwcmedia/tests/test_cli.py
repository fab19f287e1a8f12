"""Tests for the command-line front end."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from dwcmedia import cli


@pytest.fixture()
def output(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    buf = io.StringIO()
    monkeypatch.setattr(cli, "console", Console(file=buf, width=200, color_system=None))
    return buf


class _FakeSession:
    def __init__(self, lines: list[str]) -> None:
        self._lines = iter(lines)

    def prompt(self, *_args, **_kwargs) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None


class TestBuildParser:
    def test_no_command(self) -> None:
        args = cli.build_parser().parse_args([])
        assert args.command is None

    def test_media_values(self) -> None:
        args = cli.build_parser().parse_args(["media", "a", "b"])
        assert args.command == "media"
        assert args.values == ["a", "b"]


class TestMain:
    def test_media(self, output: io.StringIO) -> None:
        assert cli.main(["media", "http://a.org/1.jpg|http://a.org/specimen/12"]) == 0
        text = output.getvalue()
        assert "image/jpeg" in text
        assert "StillImage" in text
        assert "http://a.org/specimen/12" in text

    def test_media_without_urls(self, output: io.StringIO) -> None:
        cli.main(["media", "no image"])
        assert "no media URLs" in output.getvalue()

    def test_basis(self, output: io.StringIO) -> None:
        cli.main(["basis", "specimen", "banana"])
        text = output.getvalue()
        assert "PRESERVED_SPECIMEN" in text
        assert "no basisOfRecord" in text

    def test_typified(self, output: io.StringIO) -> None:
        cli.main(["typified", "Holotype of Abies alba Mill."])
        assert "Abies alba Mill." in output.getvalue()

    def test_interactive(self, output: io.StringIO, monkeypatch: pytest.MonkeyPatch) -> None:
        session = _FakeSession(["", "http://a.org/call.mp3", "/quit", "http://a.org/never.jpg"])
        monkeypatch.setattr(cli, "PromptSession", lambda *a, **kw: session)
        assert cli.main([]) == 0
        text = output.getvalue()
        assert "audio/mpeg" in text
        assert "never.jpg" not in text
