"""Shared pytest fixtures for dwcmedia tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from dwcmedia.context import ParserContext, build_context
from dwcmedia.media.classify import MediaClassifier
from dwcmedia.media.mime import MimeResolver


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    env_path = tmp_path / ".env"
    monkeypatch.setenv("DOTENV_PATH", str(env_path))
    for key in ("DWCMEDIA_LOG_LEVEL", "DWCMEDIA_HTML_MIME_TYPES", "DWCMEDIA_MIME_ALIASES"):
        monkeypatch.delenv(key, raising=False)
    return env_path


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_env: Path):
    from dwcmedia.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def env_path(_isolate_env: Path) -> Path:
    return _isolate_env


@pytest.fixture(scope="session")
def resolver() -> MimeResolver:
    return MimeResolver()


@pytest.fixture(scope="session")
def classifier(resolver: MimeResolver) -> MediaClassifier:
    return MediaClassifier(resolver)


@pytest.fixture()
def ctx() -> ParserContext:
    return build_context()
