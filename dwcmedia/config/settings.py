"""Library settings -- reads from environment and ``.env`` file.

Only the data that shapes classification lives here: extra MIME types to
treat as web pages, extra MIME aliases and the log level used by the CLI.
Environment variables take precedence over the ``.env`` file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import ClassVar

from dotenv import dotenv_values

from ..util.singletons import register_singleton

logger = logging.getLogger(__name__)


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


class Settings:
    """Runtime configuration sourced from environment variables and ``.env``."""

    _PREFIX: ClassVar[str] = "DWCMEDIA_"

    def __init__(self, dotenv_path: str | Path | None = None) -> None:
        self.dotenv_path = Path(dotenv_path or os.getenv("DOTENV_PATH") or ".env")
        self.reload()

    def reload(self) -> None:
        """Re-read the ``.env`` file and environment variables."""
        self._file_values: dict[str, str | None] = (
            dotenv_values(self.dotenv_path) if self.dotenv_path.is_file() else {}
        )
        e = self._read

        self.log_level: str = (e("LOG_LEVEL") or "INFO").upper()
        self.html_mime_types: tuple[str, ...] = tuple(
            t.lower() for t in _split_csv(e("HTML_MIME_TYPES"))
        )
        self.mime_aliases: dict[str, str] = self._parse_aliases(e("MIME_ALIASES"))

    # -- helpers -----------------------------------------------------------

    def _read(self, key: str) -> str:
        name = self._PREFIX + key
        return os.getenv(name) or self._file_values.get(name) or ""

    @staticmethod
    def _parse_aliases(raw: str) -> dict[str, str]:
        aliases: dict[str, str] = {}
        for pair in _split_csv(raw):
            alias, sep, canonical = pair.partition("=")
            if not sep or not alias.strip() or not canonical.strip():
                logger.warning("Ignoring malformed MIME alias entry: %r", pair)
                continue
            aliases[alias.strip().lower()] = canonical.strip().lower()
        return aliases

    def to_dict(self) -> dict[str, object]:
        return {
            "log_level": self.log_level,
            "html_mime_types": list(self.html_mime_types),
            "mime_aliases": dict(self.mime_aliases),
        }


# Module-level singleton
cfg = Settings()


def _reset_cfg() -> None:
    global cfg
    cfg = Settings()


register_singleton(_reset_cfg)
