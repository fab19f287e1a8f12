"""Media record model and shared constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from yarl import URL

HTML_TYPE = "text/html"
OCTET_STREAM = "application/octet-stream"

# Tried in order; an earlier delimiter wins when two split equally well.
MULTI_VALUE_DELIMITERS: tuple[str, ...] = ("|#DELIMITER#|", "|", ",", ";")

# MIME types which mean "a web page", not a media file.
DEFAULT_HTML_MIME_TYPES: frozenset[str] = frozenset({
    "text/x-coldfusion",
    "text/x-php",
    "text/asp",
    "text/aspdotnet",
    "text/x-cgi",
    "text/x-jsp",
    "text/x-perl",
    HTML_TYPE,
    OCTET_STREAM,
})


class MediaType(StrEnum):
    STILL_IMAGE = "StillImage"
    SOUND = "Sound"
    MOVING_IMAGE = "MovingImage"


@dataclass
class MediaRecord:
    """A single media reference of an occurrence record.

    ``identifier`` points at the media file itself. When it turns out to be a
    web page the classifier moves it to ``references``.
    """

    identifier: URL | None = None
    format: str | None = None
    type: MediaType | None = None
    references: URL | None = None
    title: str | None = None
    description: str | None = None
    license: str | None = None
    creator: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": str(self.identifier) if self.identifier is not None else None,
            "format": self.format,
            "type": self.type.value if self.type is not None else None,
            "references": str(self.references) if self.references is not None else None,
            "title": self.title,
            "description": self.description,
            "license": self.license,
            "creator": self.creator,
        }
