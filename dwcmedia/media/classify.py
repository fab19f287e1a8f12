"""Media type classification of media records."""

from __future__ import annotations

import logging

from .mime import MimeResolver
from .types import HTML_TYPE, MediaRecord, MediaType

logger = logging.getLogger(__name__)

_PREFIX_TO_TYPE: tuple[tuple[str, MediaType], ...] = (
    ("image", MediaType.STILL_IMAGE),
    ("audio", MediaType.SOUND),
    ("video", MediaType.MOVING_IMAGE),
)


def category_for(mime: str | None) -> MediaType | None:
    """Return the coarse category of *mime*, or ``None`` for anything else."""
    if not mime:
        return None
    for prefix, media_type in _PREFIX_TO_TYPE:
        if mime.startswith(prefix):
            return media_type
    return None


class MediaClassifier:
    """Fill in ``format`` and ``type`` of media records."""

    def __init__(self, resolver: MimeResolver) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> MimeResolver:
        return self._resolver

    def classify(self, record: MediaRecord) -> MediaRecord:
        """Classify *record* in place and return it.

        A record whose format is ``text/html`` is a link to a web page: its
        identifier becomes the ``references`` link and no type is assigned.
        """
        if not record.format:
            record.format = self._resolver.resolve_uri(record.identifier)

        if record.format and record.format.lower() == HTML_TYPE and record.identifier is not None:
            record.references = record.identifier
            record.identifier = None
            record.format = None

        if record.format:
            media_type = category_for(record.format)
            if media_type is not None:
                record.type = media_type
            else:
                logger.debug("Unsupported media format %s", record.format)
        return record
