"""Parser context -- the shared, read-only parsers built once at startup."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import settings as settings_module
from .config.settings import Settings
from .media.classify import MediaClassifier
from .media.mime import MimeRegistry, MimeResolver, MimeSniffer
from .media.splitter import split_associated_media
from .media.types import DEFAULT_HTML_MIME_TYPES, MediaRecord
from .parsers.basis_of_record import BasisOfRecordParser
from .parsers.typified_name import TypifiedNameParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserContext:
    """Everything a record-normalization pipeline needs, safe to share."""

    resolver: MimeResolver
    classifier: MediaClassifier
    basis_of_record: BasisOfRecordParser = field(default_factory=BasisOfRecordParser.load)
    typified_name: TypifiedNameParser = field(default_factory=TypifiedNameParser)

    def parse_associated_media_records(self, raw: str | None) -> list[MediaRecord]:
        """Split *raw* into URLs and classify one record per URL."""
        return [
            self.classifier.classify(MediaRecord(identifier=url))
            for url in split_associated_media(raw)
        ]


def build_context(settings: Settings | None = None) -> ParserContext:
    settings = settings or settings_module.cfg
    registry = MimeRegistry.default(extra_aliases=settings.mime_aliases)
    resolver = MimeResolver(
        registry=registry,
        sniffer=MimeSniffer(),
        html_mime_types=DEFAULT_HTML_MIME_TYPES | set(settings.html_mime_types),
    )
    logger.debug(
        "Parser context ready: %d registered MIME types, %d HTML types",
        len(registry), len(resolver.html_mime_types),
    )
    return ParserContext(resolver=resolver, classifier=MediaClassifier(resolver))
