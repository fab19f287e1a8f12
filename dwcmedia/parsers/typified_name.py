"""Extract the typified name from a type status such as "Holotype of Abies alba"."""

from __future__ import annotations

import logging
import re

from ..util.result import Confidence, ParseResult

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 4
MAX_NAME_LENGTH = 40

_NAME_SEPARATOR = re.compile(r"\sOF\W*\s+\W*(.+)\W*\s*$", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


class TypifiedNameParser:
    """Return the text after the ``of`` separator, whitespace-normalized.

    The name itself is not parsed, so results only ever carry
    ``Confidence.POSSIBLE`` and are limited to a plausible length.
    """

    def parse(self, value: str | None) -> ParseResult:
        if not value:
            return ParseResult.fail()
        m = _NAME_SEPARATOR.search(value)
        if m is None:
            return ParseResult.fail()

        name = _WHITESPACE.sub(" ", m.group(1)).strip()
        if MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
            return ParseResult.ok(name, Confidence.POSSIBLE)
        logger.debug("Implausible typified name %r from input %r", name, value)
        return ParseResult.fail()
