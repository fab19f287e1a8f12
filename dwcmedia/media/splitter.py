"""Split a Darwin Core ``associatedMedia`` value into individual URLs."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from yarl import URL

from .types import MULTI_VALUE_DELIMITERS
from .urls import parse_url

logger = logging.getLogger(__name__)


def _fragments(raw: str, delimiter: str) -> list[str]:
    return [part.strip() for part in raw.split(delimiter) if part.strip()]


def split_associated_media(
    raw: str | None,
    delimiters: Sequence[str] = MULTI_VALUE_DELIMITERS,
) -> list[URL]:
    """Return the URLs found in *raw*, in their original order.

    The whole value is tried as a single URL first. Otherwise every delimiter
    is tried and the split yielding the most valid URLs wins; on a tie the
    earlier delimiter is kept and the ambiguity is logged.
    """
    if not raw:
        return []

    whole = parse_url(raw)
    if whole is not None:
        return [whole]

    best: list[URL] = []
    for delimiter in delimiters:
        parts = _fragments(raw, delimiter)
        # nothing was actually split
        if len(parts) <= 1:
            continue

        urls = [url for url in map(parse_url, parts) if url is not None]
        if len(urls) > len(best):
            best = urls
        elif best and len(urls) == len(best):
            logger.info("Unclear what delimiter is being used for associatedMedia = %s", raw)
    return best
