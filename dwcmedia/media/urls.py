"""URL validation for media identifiers."""

from __future__ import annotations

import logging
import re

from yarl import URL

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES: frozenset[str] = frozenset({"http", "https", "ftp"})

# Anything RFC 3986 never allows unescaped, plus broken percent escapes.
_ILLEGAL_CHARS = re.compile(r"[\s\x00-\x1f\x7f\"<>\\^`{|}]|%(?![0-9A-Fa-f]{2})")
_AUTHORITY_END = re.compile(r"[/?#]")


def _misplaced_delimiters(candidate: str) -> bool:
    """True when ``#`` repeats or brackets appear outside the authority."""
    if candidate.count("#") > 1:
        return True
    _, sep, rest = candidate.partition("://")
    if not sep:
        tail = candidate
    else:
        m = _AUTHORITY_END.search(rest)
        tail = rest[m.start():] if m else ""
    return "[" in tail or "]" in tail


def parse_url(value: str | None) -> URL | None:
    """Return *value* as an absolute http(s)/ftp URL, or ``None`` if it is not one.

    Values starting with ``www.`` are read as ``http://`` URLs.
    """
    if not value:
        return None
    candidate = value.strip()
    if not candidate:
        return None

    if _ILLEGAL_CHARS.search(candidate) or _misplaced_delimiters(candidate):
        logger.debug("Not a URL, illegal characters: %r", candidate)
        return None

    if "://" not in candidate and candidate.lower().startswith("www."):
        candidate = "http://" + candidate

    try:
        url = URL(candidate, encoded=True)
        scheme = url.scheme.lower()
        host = url.host
    except (ValueError, TypeError) as exc:
        logger.debug("Not a URL, %s: %r", exc, candidate)
        return None

    if scheme not in ALLOWED_SCHEMES or not host:
        logger.debug("Not an absolute web URL: %r", candidate)
        return None
    return url
