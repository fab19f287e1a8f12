"""MIME-type registry, extension sniffer and resolver.

The registry and the sniffer are plain data holders built once and shared.
``MimeResolver`` combines them with the set of MIME types that denote web
pages rather than media files.
"""

from __future__ import annotations

import logging
import mimetypes
import re
from collections.abc import Iterable, Mapping
from pathlib import PurePosixPath
from types import MappingProxyType

from yarl import URL

from .types import DEFAULT_HTML_MIME_TYPES, HTML_TYPE, OCTET_STREAM

logger = logging.getLogger(__name__)

EXTENSION_TO_MIME: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".jpe": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".bmp": "image/bmp",
    ".svg": "image/svg+xml",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    ".jp2": "image/jp2",
    ".dng": "image/x-adobe-dng",
    ".mp3": "audio/mpeg",
    ".ogg": "audio/ogg",
    ".oga": "audio/ogg",
    ".wav": "audio/wav",
    ".m4a": "audio/mp4",
    ".aac": "audio/aac",
    ".flac": "audio/flac",
    ".aif": "audio/x-aiff",
    ".aiff": "audio/x-aiff",
    ".mp4": "video/mp4",
    ".m4v": "video/mp4",
    ".webm": "video/webm",
    ".mov": "video/quicktime",
    ".avi": "video/x-msvideo",
    ".mpg": "video/mpeg",
    ".mpeg": "video/mpeg",
    ".ogv": "video/ogg",
}

# Server-side script endpoints; what they serve is a page, not a file.
SCRIPT_EXTENSION_TO_MIME: dict[str, str] = {
    ".htm": HTML_TYPE,
    ".html": HTML_TYPE,
    ".shtml": HTML_TYPE,
    ".php": "text/x-php",
    ".php3": "text/x-php",
    ".php4": "text/x-php",
    ".php5": "text/x-php",
    ".phtml": "text/x-php",
    ".jsp": "text/x-jsp",
    ".jspx": "text/x-jsp",
    ".do": "text/x-jsp",
    ".asp": "text/asp",
    ".aspx": "text/aspdotnet",
    ".ashx": "text/aspdotnet",
    ".asmx": "text/aspdotnet",
    ".cfm": "text/x-coldfusion",
    ".cfml": "text/x-coldfusion",
    ".cgi": "text/x-cgi",
    ".pl": "text/x-perl",
}

MIME_ALIASES: dict[str, str] = {
    "image/jpg": "image/jpeg",
    "image/pjpeg": "image/jpeg",
    "image/x-png": "image/png",
    "image/tif": "image/tiff",
    "image/x-tiff": "image/tiff",
    "image/x-ms-bmp": "image/bmp",
    "audio/mp3": "audio/mpeg",
    "audio/x-mp3": "audio/mpeg",
    "audio/mpeg3": "audio/mpeg",
    "audio/x-mpeg": "audio/mpeg",
    "audio/x-wav": "audio/wav",
    "audio/wave": "audio/wav",
    "audio/vnd.wave": "audio/wav",
    "audio/x-flac": "audio/flac",
    "audio/x-m4a": "audio/mp4",
    "video/x-m4v": "video/mp4",
    "video/mov": "video/quicktime",
    "text/xhtml": "application/xhtml+xml",
}

_MIME_SYNTAX = re.compile(r"^[a-z0-9!#$&^_.+-]+/[a-z0-9!#$&^_.+-]+$")


class RegistryError(RuntimeError):
    """The MIME registry could not be initialized."""


def _stdlib_types() -> dict[str, str]:
    """Extension table of the standard library, without reading system files."""
    db = mimetypes.MimeTypes()
    table = dict(db.types_map[False])
    table.update(db.types_map[True])
    return table


class MimeRegistry:
    """Registered MIME types and the aliases that canonicalize onto them."""

    OCTET_STREAM = OCTET_STREAM

    def __init__(self, types: Iterable[str], aliases: Mapping[str, str] | None = None) -> None:
        registered = {t.strip().lower() for t in types if t and t.strip()}
        if not registered:
            raise RegistryError("MIME registry has no registered types")

        resolved: dict[str, str] = {}
        raw_aliases = {k.strip().lower(): v.strip().lower() for k, v in (aliases or {}).items()}
        for alias in raw_aliases:
            target, seen = raw_aliases[alias], {alias}
            while target in raw_aliases and target not in seen:
                seen.add(target)
                target = raw_aliases[target]
            if target in seen:
                raise RegistryError(f"MIME alias cycle at {alias!r}")
            resolved[alias] = target
            registered.add(target)

        registered.add(OCTET_STREAM)
        self._types = frozenset(registered.difference(resolved))
        self._aliases = MappingProxyType(resolved)

    @classmethod
    def default(cls, extra_aliases: Mapping[str, str] | None = None) -> MimeRegistry:
        types = set(_stdlib_types().values())
        types.update(EXTENSION_TO_MIME.values())
        types.update(SCRIPT_EXTENSION_TO_MIME.values())
        aliases = dict(MIME_ALIASES)
        aliases.update(extra_aliases or {})
        return cls(types, aliases)

    @property
    def types(self) -> frozenset[str]:
        return self._types

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def lookup(self, name: str | None) -> str | None:
        """Return the canonical name of *name*, or ``None`` when unregistered."""
        if not name:
            return None
        key = name.strip().lower()
        if key in self._aliases:
            return self._aliases[key]
        return key if key in self._types else None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self._types)


class MimeSniffer:
    """Guess a MIME type from the file extension of a URL."""

    def __init__(self, extensions: Mapping[str, str] | None = None) -> None:
        if extensions is None:
            table = _stdlib_types()
            table.update(EXTENSION_TO_MIME)
            table.update(SCRIPT_EXTENSION_TO_MIME)
        else:
            table = dict(extensions)
        self._extensions = MappingProxyType({k.lower(): v.lower() for k, v in table.items()})

    @property
    def extensions(self) -> Mapping[str, str]:
        return self._extensions

    def sniff(self, url: str | URL) -> str:
        """Return the best guess for *url*; ``application/octet-stream`` if none."""
        suffix = self._suffix(str(url))
        return self._extensions.get(suffix, OCTET_STREAM) if suffix else OCTET_STREAM

    @staticmethod
    def _suffix(url: str) -> str:
        try:
            path = URL(url, encoded=True).path
        except ValueError:
            path = url.split("#", 1)[0].split("?", 1)[0]
        if not path or path.endswith("/"):
            return ""
        return PurePosixPath(path.rsplit("/", 1)[-1]).suffix.lower()


class MimeResolver:
    """Normalize declared formats and derive formats from URLs."""

    def __init__(
        self,
        registry: MimeRegistry | None = None,
        sniffer: MimeSniffer | None = None,
        html_mime_types: Iterable[str] = DEFAULT_HTML_MIME_TYPES,
    ) -> None:
        self._registry = registry if registry is not None else MimeRegistry.default()
        self._sniffer = sniffer if sniffer is not None else MimeSniffer()
        self._html_mime_types = frozenset(t.lower() for t in html_mime_types)

    @property
    def registry(self) -> MimeRegistry:
        return self._registry

    @property
    def html_mime_types(self) -> frozenset[str]:
        return self._html_mime_types

    def resolve_format(self, fmt: str | None) -> str | None:
        """Return the canonical MIME type for a declared *fmt*.

        Unregistered values are kept if they look like ``type/subtype``;
        anything else is unknown and yields ``None``.
        """
        if fmt is None:
            return None
        value = fmt.strip().lower().split(";", 1)[0].strip()
        if not value:
            return None

        canonical = self._registry.lookup(value)
        if canonical is not None:
            return canonical
        if _MIME_SYNTAX.match(value):
            return value
        logger.debug("Unknown media format %r", fmt)
        return None

    def resolve_uri(self, uri: URL | str | None) -> str | None:
        """Return the MIME type a media *uri* most likely serves.

        Script endpoints and extension-less links come back as ``text/html``.
        """
        if uri is None:
            return None
        mime = self._sniffer.sniff(uri).lower()
        canonical = self._registry.lookup(mime) or mime
        if mime in self._html_mime_types or canonical in self._html_mime_types:
            return HTML_TYPE
        return canonical
