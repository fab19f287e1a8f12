"""Dictionary-backed parsers mapping free-text values onto enum members."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from enum import Enum
from importlib import resources
from types import MappingProxyType
from typing import Generic, TypeVar

from ..util.result import Confidence, ParseResult

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_IGNORED_CHARS = re.compile(r"[\s_.\-]+")


def normalize_key(value: str, case_sensitive: bool = False) -> str:
    key = _IGNORED_CHARS.sub("", value.strip())
    return key if case_sensitive else key.casefold()


def read_dictionary_lines(lines: Iterable[str]) -> list[tuple[str, str]]:
    """Parse ``key<TAB>value`` lines, skipping blanks and ``#`` comments."""
    pairs: list[tuple[str, str]] = []
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        key, sep, value = line.partition("\t")
        if not sep or not key.strip() or not value.strip():
            raise ValueError(f"Malformed dictionary line {lineno}: {line!r}")
        pairs.append((key.strip(), value.strip()))
    return pairs


def load_resource_entries(name: str, enum_cls: type[E]) -> dict[str, E]:
    """Load ``dwcmedia/resources/<name>``; values name *enum_cls* members."""
    text = resources.files("dwcmedia").joinpath("resources").joinpath(name).read_text(encoding="utf-8")
    entries: dict[str, E] = {}
    for key, value in read_dictionary_lines(text.splitlines()):
        try:
            entries[key] = enum_cls[value]
        except KeyError:
            raise ValueError(f"{name}: {value!r} is not a {enum_cls.__name__}") from None
    # every member matches its own name
    for member in enum_cls:
        entries.setdefault(member.name, member)
    logger.debug("Loaded %d %s dictionary entries from %s", len(entries), enum_cls.__name__, name)
    return entries


class DictionaryParser(Generic[E]):
    """Exact lookup of normalized input values in a fixed dictionary."""

    def __init__(self, entries: Mapping[str, E], case_sensitive: bool = False) -> None:
        self._case_sensitive = case_sensitive
        table: dict[str, E] = {}
        for raw_key, member in entries.items():
            key = normalize_key(raw_key, case_sensitive)
            if key in table and table[key] is not member:
                logger.warning(
                    "Dictionary key %r maps to both %s and %s; keeping %s",
                    raw_key, table[key], member, member,
                )
            table[key] = member
        self._table = MappingProxyType(table)

    @classmethod
    def from_resource(
        cls,
        name: str,
        enum_cls: type[E],
        case_sensitive: bool = False,
    ) -> DictionaryParser[E]:
        return cls(load_resource_entries(name, enum_cls), case_sensitive=case_sensitive)

    def __len__(self) -> int:
        return len(self._table)

    def parse(self, value: str | None) -> ParseResult:
        if not value or not value.strip():
            return ParseResult.fail()
        member = self._table.get(normalize_key(value, self._case_sensitive))
        if member is None:
            logger.debug("No dictionary match for %r", value)
            return ParseResult.fail()
        return ParseResult.ok(member, Confidence.DEFINITE)
