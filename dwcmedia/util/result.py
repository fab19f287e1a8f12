"""Lightweight result type for parser outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Confidence(StrEnum):
    DEFINITE = "definite"
    PROBABLE = "probable"
    POSSIBLE = "possible"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Represents the outcome of parsing a single raw value.

    Supports boolean evaluation and tuple unpacking, and carries the parsed
    value in *payload* together with how sure the parser is about it.

    Examples::

        r = ParseResult.ok(BasisOfRecord.OBSERVATION)
        if r:
            print(r.payload)

        ok, payload = ParseResult.fail()
    """

    success: bool
    payload: Any = field(default=None)
    confidence: Confidence | None = None

    # -- constructors ------------------------------------------------------

    @classmethod
    def ok(cls, payload: Any, confidence: Confidence = Confidence.DEFINITE) -> ParseResult:
        return cls(success=True, payload=payload, confidence=confidence)

    @classmethod
    def fail(cls) -> ParseResult:
        return cls(success=False)

    # -- protocols ---------------------------------------------------------

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self):
        yield self.success
        yield self.payload
