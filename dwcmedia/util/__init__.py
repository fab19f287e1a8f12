"""Shared utilities."""

from .result import Confidence, ParseResult
from .singletons import register_singleton, registered_singletons, reset_all_singletons

__all__ = [
    "Confidence",
    "ParseResult",
    "register_singleton",
    "registered_singletons",
    "reset_all_singletons",
]
