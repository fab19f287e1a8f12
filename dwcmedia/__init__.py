"""Normalization of Darwin Core media, basisOfRecord and typeStatus values."""

__version__ = "0.1.0"

__all__ = ["ParserContext", "build_context"]
