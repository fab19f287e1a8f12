"""Dictionary and regex parsers for other Darwin Core terms."""

__all__ = [
    "BasisOfRecord",
    "BasisOfRecordParser",
    "DictionaryParser",
    "TypifiedNameParser",
]
