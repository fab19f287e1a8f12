"""associatedMedia splitting, MIME resolution and media classification."""

__all__ = [
    "MediaClassifier",
    "MediaRecord",
    "MediaType",
    "MimeRegistry",
    "MimeResolver",
    "MimeSniffer",
    "category_for",
    "parse_url",
    "split_associated_media",
]
