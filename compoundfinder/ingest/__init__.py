"""Vocabulary ingestion module.

Provides pluggable readers that turn a source file into a set of
distinct words:
- Plain text word lists

Usage:
    from compoundfinder.ingest import plain_text

    words = plain_text.read_vocabulary("path/to/words.txt")
"""

from .base import VocabularyReader, ReadResult
from . import plain_text

# Register available readers
READERS: dict[str, type[VocabularyReader]] = {
    "plain_text": plain_text.PlainTextReader,
}


def get_reader(name: str) -> type[VocabularyReader]:
    """Get reader class by name."""
    if name not in READERS:
        raise ValueError(f"Unknown reader: {name}. Available: {list(READERS.keys())}")
    return READERS[name]


def register_reader(name: str, reader_cls: type[VocabularyReader]) -> None:
    """Register a custom reader."""
    READERS[name] = reader_cls


__all__ = [
    "VocabularyReader",
    "ReadResult",
    "plain_text",
    "get_reader",
    "register_reader",
    "READERS",
]
