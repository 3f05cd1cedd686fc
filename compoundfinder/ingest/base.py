"""Base reader interface for vocabulary sources.

All readers inherit from VocabularyReader and implement the parse() method.
This provides a consistent API for loading a deduplicated word set from any
source format.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from ..errors import MalformedInputError

logger = logging.getLogger(__name__)


@dataclass
class ReadResult:
    """Result of reading a vocabulary source."""

    words: set[str]
    source_path: str
    total_raw: int = 0          # Total lines/entries in source
    total_valid: int = 0        # Distinct words kept
    total_duplicates: int = 0   # Repeated words dropped
    total_blank: int = 0        # Empty entries dropped

    def __repr__(self) -> str:
        return (
            f"ReadResult({self.source_path}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_duplicates} dupes)"
        )


class VocabularyReader(ABC):
    """Base class for vocabulary readers.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (word, line_number) tuples
        - file_extensions: list of supported extensions

    The read() method handles deduplication and bookkeeping.
    """

    file_extensions: list[str] = []

    def __init__(self, encoding: str = "utf-8", comment_char: Optional[str] = None):
        """Initialize reader.

        Args:
            encoding: Text encoding of the source file.
            comment_char: Character that starts a comment, or None. Readers
                for formats without comments may ignore it.
        """
        self.encoding = encoding
        self.comment_char = comment_char

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse source file and yield (word, line_number) tuples.

        Blank entries are yielded as empty strings so they can be counted.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (word, line_number).
        """
        pass

    def read(self, filepath: Path | str) -> ReadResult:
        """Read a vocabulary from file.

        Args:
            filepath: Path to source file.

        Returns:
            ReadResult with the distinct words and statistics.

        Raises:
            OSError: File cannot be opened.
            MalformedInputError: File is not valid text in this encoding.
        """
        filepath = Path(filepath)
        filepath_str = str(filepath.resolve())

        words: set[str] = set()
        total_raw = 0
        duplicates = 0
        blank = 0

        try:
            for word, _ in self.parse(filepath):
                total_raw += 1
                if not word:
                    blank += 1
                elif word in words:
                    duplicates += 1
                else:
                    words.add(word)
        except UnicodeDecodeError as e:
            raise MalformedInputError(filepath_str, str(e)) from e

        logger.debug(
            "Read %d words from %s (%d dupes, %d blank)",
            len(words), filepath_str, duplicates, blank,
        )
        return ReadResult(
            words=words,
            source_path=filepath_str,
            total_raw=total_raw,
            total_valid=len(words),
            total_duplicates=duplicates,
            total_blank=blank,
        )
