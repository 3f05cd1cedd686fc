"""Plain text word list reader.

Simple format: one word per line.
Surrounding whitespace is stripped and empty lines are skipped.
Comments are off by default; pass comment_char to enable them.
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import ReadResult, VocabularyReader


class PlainTextReader(VocabularyReader):
    """Reader for plain text word lists."""

    file_extensions = [".txt", ".list", ".words"]

    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse plain text word list.

        Args:
            filepath: Path to text file.

        Yields:
            Tuples of (word, line_number).
        """
        with open(filepath, "r", encoding=self.encoding) as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()

                if self.comment_char:
                    # Handle inline comments: "word # comment"
                    line = line.split(self.comment_char)[0].strip()

                yield line, line_num


def read(
    filepath: Path | str,
    encoding: str = "utf-8",
    comment_char: Optional[str] = None,
) -> ReadResult:
    """Convenience function to read a plain text word list.

    Args:
        filepath: Path to text file.
        encoding: Text encoding.
        comment_char: Character that starts a comment, or None.

    Returns:
        ReadResult with words.
    """
    reader = PlainTextReader(encoding=encoding, comment_char=comment_char)
    return reader.read(filepath)


def read_vocabulary(
    filepath: Path | str,
    encoding: str = "utf-8",
    comment_char: Optional[str] = None,
) -> set[str]:
    """Read a plain text word list into a set of distinct words."""
    return read(filepath, encoding=encoding, comment_char=comment_char).words
