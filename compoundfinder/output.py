"""Result output for compoundfinder.

Writes results to a stream or file, one at a time. Text output formats
each result; JSON output keeps the words and concatenation as separate fields.

Formats:
    text    dog+a+b+c=dogabc            (one result per line)
    json    {"target": 6, "count": 1, "results": [...]}
"""

import json
import sys
from pathlib import Path
from typing import IO, Iterable, Optional

from .config import OUTPUT_FORMATS
from .schema import EQUALS, SEPARATOR, Result


class ResultWriter:
    """Writes results as text lines or as a JSON document."""

    def __init__(
        self,
        stream: Optional[IO[str]] = None,
        output_format: str = "text",
        separator: str = SEPARATOR,
        equals: str = EQUALS,
    ):
        """Initialize writer.

        Args:
            stream: Destination (defaults to stdout).
            output_format: "text" or "json".
            separator: Separator placed between words in text output.
            equals: Equality marker used in text output.
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {output_format}. Available: {OUTPUT_FORMATS}"
            )
        self.stream = stream if stream is not None else sys.stdout
        self.output_format = output_format
        self.separator = separator
        self.equals = equals
        self._pending: list[Result] = []
        self.count = 0

    def write(self, result: Result) -> None:
        """Emit one result."""
        self.count += 1
        if self.output_format == "text":
            self.stream.write(result.format(self.separator, self.equals) + "\n")
        else:
            self._pending.append(result)

    def write_all(self, results: Iterable[Result]) -> int:
        """Emit every result, returning how many were written."""
        for result in results:
            self.write(result)
        return self.count

    def close(self, target: Optional[int] = None) -> None:
        """Flush any buffered output (the JSON document is written here)."""
        if self.output_format == "json":
            ordered = sorted(self._pending, key=lambda r: (r.concatenation, r.words))
            json.dump(
                {
                    "target": target,
                    "count": len(ordered),
                    "results": [result.to_dict() for result in ordered],
                },
                self.stream,
                indent=2,
                ensure_ascii=False,
            )
            self.stream.write("\n")
            self._pending.clear()
        self.stream.flush()


def save_results(
    results: Iterable[Result],
    filepath: Path | str,
    output_format: str = "text",
    target: Optional[int] = None,
    separator: str = SEPARATOR,
    equals: str = EQUALS,
) -> int:
    """Write results to a file.

    Args:
        results: Results to write.
        filepath: Destination file (parent directories are created).
        output_format: "text" or "json".
        target: Target length recorded in JSON output.
        separator: Separator placed between words in text output.
        equals: Equality marker used in text output.

    Returns:
        Number of results written.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        writer = ResultWriter(f, output_format, separator, equals)
        count = writer.write_all(results)
        writer.close(target)
    return count
