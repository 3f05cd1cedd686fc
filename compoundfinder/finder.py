"""Compound word search entry points.

Ties the stages together:
    vocabulary -> LengthIndex -> length multisets -> word sequences -> results

Usage:
    from compoundfinder.finder import process_lines

    process_lines({"a", "b", "c", "dog", "dogabc"}, 6)
    # {"dog+a+b+c=dogabc"}
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional

from . import config as cfg
from .errors import InvalidTargetError
from .ingest import plain_text
from .schema import LengthIndex, Result
from .search.partitions import find_length_combinations
from .search.validator import find_results, format_results

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Statistics from a search run."""

    target: int
    vocabulary_size: int = 0
    by_length: dict[int, int] = field(default_factory=dict)
    multisets: int = 0
    results: int = 0
    elapsed: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "target": self.target,
            "vocabulary_size": self.vocabulary_size,
            "by_length": {str(k): v for k, v in self.by_length.items()},
            "multisets": self.multisets,
            "results": self.results,
            "elapsed": round(self.elapsed, 3),
        }


def check_target(index: LengthIndex, target: int) -> None:
    """Fail unless the index holds words of the target length."""
    if isinstance(target, bool) or not isinstance(target, int) or target <= 0:
        raise InvalidTargetError(
            target, f"Invalid target length specified, {target!r} is not a positive integer"
        )
    if not index.has_length(target):
        raise InvalidTargetError(target)


def search_results(
    lines: Iterable[str],
    target: int,
    workers: Optional[int] = None,
    executor: Optional[str] = None,
    parallel: Optional[bool] = None,
    show_progress: bool = False,
) -> tuple[set[Result], SearchStats]:
    """Find every compound of the target length, with run statistics.

    Args:
        lines: Distinct vocabulary words.
        target: Length of the words to rebuild.
        workers: Worker count (0 = all cores; None = config default).
        executor: "process" or "thread" (None = config default).
        parallel: False to run validation in the calling thread.
        show_progress: Show a progress bar during validation.

    Returns:
        Tuple of (Result set, SearchStats).

    Raises:
        InvalidTargetError: No word has the target length.
    """
    start = time.perf_counter()
    index = LengthIndex.build(lines)
    check_target(index, target)

    stats = SearchStats(
        target=target,
        vocabulary_size=index.count(),
        by_length=index.by_length(),
    )
    logger.debug("Indexed %d words across %d lengths", stats.vocabulary_size, len(stats.by_length))

    multisets = find_length_combinations(index, target)
    stats.multisets = len(multisets)

    results = find_results(
        index,
        target,
        multisets,
        workers=workers,
        executor=executor,
        parallel=parallel,
        show_progress=show_progress,
    )
    stats.results = len(results)
    stats.elapsed = time.perf_counter() - start
    logger.info(
        "Target %d: %d results from %d length multisets in %.2fs",
        target, stats.results, stats.multisets, stats.elapsed,
    )
    return results, stats


def search(
    lines: Iterable[str],
    target: int,
    separator: Optional[str] = None,
    equals: Optional[str] = None,
    **kwargs,
) -> tuple[set[str], SearchStats]:
    """Like search_results(), with each result formatted as "w1+w2+...=concat"."""
    results, stats = search_results(lines, target, **kwargs)
    formatted = format_results(
        results,
        separator if separator is not None else cfg.default_separator(),
        equals if equals is not None else cfg.default_equals(),
    )
    return formatted, stats


def process_lines(lines: Iterable[str], target: int, **kwargs) -> set[str]:
    """Find every compound of the target length.

    Raises:
        InvalidTargetError: No word has the target length.
    """
    results, _ = search(lines, target, **kwargs)
    return results


def process_file(
    filepath: Path | str,
    target: int,
    comment_char: Optional[str] = None,
    **kwargs,
) -> set[str]:
    """Read a word-per-line file and find every compound of the target length."""
    words = plain_text.read_vocabulary(filepath, comment_char=comment_char)
    return process_lines(words, target, **kwargs)
