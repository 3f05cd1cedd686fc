"""compoundfinder - Compound word discovery.

Finds every word in a vocabulary that can be rebuilt by concatenating other
words from the same vocabulary.

Core concepts:
    - Words are grouped by length; target-length words are the answers
    - Target length is split into multisets of ingredient lengths
    - Each multiset expands into ordered word sequences, checked in parallel

Example:
    {"a", "b", "c", "dog", "dogabc"}, target 6
    -> "dog+a+b+c=dogabc"

Usage:
    from compoundfinder import process_lines, process_file

    results = process_lines({"a", "b", "c", "dog", "dogabc"}, 6)
    results = process_file("words.txt", 6, workers=4)
"""

from .errors import CompoundFinderError, InvalidTargetError, MalformedInputError
from .finder import SearchStats, process_file, process_lines, search, search_results
from .schema import LengthIndex, Result

__version__ = "0.1.0"

__all__ = [
    "CompoundFinderError",
    "InvalidTargetError",
    "MalformedInputError",
    "LengthIndex",
    "Result",
    "SearchStats",
    "process_file",
    "process_lines",
    "search",
    "search_results",
]
