"""Data structures for compoundfinder.

Core concept:
    - Words are grouped into buckets keyed by character length
    - Words of the target length are the answers, never the ingredients
    - A result pairs the ingredient words with their concatenation

Example:
    {"a", "b", "c", "dog", "dogabc"} -> {1: [a, b, c], 3: [dog], 6: [dogabc]}
    Result(("dog", "a", "b", "c"), "dogabc").format() -> "dog+a+b+c=dogabc"
"""

from dataclasses import dataclass, field
from typing import Any, Iterable

# Canonical (sorted, non-decreasing) lengths summing to the target
LengthMultiset = tuple[int, ...]

SEPARATOR = "+"
EQUALS = "="


@dataclass
class LengthIndex:
    """Words grouped by character length.

    Read-only once built; safe to share between workers.
    """

    buckets: dict[int, list[str]] = field(default_factory=dict)

    @classmethod
    def build(cls, vocabulary: Iterable[str]) -> "LengthIndex":
        """Group vocabulary words by length.

        Args:
            vocabulary: Distinct words. Bucket order follows iteration order.

        Returns:
            LengthIndex with one bucket per length present.
        """
        buckets: dict[int, list[str]] = {}
        for word in vocabulary:
            if len(word) in buckets:
                buckets[len(word)].append(word)
            else:
                buckets[len(word)] = [word]
        return cls(buckets=buckets)

    def has_length(self, length: int) -> bool:
        """Check if any word has this length."""
        return length in self.buckets

    def words_of_length(self, length: int) -> list[str]:
        """Get words of a length (empty list if none)."""
        return self.buckets.get(length, [])

    def lengths(self) -> list[int]:
        """Get sorted list of lengths present."""
        return sorted(self.buckets)

    def lengths_excluding(self, target: int) -> set[int]:
        """Get lengths usable as ingredients for a target length."""
        return {length for length in self.buckets if length != target}

    def target_words(self, target: int) -> frozenset[str]:
        """Get the lookup set of words a combination must match."""
        return frozenset(self.words_of_length(target))

    def count(self) -> int:
        """Get total word count."""
        return sum(len(words) for words in self.buckets.values())

    def by_length(self) -> dict[int, int]:
        """Get word count per length."""
        return {length: len(self.buckets[length]) for length in self.lengths()}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word_count": self.count(),
            "by_length": {str(k): v for k, v in self.by_length().items()},
        }


@dataclass(frozen=True)
class Result:
    """A word sequence whose concatenation is a target-length word."""

    words: tuple[str, ...]
    concatenation: str

    def format(self, separator: str = SEPARATOR, equals: str = EQUALS) -> str:
        """Render as "w1+w2+...=concat"."""
        return separator.join(self.words) + equals + self.concatenation

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "words": list(self.words),
            "concatenation": self.concatenation,
        }
