"""Word sequence construction.

Expands one length multiset into every ordered sequence of words that
realizes it. For {1: 3, 3: 1} and buckets {1: [a, b, c], 3: [dog]} this
yields ("a", "a", "a", "dog"), ("a", "a", "b", "dog"), ..., ("dog", "c", "c", "c").

Buckets are never depleted: only the required count per length goes down,
so the same word can fill several slots of its length.
"""

from typing import Iterator

from ..schema import LengthIndex, LengthMultiset


def length_frequency(multiset: LengthMultiset) -> dict[int, int]:
    """Count how many words of each length a multiset requires."""
    frequency: dict[int, int] = {}
    for length in multiset:
        frequency[length] = frequency.get(length, 0) + 1
    return frequency


def _expand(
    index: LengthIndex,
    target: int,
    frequency: dict[int, int],
    partial: list[str],
    total: int,
) -> Iterator[tuple[str, ...]]:
    if total == target:
        yield tuple(partial)
    if total >= target:
        return

    for length in list(frequency):
        if frequency[length] <= 0:
            continue
        for word in index.words_of_length(length):
            partial.append(word)
            frequency[length] -= 1
            try:
                yield from _expand(index, target, frequency, partial, total + length)
            finally:
                partial.pop()
                frequency[length] += 1


def build_sequences(
    frequency: dict[int, int],
    index: LengthIndex,
    target: int,
) -> Iterator[tuple[str, ...]]:
    """Lazily yield every word sequence consistent with a length frequency.

    The frequency map is copied; each call owns its own working state, so
    concurrent calls never share counters.

    Args:
        frequency: Required word count per length.
        index: Word buckets to draw from.
        target: Total character length of a complete sequence.

    Yields:
        Tuples of words whose lengths sum to target.
    """
    return _expand(index, target, dict(frequency), [], 0)


def sequences_for_multiset(
    multiset: LengthMultiset,
    index: LengthIndex,
    target: int,
) -> Iterator[tuple[str, ...]]:
    """Yield the word sequences for one length multiset."""
    return build_sequences(length_frequency(multiset), index, target)
