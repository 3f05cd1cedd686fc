"""Length partition enumeration.

Finds every multiset of candidate lengths that sums exactly to the target.
Lengths may repeat without limit, so the same multiset is reached along
several paths ([1, 2] and [2, 1] for a target of 3). Each hit is sorted
before it is collected, and the set keeps one copy per sorted tuple.

The search is exhaustive and unbounded; small lengths blow up quickly.
"""

import logging
from typing import Iterable, Iterator

from ..schema import LengthIndex, LengthMultiset

logger = logging.getLogger(__name__)


def iter_length_combinations(
    lengths: list[int],
    target: int,
    partial: list[int] | None = None,
) -> Iterator[LengthMultiset]:
    """Yield every length combination summing to target, sorted, with repeats.

    Args:
        lengths: Candidate lengths in scan order.
        target: Sum to reach.
        partial: Lengths chosen so far on this branch.

    Yields:
        Sorted tuples; a multiset is yielded once per path that reaches it.
    """
    partial = partial or []
    total = sum(partial)

    if total == target:
        yield tuple(sorted(partial))

    if total >= target:
        return

    for length in lengths:
        yield from iter_length_combinations(lengths, target, partial + [length])


def enumerate_partitions(
    candidate_lengths: Iterable[int],
    target: int,
) -> set[LengthMultiset]:
    """Find the distinct length multisets summing to target.

    Args:
        candidate_lengths: Lengths available as ingredients. The target
            itself and non-positive lengths are never used.
        target: Target word length.

    Returns:
        Set of sorted length tuples.
    """
    lengths = sorted(
        length for length in set(candidate_lengths)
        if 0 < length != target
    )
    multisets = set(iter_length_combinations(lengths, target))
    logger.debug(
        "Found %d length multisets for target %d from lengths %s",
        len(multisets), target, lengths,
    )
    return multisets


def find_length_combinations(index: LengthIndex, target: int) -> set[LengthMultiset]:
    """Find the length multisets for a target using the index's lengths."""
    return enumerate_partitions(index.lengths_excluding(target), target)
