"""Tests for length partition enumeration."""

from compoundfinder.schema import LengthIndex
from compoundfinder.search.partitions import (
    enumerate_partitions,
    find_length_combinations,
    iter_length_combinations,
)


class TestEnumeratePartitions:
    """Tests for enumerate_partitions."""

    def test_generates_correct_combinations(self):
        """Test every distinct multiset is found exactly once."""
        combinations = enumerate_partitions({1, 2, 3}, 4)

        assert len(combinations) == 4
        assert (1, 1, 1, 1) in combinations
        assert (2, 2) in combinations
        assert (1, 3) in combinations
        assert (1, 1, 2) in combinations

    def test_results_are_sorted_and_sum_to_target(self):
        """Test every multiset is canonical and exact."""
        for multiset in enumerate_partitions({1, 2, 3, 5}, 7):
            assert list(multiset) == sorted(multiset)
            assert sum(multiset) == 7

    def test_target_length_excluded(self):
        """Test the target length is never used even if passed in."""
        combinations = enumerate_partitions({1, 4}, 4)
        assert combinations == {(1, 1, 1, 1)}

    def test_non_positive_lengths_ignored(self):
        """Test zero-length candidates do not recurse forever."""
        combinations = enumerate_partitions({0, 2}, 4)
        assert combinations == {(2, 2)}

    def test_no_partition(self):
        """Test unreachable target gives an empty set."""
        assert enumerate_partitions({3}, 4) == set()
        assert enumerate_partitions(set(), 4) == set()

    def test_scan_order_irrelevant(self):
        """Test candidate order does not change the result set."""
        assert enumerate_partitions([3, 1, 2], 5) == enumerate_partitions([1, 2, 3], 5)


class TestIterLengthCombinations:
    """Tests for the raw depth-first search."""

    def test_same_multiset_found_along_several_paths(self):
        """Test [1, 2] and [2, 1] are both reached before dedup."""
        found = list(iter_length_combinations([1, 2], 3))
        assert found.count((1, 2)) == 2
        assert found.count((1, 1, 1)) == 1
        assert len(found) == 3


class TestFindLengthCombinations:
    """Tests for find_length_combinations."""

    def test_uses_index_lengths(self):
        """Test candidate lengths come from the index minus the target."""
        index = LengthIndex(buckets={
            1: ["a", "b", "c"],
            2: ["de", "fg"],
            3: ["dog", "cat"],
        })
        combinations = find_length_combinations(index, 4)
        assert combinations == {(1, 1, 1, 1), (1, 1, 2), (1, 3), (2, 2)}

    def test_target_bucket_not_an_ingredient(self):
        """Test words of the target length never split the target."""
        index = LengthIndex.build({"ab", "abab", "cdcd"})
        assert find_length_combinations(index, 4) == {(2, 2)}
