"""Tests for word sequence construction."""

from compoundfinder.schema import LengthIndex
from compoundfinder.search.combinations import (
    build_sequences,
    length_frequency,
    sequences_for_multiset,
)


class TestLengthFrequency:
    """Tests for length_frequency."""

    def test_counts(self):
        """Test counts per length."""
        assert length_frequency((1, 1, 1, 3)) == {1: 3, 3: 1}

    def test_empty(self):
        """Test empty multiset."""
        assert length_frequency(()) == {}


class TestBuildSequences:
    """Tests for build_sequences."""

    def setup_method(self):
        self.index = LengthIndex(buckets={
            1: ["a", "b", "c"],
            3: ["dog", "cat"],
        })

    def test_returns_valid_combinations(self):
        """Test every sequence has the target length."""
        combinations = list(build_sequences({1: 3, 3: 1}, self.index, 6))

        assert combinations
        for result in combinations:
            assert sum(len(word) for word in result) == 6

    def test_every_ordering_once(self):
        """Test all orderings of all word choices, without duplicates."""
        combinations = list(build_sequences({1: 3, 3: 1}, self.index, 6))

        # 4 slots for the long word, 2 long words, 3 choices per short slot
        assert len(combinations) == 4 * 2 * 3 ** 3
        assert len(set(combinations)) == len(combinations)
        assert ("dog", "a", "b", "c") in combinations
        assert ("a", "dog", "b", "c") in combinations
        assert ("c", "b", "a", "cat") in combinations

    def test_words_repeat_across_slots(self):
        """Test a word can fill more than one slot of its length."""
        combinations = list(build_sequences({1: 3, 3: 1}, self.index, 6))
        assert ("a", "a", "a", "dog") in combinations

        index = LengthIndex(buckets={2: ["ab"], 4: ["abab"]})
        assert list(build_sequences({2: 2}, index, 4)) == [("ab", "ab")]

    def test_frequency_not_mutated(self):
        """Test the caller's frequency map is left untouched."""
        frequency = {1: 3, 3: 1}
        list(build_sequences(frequency, self.index, 6))
        assert frequency == {1: 3, 3: 1}

    def test_early_stop(self):
        """Test a partially consumed generator can be closed cleanly."""
        frequency = {1: 3, 3: 1}
        sequences = build_sequences(frequency, self.index, 6)
        first = next(sequences)
        sequences.close()

        assert sum(len(word) for word in first) == 6
        assert frequency == {1: 3, 3: 1}

    def test_lazy(self):
        """Test sequences are produced on demand."""
        sequences = build_sequences({1: 3, 3: 1}, self.index, 6)
        assert next(sequences) == ("a", "a", "a", "dog")

    def test_missing_bucket(self):
        """Test a required length with no words yields nothing."""
        assert list(build_sequences({5: 1}, self.index, 5)) == []

    def test_independent_calls(self):
        """Test two interleaved expansions do not share state."""
        frequency = {1: 3, 3: 1}
        first = build_sequences(frequency, self.index, 6)
        second = build_sequences(frequency, self.index, 6)

        interleaved = []
        for left, right in zip(first, second):
            interleaved.append(left)
            assert left == right

        assert len(interleaved) == 216


class TestSequencesForMultiset:
    """Tests for sequences_for_multiset."""

    def test_matches_build_sequences(self):
        """Test the multiset shortcut gives the same sequences."""
        index = LengthIndex(buckets={1: ["a", "b"], 2: ["cd"]})
        assert list(sequences_for_multiset((1, 1, 2), index, 4)) == list(
            build_sequences({1: 2, 2: 1}, index, 4)
        )
