"""Combinatorial search module.

Three stages:
- Length partitions: multisets of ingredient lengths summing to the target
- Word sequences: every ordered realization of one length multiset
- Validation: parallel concatenation check against target-length words
"""

from .partitions import enumerate_partitions, find_length_combinations
from .combinations import build_sequences, length_frequency, sequences_for_multiset
from .validator import (
    check_sequence,
    find_results,
    find_valid_combinations,
    format_result,
    format_results,
    match_sequence,
    validate,
    validate_results,
)

__all__ = [
    "enumerate_partitions",
    "find_length_combinations",
    "build_sequences",
    "length_frequency",
    "sequences_for_multiset",
    "check_sequence",
    "find_results",
    "find_valid_combinations",
    "format_result",
    "format_results",
    "match_sequence",
    "validate",
    "validate_results",
]
