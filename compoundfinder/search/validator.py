"""Parallel validation of word sequences.

A sequence is valid when its concatenation, in order and with no separator,
is one of the target-length words. Survivors are kept as Result objects and
only formatted as "w1+w2+...+wk=concat" at the edge, since words may contain
the separator or the equality marker themselves.

Two fan-out shapes are supported:
    - validate(): sequences already materialized, checked in chunks
    - find_valid_combinations(): one task per length multiset; each task
      expands its multiset with its own frequency map, then checks it

Workers share only read-only inputs (the index and a frozenset of target
words). Results are merged into a set in the calling process, so the
outcome does not depend on worker count or completion order.
"""

import logging
from concurrent.futures import (
    Executor,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from functools import partial
from itertools import islice
from typing import Callable, Iterable, Iterator, Optional

from tqdm import tqdm

from .. import config as cfg
from ..schema import EQUALS, SEPARATOR, LengthIndex, LengthMultiset, Result
from .combinations import sequences_for_multiset

logger = logging.getLogger(__name__)


def progress(iterable, desc: str = "", total: Optional[int] = None, disable: bool = False):
    return tqdm(
        iterable,
        desc=desc,
        total=total,
        disable=disable,
        ascii=" ▖▘▝▗▚▞█",
        bar_format="{desc}: |{bar:20}| {n_fmt}/{total_fmt}",
    )


def format_result(
    words: Iterable[str],
    concatenation: str,
    separator: str = SEPARATOR,
    equals: str = EQUALS,
) -> str:
    """Render a result as "w1+w2+...=concat"."""
    return Result(tuple(words), concatenation).format(separator, equals)


def format_results(
    results: Iterable[Result],
    separator: str = SEPARATOR,
    equals: str = EQUALS,
) -> set[str]:
    """Render every result with the given markers."""
    return {result.format(separator, equals) for result in results}


def match_sequence(words: Iterable[str], target_words: frozenset[str]) -> Optional[Result]:
    """Check one word sequence against the target words.

    Args:
        words: Ordered ingredient words.
        target_words: Words of the target length.

    Returns:
        Result, or None if the concatenation is not a target word.
    """
    words = tuple(words)
    combined = "".join(words)
    if combined in target_words:
        return Result(words, combined)
    return None


def check_sequence(
    words: Iterable[str],
    target_words: frozenset[str],
    separator: str = SEPARATOR,
    equals: str = EQUALS,
) -> Optional[str]:
    """Check one word sequence, returning the formatted result or None."""
    result = match_sequence(words, target_words)
    if result is None:
        return None
    return result.format(separator, equals)


def match_sequences(
    sequences: Iterable[Iterable[str]],
    target_words: frozenset[str],
) -> set[Result]:
    """Check a batch of sequences, returning the survivors."""
    found = set()
    for words in sequences:
        result = match_sequence(words, target_words)
        if result is not None:
            found.add(result)
    return found


def expand_and_match(
    multiset: LengthMultiset,
    index: LengthIndex,
    target: int,
    target_words: frozenset[str],
) -> set[Result]:
    """Expand one length multiset and check every sequence it produces."""
    return match_sequences(sequences_for_multiset(multiset, index, target), target_words)


def _chunks(items: Iterable, size: int) -> Iterator[list]:
    iterator = iter(items)
    while True:
        chunk = list(islice(iterator, size))
        if not chunk:
            return
        yield chunk


def make_executor(executor: str, workers: int) -> Executor:
    """Create a process or thread pool with the given worker count."""
    if executor == "process":
        return ProcessPoolExecutor(max_workers=workers)
    if executor == "thread":
        return ThreadPoolExecutor(max_workers=workers)
    raise ValueError(f"Unknown executor: {executor}. Available: {cfg.EXECUTORS}")


def _fan_out(
    task: Callable[..., set[Result]],
    inputs: list,
    workers: int,
    executor: str,
    parallel: bool,
    show_progress: bool,
    desc: str,
) -> set[Result]:
    """Run task over inputs and union the result sets."""
    results: set[Result] = set()

    if not parallel or workers <= 1 or len(inputs) <= 1:
        logger.debug("%s: %d tasks, serial", desc, len(inputs))
        for item in progress(inputs, desc=desc, disable=not show_progress):
            results.update(task(item))
        return results

    logger.debug("%s: %d tasks on %d %s workers", desc, len(inputs), workers, executor)
    with make_executor(executor, workers) as pool:
        futures = [pool.submit(task, item) for item in inputs]
        for future in progress(
            as_completed(futures),
            desc=desc,
            total=len(futures),
            disable=not show_progress,
        ):
            results.update(future.result())

    return results


def validate_results(
    sequences: Iterable[Iterable[str]],
    target_words: Iterable[str],
    workers: Optional[int] = None,
    executor: Optional[str] = None,
    parallel: Optional[bool] = None,
    chunk_size: Optional[int] = None,
    show_progress: bool = False,
) -> set[Result]:
    """Validate materialized word sequences in parallel.

    Args:
        sequences: Word sequences to check.
        target_words: Words of the target length.
        workers: Worker count (0 = all cores; None = config default).
        executor: "process" or "thread" (None = config default).
        parallel: False to check in the calling thread.
        chunk_size: Sequences per task.
        show_progress: Show a progress bar over tasks.

    Returns:
        Set of Result (empty when nothing validates).
    """
    workers = cfg.resolve_workers(cfg.default_workers() if workers is None else workers)
    executor = executor or cfg.default_executor()
    parallel = cfg.default_parallel() if parallel is None else parallel
    chunk_size = chunk_size or cfg.default_chunk_size()

    task = partial(match_sequences, target_words=frozenset(target_words))
    chunks = list(_chunks(sequences, chunk_size))
    return _fan_out(task, chunks, workers, executor, parallel, show_progress, "Validating")


def validate(
    sequences: Iterable[Iterable[str]],
    target_words: Iterable[str],
    workers: Optional[int] = None,
    executor: Optional[str] = None,
    parallel: Optional[bool] = None,
    chunk_size: Optional[int] = None,
    separator: str = SEPARATOR,
    equals: str = EQUALS,
    show_progress: bool = False,
) -> set[str]:
    """Validate materialized word sequences, returning formatted results."""
    results = validate_results(
        sequences,
        target_words,
        workers=workers,
        executor=executor,
        parallel=parallel,
        chunk_size=chunk_size,
        show_progress=show_progress,
    )
    return format_results(results, separator, equals)


def find_results(
    index: LengthIndex,
    target: int,
    multisets: Iterable[LengthMultiset],
    workers: Optional[int] = None,
    executor: Optional[str] = None,
    parallel: Optional[bool] = None,
    show_progress: bool = False,
) -> set[Result]:
    """Expand and validate every length multiset, one task per multiset.

    Each task builds its own length frequency map, so no mutable search
    state is shared between concurrently running expansions.

    Args:
        index: Word buckets by length.
        target: Target word length.
        multisets: Length multisets to expand.
        workers: Worker count (0 = all cores; None = config default).
        executor: "process" or "thread" (None = config default).
        parallel: False to run in the calling thread.
        show_progress: Show a progress bar over multisets.

    Returns:
        Set of Result (empty when nothing validates).
    """
    workers = cfg.resolve_workers(cfg.default_workers() if workers is None else workers)
    executor = executor or cfg.default_executor()
    parallel = cfg.default_parallel() if parallel is None else parallel

    task = partial(
        expand_and_match,
        index=index,
        target=target,
        target_words=index.target_words(target),
    )
    # Sorted so that serial runs visit multisets in a repeatable order
    inputs = sorted(multisets)
    return _fan_out(task, inputs, workers, executor, parallel, show_progress, "Combining")


def find_valid_combinations(
    index: LengthIndex,
    target: int,
    multisets: Iterable[LengthMultiset],
    workers: Optional[int] = None,
    executor: Optional[str] = None,
    parallel: Optional[bool] = None,
    separator: str = SEPARATOR,
    equals: str = EQUALS,
    show_progress: bool = False,
) -> set[str]:
    """Expand and validate every length multiset, returning formatted results."""
    results = find_results(
        index,
        target,
        multisets,
        workers=workers,
        executor=executor,
        parallel=parallel,
        show_progress=show_progress,
    )
    return format_results(results, separator, equals)
