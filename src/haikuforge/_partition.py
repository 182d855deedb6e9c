"""Subset-sum partitioning of a line target into ordered per-word counts.

A line of ``target`` syllables may be built from several words. The
partitioner picks every sub-selection of pool positions whose counts sum to
the target, orders each selection every possible way and drops value
sequences already produced. Both stages are exponential (subsets) and
factorial (orderings) in the worst case, so everything here is a generator.
"""

from __future__ import annotations

import itertools
from collections import Counter
from collections.abc import Iterable, Iterator

from ._types import LinePartition, Strategy
from ._validate import resolve_strategy, validate_count, validate_counts


def subset_sums(counts: Iterable[int], target: int) -> Iterator[LinePartition]:
    """Yield the values of every positional subset of ``counts`` summing to ``target``.

    Equal values at different positions are different subsets, so the same
    value tuple can be yielded more than once.
    """
    values = validate_counts(counts)
    target = validate_count(target, "target")
    return _subsets(values, target)


def _subsets(values: tuple[int, ...], target: int) -> Iterator[LinePartition]:
    for size in range(len(values) + 1):
        for combo in itertools.combinations(values, size):
            if sum(combo) == target:
                yield combo


def distinct_permutations(values: Iterable[int]) -> Iterator[LinePartition]:
    """Yield each distinct ordering of the multiset ``values`` once, ascending."""
    histogram = tuple(sorted(Counter(values).items()))
    size = sum(n for _, n in histogram)
    return _permute(histogram, size)


def _permute(
    histogram: tuple[tuple[int, int], ...], size: int
) -> Iterator[LinePartition]:
    if size == 0:
        yield ()
        return
    for i, (value, left) in enumerate(histogram):
        if not left:
            continue
        rest = histogram[:i] + ((value, left - 1),) + histogram[i + 1:]
        for tail in _permute(rest, size - 1):
            yield (value, *tail)


def partitions(
    counts: Iterable[int],
    target: int,
    *,
    strategy: Strategy | str = Strategy.EXHAUSTIVE,
) -> Iterator[LinePartition]:
    """Yield every distinct ordered count sequence drawn from ``counts`` summing to ``target``.

    Args:
        counts: One syllable count per available word instance.
        target: Syllables the line must total.
        strategy: ``EXHAUSTIVE`` enumerates positional subsets and all their
            orderings, deduplicating as it goes. ``PRUNED`` walks the value
            histogram with sum-bound pruning instead; it yields the same set
            of sequences, possibly in a different order.

    Raises:
        PatternError: If a count or the target is negative, or the strategy
            is unknown.
    """
    values = validate_counts(counts)
    target = validate_count(target, "target")
    if resolve_strategy(strategy) is Strategy.PRUNED:
        return _pruned(values, target)
    return _exhaustive(values, target)


def _exhaustive(values: tuple[int, ...], target: int) -> Iterator[LinePartition]:
    seen: set[LinePartition] = set()
    for subset in _subsets(values, target):
        for ordering in itertools.permutations(subset):
            if ordering not in seen:
                seen.add(ordering)
                yield ordering


def _pruned(values: tuple[int, ...], target: int) -> Iterator[LinePartition]:
    histogram = tuple(sorted(Counter(values).items()))
    # suffix[i]: largest sum still reachable from histogram[i:]
    suffix = [0] * (len(histogram) + 1)
    for i in range(len(histogram) - 1, -1, -1):
        value, n = histogram[i]
        suffix[i] = suffix[i + 1] + value * n

    for multiset in _multisets(histogram, tuple(suffix), target, 0):
        yield from distinct_permutations(multiset)


def _multisets(
    histogram: tuple[tuple[int, int], ...],
    suffix: tuple[int, ...],
    remaining: int,
    start: int,
) -> Iterator[LinePartition]:
    if remaining > suffix[start]:
        return
    if start == len(histogram):
        yield ()
        return
    value, available = histogram[start]
    for k in range(available + 1):
        spent = value * k
        if spent > remaining:
            break
        for rest in _multisets(histogram, suffix, remaining - spent, start + 1):
            yield (value,) * k + rest
