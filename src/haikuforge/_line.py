"""Line generation: every realization of one syllable target from a pool."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ._fill import exact_fill
from ._partition import partitions
from ._types import LinePartition, Poem, Strategy
from ._validate import resolve_strategy, validate_count

if TYPE_CHECKING:
    from ._index import SyllableIndex


def generate_line_partitioned(
    index: SyllableIndex,
    pool: Iterable[str],
    target: int,
    *,
    strategy: Strategy | str = Strategy.EXHAUSTIVE,
) -> Iterator[tuple[LinePartition, Poem]]:
    """Yield ``(partition, words)`` for every way ``pool`` can total ``target``."""
    words = index.usable(pool)
    target = validate_count(target, "line target")
    strategy = resolve_strategy(strategy)
    return _lines(index, words, target, strategy)


def _lines(
    index: SyllableIndex, words: Poem, target: int, strategy: Strategy
) -> Iterator[tuple[LinePartition, Poem]]:
    for partition in partitions(index.counts(words), target, strategy=strategy):
        for line in exact_fill(index, words, partition):
            yield partition, line


def generate_line(
    index: SyllableIndex,
    pool: Iterable[str],
    target: int,
    *,
    strategy: Strategy | str = Strategy.EXHAUSTIVE,
) -> Iterator[Poem]:
    """Yield every ordered word sequence from ``pool`` totalling ``target`` syllables.

    Distinct partitions never produce the same sequence, since each word has
    exactly one count.
    """
    lines = generate_line_partitioned(index, pool, target, strategy=strategy)
    return (line for _, line in lines)
