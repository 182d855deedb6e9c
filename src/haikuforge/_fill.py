"""Exact fill: backtracking assignment of distinct words to count slots."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from ._validate import validate_counts

if TYPE_CHECKING:
    from ._index import SyllableIndex
    from ._types import Poem


def exact_fill(
    index: SyllableIndex,
    pool: Iterable[str],
    required: Iterable[int],
) -> Iterator[Poem]:
    """Yield every ordered poem whose i-th word has ``required[i]`` syllables.

    Words come from ``pool`` and are pairwise distinct by pool position.
    Arguments are validated before the returned iterator is created, so a
    bad count raises here rather than on first ``next()``.
    """
    slots = validate_counts(required, "required count")
    words = index.usable(pool)

    # Pool positions per needed count, in pool order
    candidates: dict[int, list[int]] = {n: [] for n in set(slots)}
    for pos, word in enumerate(words):
        n = index.count(word)
        if n in candidates:
            candidates[n].append(pos)

    return _fill(words, candidates, slots, frozenset())


def _fill(
    words: Poem,
    candidates: dict[int, list[int]],
    slots: Sequence[int],
    used: frozenset[int],
) -> Iterator[Poem]:
    if not slots:
        yield ()
        return

    head, tail = slots[0], slots[1:]
    tried: set[str] = set()
    for pos in candidates[head]:
        if pos in used:
            continue
        word = words[pos]
        # Repeated spellings (INSTANCES policy) would yield identical poems
        if word in tried:
            continue
        tried.add(word)
        for rest in _fill(words, candidates, tail, used | {pos}):
            yield (word, *rest)
