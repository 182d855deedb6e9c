"""Poet: folds line generation across a syllable pattern."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from ._fill import exact_fill
from ._line import _lines, generate_line
from ._types import ComposedPoem, LinePartition, Poem, Strategy
from ._validate import resolve_strategy, validate_count, validate_counts

if TYPE_CHECKING:
    from ._index import SyllableIndex

logger = logging.getLogger(__name__)

HAIKU_PATTERN: tuple[int, ...] = (5, 7, 5)


class Poet:
    """Search engine over one SyllableIndex. Every result stream is lazy."""

    __slots__ = ("_index", "_strategy")

    def __init__(
        self,
        index: SyllableIndex,
        *,
        strategy: Strategy | str = Strategy.EXHAUSTIVE,
    ) -> None:
        self._index = index
        self._strategy = resolve_strategy(strategy)

    @property
    def index(self) -> SyllableIndex:
        return self._index

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    # -- Single-line API --

    def fill(
        self, pool: Iterable[str] | None, required: Sequence[int]
    ) -> Iterator[Poem]:
        """Every distinct-word poem matching ``required`` slot by slot."""
        return exact_fill(self._index, self._pool(pool), required)

    def line(self, pool: Iterable[str] | None, target: int) -> Iterator[Poem]:
        """Every word sequence from ``pool`` totalling ``target`` syllables."""
        return generate_line(
            self._index, self._pool(pool), target, strategy=self._strategy,
        )

    # -- Whole-poem API --

    def compose(
        self,
        pattern: Sequence[int] = HAIKU_PATTERN,
        pool: Iterable[str] | None = None,
    ) -> Iterator[ComposedPoem]:
        """Yield every poem following ``pattern``, one line per element.

        Each line draws from what the previous lines left in the pool, so
        no word is used twice in a poem. A line with no realization prunes
        its branch; an empty pattern yields one empty poem.

        Raises:
            PatternError: If a pattern element is not a non-negative int.
        """
        targets = validate_counts(pattern, "pattern element")
        words = self._pool(pool)
        logger.debug(
            "composing pattern %s from %d words (%s)",
            targets, len(words), self._strategy.value,
        )
        return self._compose(words, targets, (), ())

    def _compose(
        self,
        pool: Poem,
        targets: tuple[int, ...],
        lines: tuple[Poem, ...],
        parts: tuple[LinePartition, ...],
    ) -> Iterator[ComposedPoem]:
        if not targets:
            yield ComposedPoem(lines=lines, partitions=parts)
            return

        head, tail = targets[0], targets[1:]
        for partition, line in _lines(self._index, pool, head, self._strategy):
            remaining = self._index.remove(pool, line)
            yield from self._compose(
                remaining, tail, lines + (line,), parts + (partition,),
            )

    def poems(
        self,
        pattern: Sequence[int] = HAIKU_PATTERN,
        pool: Iterable[str] | None = None,
    ) -> Iterator[Poem]:
        """Like ``compose`` but yields each poem as its flat word tuple."""
        return (poem.words for poem in self.compose(pattern, pool))

    def haikus(self, pool: Iterable[str] | None = None) -> Iterator[Poem]:
        return self.poems(HAIKU_PATTERN, pool)

    def take(
        self,
        n: int,
        pattern: Sequence[int] = HAIKU_PATTERN,
        pool: Iterable[str] | None = None,
    ) -> list[Poem]:
        """First ``n`` poems; stops searching once they are found."""
        n = validate_count(n, "n")
        return list(itertools.islice(self.poems(pattern, pool), n))

    def _pool(self, pool: Iterable[str] | None) -> Poem:
        if pool is None:
            return self._index.words
        return self._index.usable(pool)

    def __repr__(self) -> str:
        return f"Poet({self._index!r}, strategy={self._strategy.value!r})"
