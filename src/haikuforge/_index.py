"""SyllableIndex: vocabulary bucketed by syllable count."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Callable, Iterable

from ._types import DuplicatePolicy, Poem
from ._validate import resolve_duplicates, validate_count

logger = logging.getLogger(__name__)

Oracle = Callable[[str], int | None]


class SyllableIndex:
    """Read-only map from words to syllable counts, built once per vocabulary.

    Every search component takes the index explicitly; nothing consults a
    global dictionary.
    """

    __slots__ = ("_counts", "_words", "_buckets", "_duplicates")

    def __init__(
        self,
        counts: dict[str, int],
        words: Poem,
        duplicates: DuplicatePolicy = DuplicatePolicy.COLLAPSE,
    ) -> None:
        self._counts = counts
        self._words = words
        self._duplicates = duplicates

        buckets: dict[int, list[str]] = defaultdict(list)
        for word in dict.fromkeys(words):
            buckets[counts[word]].append(word)
        self._buckets = {n: tuple(ws) for n, ws in sorted(buckets.items())}

    @classmethod
    def build(
        cls,
        vocabulary: Iterable[str],
        oracle: Oracle,
        *,
        duplicates: DuplicatePolicy | str = DuplicatePolicy.COLLAPSE,
    ) -> SyllableIndex:
        """Query ``oracle`` once per distinct word and bucket the results.

        Words the oracle does not know are dropped. With
        ``DuplicatePolicy.INSTANCES`` each repeated occurrence of a spelling
        stays in ``words`` as its own usable instance.
        """
        policy = resolve_duplicates(duplicates)
        counts: dict[str, int] = {}
        unknown: set[str] = set()
        words: list[str] = []

        for word in vocabulary:
            if word in unknown:
                continue
            if word in counts:
                if policy is DuplicatePolicy.COLLAPSE:
                    continue
            else:
                n = oracle(word)
                if n is None:
                    unknown.add(word)
                    continue
                counts[word] = validate_count(n, f"syllable count of {word!r}")
            words.append(word)

        logger.debug(
            "indexed %d words (%d distinct), dropped %d unknown",
            len(words), len(counts), len(unknown),
        )
        return cls(counts, tuple(words), policy)

    @property
    def words(self) -> Poem:
        """Usable vocabulary in input order."""
        return self._words

    @property
    def buckets(self) -> dict[int, Poem]:
        return dict(self._buckets)

    @property
    def duplicates(self) -> DuplicatePolicy:
        return self._duplicates

    def count(self, word: str) -> int | None:
        return self._counts.get(word)

    def bucket(self, n: int) -> Poem:
        return self._buckets.get(n, ())

    def usable(self, pool: Iterable[str]) -> Poem:
        """Known words of ``pool``, collapsed per the index's duplicate policy."""
        known = [w for w in pool if w in self._counts]
        if self._duplicates is DuplicatePolicy.COLLAPSE:
            return tuple(dict.fromkeys(known))
        return tuple(known)

    def counts(self, pool: Iterable[str]) -> tuple[int, ...]:
        """Per-position syllable counts of ``usable(pool)``."""
        return tuple(self._counts[w] for w in self.usable(pool))

    def remove(self, pool: Iterable[str], words: Iterable[str]) -> Poem:
        """``usable(pool)`` minus one occurrence of each of ``words``."""
        pending = Counter(words)
        remaining: list[str] = []
        for word in self.usable(pool):
            if pending[word]:
                pending[word] -= 1
                continue
            remaining.append(word)
        return tuple(remaining)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __repr__(self) -> str:
        return (
            f"SyllableIndex(words={len(self._words)}, "
            f"buckets={sorted(self._buckets)}, "
            f"duplicates={self._duplicates.value!r})"
        )
