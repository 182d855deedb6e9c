"""Lexicon: a syllable dictionary usable as the index oracle."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from ._errors import PatternError
from ._validate import validate_count

logger = logging.getLogger(__name__)

_VARIANT_RE = re.compile(r"\(\d+\)$")
_STRESS_RE = re.compile(r"\d$")


def _normalize(word: str) -> str:
    return word.strip().lower()


def count_stressed(phones: Iterable[str]) -> int:
    """Syllables in a CMU pronunciation: phonemes carrying a stress digit."""
    return sum(1 for phone in phones if _STRESS_RE.search(phone))


class Lexicon:
    """Minimum syllable count per word. Calling it looks a word up."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, int] | None = None) -> None:
        self._entries: dict[str, int] = {}
        for word, n in (entries or {}).items():
            if not isinstance(word, str):
                raise PatternError(f"lexicon words must be str, got {word!r}")
            key = _normalize(word)
            if not key:
                raise PatternError("lexicon words must not be empty")
            n = validate_count(n, f"syllable count of {word!r}")
            prev = self._entries.get(key)
            self._entries[key] = n if prev is None else min(prev, n)

    @classmethod
    def from_cmudict(cls, lines: Iterable[str]) -> Lexicon:
        """Parse CMU Pronouncing Dictionary text.

        Lines look like ``WORD  PH1 PH2 ...``; ``;;;`` lines are comments and
        ``WORD(2)`` marks an alternate pronunciation. A word keeps the fewest
        syllables among its pronunciations.
        """
        counts: dict[str, int] = {}
        for line in lines:
            entry = line.strip()
            if not entry or entry.startswith(";;;"):
                continue
            raw_word, *phones = entry.split()
            if not phones:
                continue
            word = _normalize(_VARIANT_RE.sub("", raw_word))
            if not word:
                continue
            n = count_stressed(phones)
            prev = counts.get(word)
            counts[word] = n if prev is None else min(prev, n)
        return cls(counts)

    @classmethod
    def from_cmudict_file(cls, path: Path | str) -> Lexicon:
        path = Path(path)
        with open(path, encoding="latin-1") as f:
            lexicon = cls.from_cmudict(f)
        logger.info("loaded %d words from %s", len(lexicon), path)
        return lexicon

    def lookup(self, word: str) -> int | None:
        """Minimum syllable count of ``word``, or None if it is unknown."""
        return self._entries.get(_normalize(word))

    __call__ = lookup

    def items(self) -> Iterator[tuple[str, int]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and _normalize(word) in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lexicon):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Lexicon({len(self._entries)} words)"
