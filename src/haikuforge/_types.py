"""Data structures for haikuforge."""

from __future__ import annotations

import enum
from dataclasses import dataclass

# A poem is the flat, ordered sequence of its words.
Poem = tuple[str, ...]
LinePartition = tuple[int, ...]


class Strategy(str, enum.Enum):
    """How line targets are split into per-word syllable counts."""

    EXHAUSTIVE = "exhaustive"  # positional subsets, every ordering, dedup
    PRUNED = "pruned"          # value multisets with sum-bound pruning


class DuplicatePolicy(str, enum.Enum):
    """What a repeated spelling in the vocabulary means."""

    COLLAPSE = "collapse"    # one usable word per spelling
    INSTANCES = "instances"  # every occurrence usable once


@dataclass(slots=True, frozen=True)
class ComposedPoem:
    lines: tuple[Poem, ...]
    partitions: tuple[LinePartition, ...]   # per-line slot counts

    @property
    def words(self) -> Poem:
        return tuple(word for line in self.lines for word in line)

    def render(self, sep: str = " ", line_sep: str = "\n") -> str:
        return line_sep.join(sep.join(line) for line in self.lines)
