"""haikuforge: enumerate every poem a word list can make for a syllable pattern."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from ._errors import (
    HaikuForgeError,
    LexiconChecksumError,
    LexiconError,
    LexiconVersionError,
    PatternError,
)
from ._fill import exact_fill
from ._index import Oracle, SyllableIndex
from ._lexicon import Lexicon
from ._line import generate_line, generate_line_partitioned
from ._loader import load_lexicon, save_lexicon
from ._logging import configure_logging
from ._partition import distinct_permutations, partitions, subset_sums
from ._poet import HAIKU_PATTERN, Poet
from ._types import ComposedPoem, DuplicatePolicy, LinePartition, Poem, Strategy

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "build",
    "fill_in_poem",
    "generate_all_haikus",
    "ComposedPoem",
    "DuplicatePolicy",
    "HAIKU_PATTERN",
    "HaikuForgeError",
    "Lexicon",
    "LexiconChecksumError",
    "LexiconError",
    "LexiconVersionError",
    "LinePartition",
    "Oracle",
    "PatternError",
    "Poem",
    "Poet",
    "Strategy",
    "SyllableIndex",
    "configure_logging",
    "distinct_permutations",
    "exact_fill",
    "generate_line",
    "generate_line_partitioned",
    "load_lexicon",
    "partitions",
    "save_lexicon",
    "subset_sums",
]


def build(
    vocabulary: Iterable[str],
    oracle: Oracle,
    *,
    strategy: Strategy | str = Strategy.EXHAUSTIVE,
    duplicates: DuplicatePolicy | str = DuplicatePolicy.COLLAPSE,
) -> Poet:
    """Index ``vocabulary`` with ``oracle`` and return a ready-to-use Poet.

    Args:
        vocabulary: Candidate words, in the order results should favour.
        oracle: Returns a word's minimum syllable count, or None if unknown.
            A ``Lexicon`` works as-is.
        strategy: Line partitioning strategy, see ``partitions``.
        duplicates: Meaning of repeated spellings in ``vocabulary``.
    """
    index = SyllableIndex.build(vocabulary, oracle, duplicates=duplicates)
    return Poet(index, strategy=strategy)


def fill_in_poem(
    vocabulary: Iterable[str], required: Sequence[int], oracle: Oracle
) -> Iterator[Poem]:
    """Every distinct-word poem whose i-th word has ``required[i]`` syllables."""
    return build(vocabulary, oracle).fill(None, required)


def generate_all_haikus(vocabulary: Iterable[str], oracle: Oracle) -> Iterator[Poem]:
    """Every 5-7-5 haiku from ``vocabulary``, as flat word tuples."""
    return build(vocabulary, oracle).haikus()
