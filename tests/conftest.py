"""Shared fixtures for haikuforge tests."""

import itertools

import pytest

from haikuforge import Poet, SyllableIndex

SYLLABLES = {
    "flowering": 3,
    "jacaranda": 4,
    "photosynthesis": 5,
    "cabinet": 3,
    "moon": 1,
    "pond": 1,
    "frog": 1,
    "silent": 2,
    "autumn": 2,
    "evening": 3,
    "reflection": 3,
    "caterpillar": 4,
}

# Small enough for brute-force comparison of whole haikus
HAIKU_WORDS = [
    "moon", "pond", "frog", "silent", "autumn", "evening", "caterpillar",
    "photosynthesis",
]


def oracle(word):
    return SYLLABLES.get(word)


def brute_force_lines(pool, target):
    """Every ordered distinct-word sequence from ``pool`` summing to ``target``."""
    known = [w for w in dict.fromkeys(pool) if oracle(w) is not None]
    found = set()
    # every word has at least one syllable
    for size in range(min(len(known), target) + 1):
        for seq in itertools.permutations(known, size):
            if sum(oracle(w) for w in seq) == target:
                found.add(seq)
    return found


def brute_force_poems(pool, pattern):
    if not pattern:
        return {()}
    found = set()
    for line in brute_force_lines(pool, pattern[0]):
        rest = [w for w in pool if w not in line]
        for tail in brute_force_poems(rest, pattern[1:]):
            found.add(line + tail)
    return found


@pytest.fixture
def index():
    return SyllableIndex.build(SYLLABLES, oracle)


@pytest.fixture
def poet(index):
    return Poet(index)
