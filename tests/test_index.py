"""Tests for SyllableIndex construction and lookups."""

import pytest

from haikuforge import DuplicatePolicy, PatternError, SyllableIndex

from conftest import SYLLABLES, oracle


def test_buckets_group_by_count(index):
    buckets = index.buckets
    assert buckets[1] == ("moon", "pond", "frog")
    assert buckets[3] == ("flowering", "cabinet", "evening", "reflection")
    assert buckets[5] == ("photosynthesis",)
    assert sum(len(ws) for ws in buckets.values()) == len(SYLLABLES)


def test_unknown_words_dropped():
    index = SyllableIndex.build(["moon", "xyzzy", "pond", "plugh"], oracle)
    assert index.words == ("moon", "pond")
    assert "xyzzy" not in index
    assert index.count("xyzzy") is None


def test_empty_vocabulary():
    index = SyllableIndex.build([], oracle)
    assert len(index) == 0
    assert index.buckets == {}
    assert index.bucket(5) == ()


def test_oracle_called_once_per_distinct_word():
    calls = []

    def counting_oracle(word):
        calls.append(word)
        return SYLLABLES.get(word)

    SyllableIndex.build(
        ["moon", "moon", "xyzzy", "xyzzy", "pond"], counting_oracle,
        duplicates="instances",
    )
    assert calls == ["moon", "xyzzy", "pond"]


def test_duplicates_collapse_by_default():
    index = SyllableIndex.build(["moon", "pond", "moon"], oracle)
    assert index.duplicates is DuplicatePolicy.COLLAPSE
    assert index.words == ("moon", "pond")


def test_duplicates_as_instances():
    index = SyllableIndex.build(
        ["moon", "pond", "moon"], oracle, duplicates=DuplicatePolicy.INSTANCES,
    )
    assert index.words == ("moon", "pond", "moon")
    # Buckets list each spelling once
    assert index.bucket(1) == ("moon", "pond")


def test_usable_filters_and_collapses(index):
    assert index.usable(["frog", "xyzzy", "frog", "moon"]) == ("frog", "moon")
    assert index.counts(["frog", "silent", "frog"]) == (1, 2)


def test_negative_oracle_result_rejected():
    with pytest.raises(PatternError, match="must be >= 0"):
        SyllableIndex.build(["moon"], lambda word: -1)


def test_unknown_duplicate_policy():
    with pytest.raises(PatternError, match="unknown duplicate policy"):
        SyllableIndex.build(["moon"], oracle, duplicates="sometimes")


def test_repr(index):
    assert "SyllableIndex(words=12" in repr(index)


def test_remove_collapse(index):
    pool = ["moon", "pond", "frog", "moon"]
    assert index.remove(pool, ["pond"]) == ("moon", "frog")
    assert index.remove(pool, ["moon", "xyzzy"]) == ("pond", "frog")
    assert index.remove(pool, []) == ("moon", "pond", "frog")


def test_remove_instances_drops_one_occurrence():
    index = SyllableIndex.build(
        ["moon", "pond", "moon"], oracle, duplicates=DuplicatePolicy.INSTANCES,
    )
    assert index.remove(index.words, ["moon"]) == ("pond", "moon")
    assert index.remove(index.words, ["moon", "moon"]) == ("pond",)
