"""Boundary checks for syllable counts, targets and option names."""

from __future__ import annotations

from collections.abc import Iterable

from ._errors import PatternError
from ._types import DuplicatePolicy, Strategy


def validate_count(value: object, what: str = "syllable count") -> int:
    """Return ``value`` if it is a non-negative int, else raise PatternError."""
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise PatternError(f"{what} must be an int, got {value!r}")
    if value < 0:
        raise PatternError(f"{what} must be >= 0, got {value}")
    return value


def validate_counts(
    values: Iterable[object], what: str = "syllable count"
) -> tuple[int, ...]:
    """Validate every element of ``values`` and return them as a tuple."""
    return tuple(validate_count(v, what) for v in values)


def resolve_strategy(strategy: Strategy | str) -> Strategy:
    try:
        return Strategy(strategy)
    except ValueError:
        choices = ", ".join(s.value for s in Strategy)
        raise PatternError(
            f"unknown strategy {strategy!r}, expected one of: {choices}"
        ) from None


def resolve_duplicates(policy: DuplicatePolicy | str) -> DuplicatePolicy:
    try:
        return DuplicatePolicy(policy)
    except ValueError:
        choices = ", ".join(p.value for p in DuplicatePolicy)
        raise PatternError(
            f"unknown duplicate policy {policy!r}, expected one of: {choices}"
        ) from None
