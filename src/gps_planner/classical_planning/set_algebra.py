"""Define set operations over ordered sequences of conditions.

Conditions are only required to support equality comparison, so these functions operate on
sequences (not Python sets) and preserve the order of their inputs.
"""

from __future__ import annotations

from typing import Any, Sequence

Condition = Any
"""An atomic fact about the world, compared by value equality (e.g., a string)."""


def contains(conditions: Sequence[Condition], condition: Condition) -> bool:
    """Evaluate whether the given condition equals some element of a sequence."""
    return any(c == condition for c in conditions)


def difference(set_a: Sequence[Condition], set_b: Sequence[Condition]) -> list[Condition]:
    """Compute the elements of one sequence that are absent from another.

    :param set_a: Sequence whose elements are kept (in order) unless present in set_b
    :param set_b: Sequence of elements to be excluded from the result
    :return: List of the elements of set_a not in set_b, in their original order
    """
    return [c for c in set_a if not contains(set_b, c)]


def union(set_a: Sequence[Condition], set_b: Sequence[Condition]) -> list[Condition]:
    """Compute the ordered union of two sequences.

    :param set_a: Sequence whose elements begin the result, in order
    :param set_b: Sequence whose elements are appended unless already in the result
    :return: List of the elements of set_a followed by the novel elements of set_b
    """
    result = list(set_a)
    for c in set_b:
        if not contains(result, c):
            result.append(c)
    return result
