"""Merge and merge sort driven by a caller-supplied "less than" predicate."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")

_EXHAUSTED = object()


def merge(first: Iterable[T], second: Iterable[T], less: Callable[[T, T], bool]) -> list[T]:
    """Merge two ordered sequences into one ordered list.

    An element of ``first`` is taken only when ``less(a, b)`` holds; on a tie
    the element of ``second`` goes first.
    """
    result: list[T] = []
    left = iter(first)
    right = iter(second)
    a = next(left, _EXHAUSTED)
    b = next(right, _EXHAUSTED)

    while a is not _EXHAUSTED and b is not _EXHAUSTED:
        if less(a, b):
            result.append(a)
            a = next(left, _EXHAUSTED)
        else:
            result.append(b)
            b = next(right, _EXHAUSTED)

    if a is not _EXHAUSTED:
        result.append(a)
        result.extend(left)
    if b is not _EXHAUSTED:
        result.append(b)
        result.extend(right)
    return result


def merge_sort(items: Iterable[T], less: Callable[[T, T], bool]) -> list[T]:
    """Return a new list holding ``items`` ordered by ``less`` (top-down merge sort)."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = len(values) // 2
    return merge(merge_sort(values[:middle], less), merge_sort(values[middle:], less), less)