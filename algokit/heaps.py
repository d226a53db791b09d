"""Heap sort built on a max-heap sift-down, and k-th smallest selection."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import TypeVar

T = TypeVar("T")

__all__ = ["sift_down", "heap_sort", "kth_smallest"]


def sift_down(values: MutableSequence[T], left: int, right: int) -> None:
    """Restore the max-heap property for ``values[left:right + 1]`` in place.

    The item at ``left`` moves down past any larger child; the subtrees
    below it must already be max-heaps.
    """
    temp = values[left]
    parent = left
    while parent < (right + 1) // 2:
        child = 2 * parent + 1
        sibling = child + 1
        if sibling <= right and values[sibling] > values[child]:
            child = sibling
        if temp >= values[child]:
            break
        values[parent] = values[child]
        parent = child
    values[parent] = temp


def heap_sort(values: Iterable[T]) -> list[T]:
    """Return the items of ``values`` in ascending order using heap sort."""
    items = list(values)
    n = len(items)
    for i in range((n - 1) // 2, -1, -1):
        sift_down(items, i, n - 1)
    for i in range(n - 1, 0, -1):
        items[0], items[i] = items[i], items[0]
        sift_down(items, 0, i - 1)
    return items


def kth_smallest(values: Iterable[T], k: int) -> T:
    """Return the k-th smallest item, counting from 1.

    Raises ValueError when ``k`` is outside ``1..len(values)``.
    """
    items = heap_sort(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"invalid k value: {k}")
    return items[k - 1]