"""Merge-based algorithms: merging sorted runs, merge sort and inversions.

Every function takes any iterable of mutually comparable items. The
input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from itertools import islice
from typing import TypeVar

T = TypeVar("T")

__all__ = ["merge_sorted", "merge_sort", "count_inversions", "kth_merge_write"]


def merge_sorted(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Merge two ascending sequences into one ascending list.

    On ties the item from ``first`` comes before the one from ``second``.
    """
    a = list(first)
    b = list(second)
    merged: list[T] = []
    pa = pb = 0
    while pa < len(a) and pb < len(b):
        if a[pa] <= b[pb]:
            merged.append(a[pa])
            pa += 1
        else:
            merged.append(b[pb])
            pb += 1
    merged.extend(a[pa:])
    merged.extend(b[pb:])
    return merged


def _merge_writes(items: MutableSequence[T], left: int, right: int) -> Iterator[T]:
    """Merge sort ``items[left:right + 1]`` in place, yielding each value
    as it is written back during a merge step.

    The left half is copied to a buffer; the right half is merged from
    where it lies. A buffered item is taken only when strictly smaller.
    """
    if left >= right:
        return
    center = (left + right) // 2
    yield from _merge_writes(items, left, center)
    yield from _merge_writes(items, center + 1, right)

    buffer = list(items[left:center + 1])
    j = 0
    i = center + 1
    k = left
    while j < len(buffer) and i <= right:
        if buffer[j] < items[i]:
            items[k] = buffer[j]
            j += 1
        else:
            items[k] = items[i]
            i += 1
        yield items[k]
        k += 1
    while j < len(buffer):
        items[k] = buffer[j]
        j += 1
        yield items[k]
        k += 1
    while i <= right:
        # Items already in their final place; each still counts as a write.
        yield items[i]
        i += 1


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return the items of ``values`` in ascending order using merge sort."""
    items = list(values)
    for _ in _merge_writes(items, 0, len(items) - 1):
        pass
    return items


def _sort_counting(items: list[T]) -> tuple[list[T], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_counting(items[:mid])
    right, right_count = _sort_counting(items[mid:])
    merged: list[T] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Iterable[T]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``."""
    _, count = _sort_counting(list(values))
    return count


def kth_merge_write(values: Iterable[T], k: int) -> T:
    """Return the value stored by the k-th write of a merge sort, from 1.

    Writes are counted over every merge step in the order the sort
    performs them. Raises ValueError when ``k`` is below 1 or the sort
    makes fewer than ``k`` writes.
    """
    if k < 1:
        raise ValueError(f"invalid k value: {k}")
    items = list(values)
    writes = _merge_writes(items, 0, len(items) - 1)
    found = next(islice(writes, k - 1, None), _MISSING)
    if found is _MISSING:
        raise ValueError(f"merge sort makes fewer than {k} writes")
    return found  # type: ignore[return-value]


_MISSING = object()