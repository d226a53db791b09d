"""Comparison sorts: bubble, shaker, insertion, selection and quicksort.

Every function takes any iterable of mutually comparable items and
returns a new ascending list. The input is never modified.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "bubble_sort",
    "bubble_sort_last_swap",
    "shaker_sort",
    "insertion_sort",
    "selection_sort",
    "quick_sort",
    "random_pivot_quick_sort",
]


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Plain bubble sort: each pass bubbles the largest item to the end."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def bubble_sort_last_swap(values: Iterable[T]) -> list[T]:
    """Bubble sort that skips the prefix already fixed by the last swap.

    Each pass runs from the back towards the front; the position of the
    last exchange marks where the next pass may stop.
    """
    items = list(values)
    n = len(items)
    done = 0
    while done < n - 1:
        last = n - 1
        for j in range(n - 1, done, -1):
            if items[j - 1] > items[j]:
                items[j - 1], items[j] = items[j], items[j - 1]
                last = j
        done = last
    return items


def shaker_sort(values: Iterable[T]) -> list[T]:
    """Cocktail shaker sort, alternating backward and forward passes."""
    items = list(values)
    left = 0
    right = len(items) - 1
    last = right
    while left < right:
        for j in range(right, left, -1):
            if items[j - 1] > items[j]:
                items[j - 1], items[j] = items[j], items[j - 1]
                last = j
        left = last

        for j in range(left, right):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                last = j
        right = last
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Insertion sort; stable."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Selection sort: repeatedly swap the smallest remaining item forward."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        least = min(range(i, n), key=items.__getitem__)
        if least != i:
            items[i], items[least] = items[least], items[i]
    return items


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with the middle element as pivot (Hoare partitioning)."""
    items = list(values)
    pending = [(0, len(items) - 1)] if items else []
    while pending:
        low, high = pending.pop()
        left, right = low, high
        pivot = items[(low + high) // 2]
        while left <= right:
            while items[left] < pivot:
                left += 1
            while items[right] > pivot:
                right -= 1
            if left <= right:
                items[left], items[right] = items[right], items[left]
                left += 1
                right -= 1
        if low < right:
            pending.append((low, right))
        if left < high:
            pending.append((left, high))
    return items


def random_pivot_quick_sort(
    values: Iterable[T], rng: Any = None
) -> list[T]:
    """Quicksort with a randomly chosen pivot.

    ``rng`` is any object with a ``randrange`` method, such as
    :class:`random.Random`; the ``random`` module is used when it is None.
    """
    chooser = random if rng is None else rng
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        begin, end = pending.pop()
        if end <= begin:
            continue
        pick = chooser.randrange(begin, end + 1)
        items[begin], items[pick] = items[pick], items[begin]
        pivot = items[begin]

        left, right = begin + 1, end
        while left <= right:
            while left <= end and items[left] < pivot:
                left += 1
            while right > begin and items[right] > pivot:
                right -= 1
            if left <= right:
                items[left], items[right] = items[right], items[left]
                left += 1
                right -= 1
        items[begin], items[right] = items[right], items[begin]

        pending.append((begin, right - 1))
        pending.append((right + 1, end))
    return items