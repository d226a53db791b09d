import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.simple_sorts import (
    bubble_sort,
    bubble_sort_last_swap,
    insertion_sort,
    quick_sort,
    random_pivot_quick_sort,
    selection_sort,
    shaker_sort,
)

SOURCE_SAMPLES = [
    [5, 1, 6, 3, 4, 2, 7],
    [21, 10, 12, 20, 25, 13, 15, 22],
]


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert bubble_sort_last_swap(values) == expected
    assert shaker_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert quick_sort(values) == expected
    assert random_pivot_quick_sort(values, random.Random(7)) == expected


@pytest.mark.parametrize("sample", SOURCE_SAMPLES)
def test_source_samples(sample):
    expected = sorted(sample)
    assert bubble_sort(sample) == expected
    assert bubble_sort_last_swap(sample) == expected
    assert shaker_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert quick_sort(sample) == expected
    assert random_pivot_quick_sort(sample, random.Random(7)) == expected


def test_source_sample_values():
    assert quick_sort([5, 1, 6, 3, 4, 2, 7]) == [1, 2, 3, 4, 5, 6, 7]
    assert bubble_sort([21, 10, 12, 20, 25, 13, 15, 22]) == [
        10, 12, 13, 15, 20, 21, 22, 25,
    ]


def test_input_left_untouched():
    original = [3, 1, 2]
    copy = list(original)
    results = [
        bubble_sort(original),
        bubble_sort_last_swap(original),
        shaker_sort(original),
        insertion_sort(original),
        selection_sort(original),
        quick_sort(original),
        random_pivot_quick_sort(original, random.Random(7)),
    ]
    assert original == copy
    assert all(result == [1, 2, 3] for result in results)


def test_empty_and_single():
    for values, expected in (([], []), ([42], [42])):
        assert bubble_sort(values) == expected
        assert bubble_sort_last_swap(values) == expected
        assert shaker_sort(values) == expected
        assert insertion_sort(values) == expected
        assert selection_sort(values) == expected
        assert quick_sort(values) == expected
        assert random_pivot_quick_sort(values, random.Random(7)) == expected


def test_all_equal_values():
    values = [2] * 9
    assert bubble_sort(values) == values
    assert bubble_sort_last_swap(values) == values
    assert shaker_sort(values) == values
    assert insertion_sort(values) == values
    assert selection_sort(values) == values
    assert quick_sort(values) == values
    assert random_pivot_quick_sort(values, random.Random(7)) == values


def test_accepts_generator():
    source = (9, 3, 6)
    expected = [3, 6, 9]
    assert bubble_sort(x for x in source) == expected
    assert bubble_sort_last_swap(x for x in source) == expected
    assert shaker_sort(x for x in source) == expected
    assert insertion_sort(x for x in source) == expected
    assert selection_sort(x for x in source) == expected
    assert quick_sort(x for x in source) == expected
    assert random_pivot_quick_sort((x for x in source), random.Random(7)) == expected


@given(st.lists(st.integers(), max_size=60), st.integers())
def test_random_pivot_any_seed(values, seed):
    assert random_pivot_quick_sort(values, random.Random(seed)) == sorted(values)


def test_random_pivot_default_rng():
    values = [4, 4, 1, 9, 0, 4, 7]
    assert random_pivot_quick_sort(values) == sorted(values)


def test_insertion_sort_is_stable():
    pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __gt__(self, other):
            return self.pair[0] > other.pair[0]

    result = [k.pair for k in insertion_sort(Key(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert bubble_sort_last_swap(words) == expected
    assert shaker_sort(words) == expected
    assert insertion_sort(words) == expected
    assert selection_sort(words) == expected
    assert quick_sort(words) == expected
    assert random_pivot_quick_sort(words, random.Random(7)) == expected