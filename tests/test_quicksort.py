import operator
import random

import pytest

from gklib.quicksort import quicksort


@pytest.mark.parametrize("n", [0, 1, 2, 7, 8, 9, 10, 17, 50, 257, 1000])
def test_increasing_matches_sorted(n):
    rng = random.Random(n)
    data = [rng.randint(-100, 100) for _ in range(n)]
    expected = sorted(data)
    quicksort(data, operator.lt)
    assert data == expected


@pytest.mark.parametrize("n", [3, 9, 64, 500])
def test_decreasing_with_greater_than(n):
    rng = random.Random(1000 + n)
    data = [rng.random() for _ in range(n)]
    expected = sorted(data, reverse=True)
    quicksort(data, operator.gt)
    assert data == expected


@pytest.mark.parametrize(
    "data",
    [
        list(range(100)),
        list(range(100, 0, -1)),
        [5] * 40,
        [1, 0] * 30,
    ],
)
def test_structured_inputs(data):
    expected = sorted(data)
    quicksort(data, operator.lt)
    assert data == expected


def test_key_value_records_sorted_by_key_preserve_contents():
    rng = random.Random(7)
    records = [(rng.randint(0, 10), i) for i in range(200)]
    original = list(records)
    quicksort(records, lambda a, b: a[0] < b[0])
    keys = [k for k, _ in records]
    assert keys == sorted(keys)
    assert sorted(records) == sorted(original)


def test_strings_sorted():
    words = ["pear", "apple", "fig", "kiwi", "banana", "cherry", "date", "lime", "plum", "grape"]
    expected = sorted(words)
    quicksort(words, operator.lt)
    assert words == expected