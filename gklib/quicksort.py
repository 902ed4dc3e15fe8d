"""In-place quicksort driven by a strict "less than" predicate.

Partitions larger than a small threshold are split with a median-of-three
quicksort that keeps an explicit stack. The nearly sorted result is then
finished with an insertion sort.
"""

from collections.abc import Callable, MutableSequence
from typing import TypeVar

T = TypeVar("T")

_MAX_THRESH = 8


def _partition_sort(items: MutableSequence[T], less: Callable[[T, T], bool]) -> None:
    lo, hi = 0, len(items) - 1
    stack: list[tuple[int, int]] = []

    while True:
        mid = lo + ((hi - lo) >> 1)

        # Median of three: leave lo <= mid <= hi.
        if less(items[mid], items[lo]):
            items[mid], items[lo] = items[lo], items[mid]
        if less(items[hi], items[mid]):
            items[mid], items[hi] = items[hi], items[mid]
            if less(items[mid], items[lo]):
                items[mid], items[lo] = items[lo], items[mid]

        left, right = lo + 1, hi - 1
        while True:
            while less(items[left], items[mid]):
                left += 1
            while less(items[mid], items[right]):
                right -= 1

            if left < right:
                items[left], items[right] = items[right], items[left]
                if mid == left:
                    mid = right
                elif mid == right:
                    mid = left
                left += 1
                right -= 1
            elif left == right:
                left += 1
                right -= 1
                break

            if left > right:
                break

        if right - lo <= _MAX_THRESH:
            if hi - left <= _MAX_THRESH:
                if not stack:
                    return
                lo, hi = stack.pop()
            else:
                lo = left
        elif hi - left <= _MAX_THRESH:
            hi = right
        elif right - lo > hi - left:
            stack.append((lo, right))
            lo = left
        else:
            stack.append((left, hi))
            hi = right


def _insertion_sort(items: MutableSequence[T], less: Callable[[T, T], bool]) -> None:
    end = len(items) - 1

    # Put the smallest of the first few elements at the front as a sentinel.
    smallest = 0
    for run in range(1, min(_MAX_THRESH, end) + 1):
        if less(items[run], items[smallest]):
            smallest = run
    if smallest != 0:
        items[smallest], items[0] = items[0], items[smallest]

    for run in range(2, end + 1):
        pos = run - 1
        while pos >= 0 and less(items[run], items[pos]):
            pos -= 1
        pos += 1
        if pos != run:
            held = items[run]
            items[pos + 1 : run + 1] = items[pos:run]
            items[pos] = held


def quicksort(items: MutableSequence[T], less: Callable[[T, T], bool]) -> None:
    """Sort ``items`` in place so that no element is ``less`` than its predecessor."""
    if len(items) < 1:
        return
    if len(items) > _MAX_THRESH:
        _partition_sort(items, less)
    _insertion_sort(items, less)