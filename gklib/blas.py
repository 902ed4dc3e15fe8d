"""BLAS-like helpers over numeric sequences and an array-to-CSR grouping."""

import math
from collections.abc import MutableSequence, Sequence
from itertools import accumulate, chain

from gklib.sorting import KeyValue, sort_decreasing


def incset(n: int, baseval: int) -> list[int]:
    """Return ``[baseval, baseval + 1, ..., baseval + n - 1]``."""
    return [baseval + i for i in range(n)]


def maximum(x: Sequence) -> float:
    """Return the largest element, or 0 for an empty sequence."""
    return max(x) if len(x) > 0 else 0


def minimum(x: Sequence) -> float:
    """Return the smallest element, or 0 for an empty sequence."""
    return min(x) if len(x) > 0 else 0


def argmax(x: Sequence) -> int:
    """Return the index of the first largest element (0 for an empty sequence)."""
    best = 0
    for i, value in enumerate(x):
        if value > x[best]:
            best = i
    return best


def argmin(x: Sequence) -> int:
    """Return the index of the first smallest element (0 for an empty sequence)."""
    best = 0
    for i, value in enumerate(x):
        if value < x[best]:
            best = i
    return best


def argmax_n(x: Sequence, k: int) -> int:
    """Return the index of the element with the ``k``-th largest value (1-based)."""
    if not 1 <= k <= len(x):
        raise ValueError(f"k must be between 1 and {len(x)}, got {k}")
    candidates = [KeyValue(value, i) for i, value in enumerate(x)]
    sort_decreasing(candidates)
    return candidates[k - 1].val


def total(x: Sequence) -> float:
    """Return the sum of the elements."""
    return sum(x, 0)


def scale(x: MutableSequence, alpha: float) -> MutableSequence:
    """Multiply every element of ``x`` by ``alpha`` in place and return ``x``."""
    for i, value in enumerate(x):
        x[i] = value * alpha
    return x


def norm2(x: Sequence) -> float:
    """Return the Euclidean norm of ``x``."""
    partial = sum((value * value for value in x), 0)
    return math.sqrt(partial) if partial > 0 else 0.0


def dot(x: Sequence, y: Sequence) -> float:
    """Return the dot product of two sequences of equal length."""
    if len(x) != len(y):
        raise ValueError("dot needs sequences of equal length")
    return sum((a * b for a, b in zip(x, y)), 0)


def axpy(alpha: float, x: Sequence, y: MutableSequence) -> MutableSequence:
    """Add ``alpha * x`` to ``y`` in place and return ``y``."""
    if len(x) != len(y):
        raise ValueError("axpy needs sequences of equal length")
    for i, value in enumerate(x):
        y[i] += alpha * value
    return y


def array2csr(array: Sequence[int], value_range: int) -> tuple[list[int], list[int]]:
    """Group positions of ``array`` by value.

    Returns ``(ptr, ind)`` where ``ind[ptr[v]:ptr[v + 1]]`` lists, in increasing
    order, the positions ``i`` with ``array[i] == v``; values must lie in
    ``range(value_range)``.
    """
    buckets: list[list[int]] = [[] for _ in range(value_range)]
    for i, value in enumerate(array):
        if not 0 <= value < value_range:
            raise ValueError(f"value {value} at position {i} is outside 0..{value_range - 1}")
        buckets[value].append(i)
    ptr = [0, *accumulate(len(bucket) for bucket in buckets)]
    ind = list(chain.from_iterable(buckets))
    return ptr, ind