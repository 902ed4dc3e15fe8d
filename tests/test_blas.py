import math
import random

import pytest

from gklib.blas import (
    argmax,
    argmax_n,
    argmin,
    array2csr,
    axpy,
    dot,
    incset,
    maximum,
    minimum,
    norm2,
    scale,
    total,
)


def _data(n=50, seed=1):
    rng = random.Random(seed)
    return [rng.randint(-100, 100) for _ in range(n)]


def test_incset_is_consecutive():
    values = incset(6, 10)
    assert len(values) == 6
    assert values[0] == 10
    assert all(b - a == 1 for a, b in zip(values, values[1:]))


def test_incset_empty():
    assert incset(0, 5) == []


def test_maximum_minimum():
    x = _data()
    assert maximum(x) == max(x)
    assert minimum(x) == min(x)


def test_maximum_minimum_empty_is_zero():
    assert maximum([]) == 0
    assert minimum([]) == 0


def test_argmax_argmin_first_occurrence():
    x = [3, 9, 1, 9, 1, 4]
    assert argmax(x) == x.index(max(x))
    assert argmin(x) == x.index(min(x))


def test_argmax_argmin_random():
    x = _data(seed=4)
    assert x[argmax(x)] == max(x)
    assert x[argmin(x)] == min(x)
    assert argmax(x) == x.index(max(x))


def test_argmax_empty():
    assert argmax([]) == 0
    assert argmin([]) == 0


def test_argmax_n_matches_order_statistics():
    rng = random.Random(8)
    x = rng.sample(range(1000), 40)
    ranked = sorted(x, reverse=True)
    for k in range(1, len(x) + 1):
        assert x[argmax_n(x, k)] == ranked[k - 1]


def test_argmax_n_first_is_argmax():
    x = [0.5, 2.5, -1.0, 1.5]
    assert argmax_n(x, 1) == argmax(x)


@pytest.mark.parametrize("k", [0, 5, -1])
def test_argmax_n_rejects_bad_k(k):
    with pytest.raises(ValueError):
        argmax_n([1, 2, 3, 4], k)


def test_total():
    x = _data(seed=2)
    assert total(x) == sum(x)
    assert total([]) == 0


def test_scale_in_place():
    x = [1.0, -2.0, 3.5]
    original = list(x)
    result = scale(x, 2.0)
    assert result is x
    assert x == [2.0 * v for v in original]


def test_norm2():
    assert norm2([3.0, 4.0]) == 5.0
    assert norm2([]) == 0.0
    assert norm2([0, 0, 0]) == 0.0
    x = [1.5, -2.0, 0.25]
    assert math.isclose(norm2(x) ** 2, dot(x, x))


def test_dot_symmetric_and_with_self():
    x = _data(seed=5)
    y = _data(seed=6)
    assert dot(x, y) == dot(y, x)
    assert dot(x, x) == sum(v * v for v in x)


def test_dot_length_mismatch():
    with pytest.raises(ValueError):
        dot([1, 2], [1, 2, 3])


def test_axpy_in_place():
    x = [1.0, 2.0, 3.0]
    y = [10.0, 20.0, 30.0]
    result = axpy(0.5, x, y)
    assert result is y
    assert y == [10.0 + 0.5 * 1.0, 20.0 + 0.5 * 2.0, 30.0 + 0.5 * 3.0]


def test_axpy_zero_alpha_leaves_y():
    y = [4, 5, 6]
    axpy(0, [1, 2, 3], y)
    assert y == [4, 5, 6]


def test_axpy_length_mismatch():
    with pytest.raises(ValueError):
        axpy(1.0, [1.0], [1.0, 2.0])


def test_array2csr_groups_positions():
    rng = random.Random(9)
    value_range = 7
    array = [rng.randrange(value_range) for _ in range(80)]
    ptr, ind = array2csr(array, value_range)
    assert len(ptr) == value_range + 1
    assert ptr[0] == 0
    assert ptr[-1] == len(array)
    assert sorted(ind) == list(range(len(array)))
    for v in range(value_range):
        group = ind[ptr[v]:ptr[v + 1]]
        assert group == sorted(group)
        assert all(array[i] == v for i in group)
        assert len(group) == array.count(v)


def test_array2csr_empty_array():
    ptr, ind = array2csr([], 3)
    assert ptr == [0, 0, 0, 0]
    assert ind == []


def test_array2csr_rejects_out_of_range():
    with pytest.raises(ValueError):
        array2csr([0, 3], 3)
    with pytest.raises(ValueError):
        array2csr([-1], 3)