"""A portable 64-bit Mersenne Twister and random permutations built on it."""

from collections.abc import MutableSequence
from typing import Any

_NN = 312
_MM = 156
_MATRIX_A = 0xB5026F5AA96619E9
_UPPER_MASK = 0xFFFFFFFF80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

DEFAULT_SEED = 5489


class MersenneTwister64:
    """MT19937-64 generator whose outputs are limited to non-negative values."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._mt: list[int] = [0] * _NN
        self._index = _NN
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reinitialise the state from ``seed``."""
        mt = self._mt
        mt[0] = seed & _MASK64
        for i in range(1, _NN):
            prev = mt[i - 1]
            mt[i] = (6364136223846793005 * (prev ^ (prev >> 62)) + i) & _MASK64
        self._index = _NN

    def _twist(self) -> None:
        mt = self._mt
        for i in range(_NN):
            x = (mt[i] & _UPPER_MASK) | (mt[(i + 1) % _NN] & _LOWER_MASK)
            value = mt[(i + _MM) % _NN] ^ (x >> 1)
            if x & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._index = 0

    def randint64(self) -> int:
        """Return a random integer in ``[0, 2**63 - 1]``."""
        if self._index >= _NN:
            self._twist()
        x = self._mt[self._index]
        self._index += 1

        x ^= (x >> 29) & 0x5555555555555555
        x ^= (x << 17) & 0x71D67FFFEDA60000
        x ^= (x << 37) & 0xFFF7EEE000000000
        x ^= x >> 43
        return x & 0x7FFFFFFFFFFFFFFF

    def randint32(self) -> int:
        """Return a random integer in ``[0, 2**31 - 1]``."""
        return self.randint64() & 0x7FFFFFFF

    def rand_in_range(self, limit: int) -> int:
        """Return a random integer in ``[0, limit)``."""
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        return self.randint64() % limit

    def array_permute(self, p: MutableSequence[Any], nshuffles: int) -> MutableSequence[Any]:
        """Shuffle ``p`` in place with coarse block swaps and return it.

        Sequences shorter than 10 get ``len(p)`` random pair swaps; longer ones
        get ``nshuffles`` rounds that each exchange two runs of four elements.
        """
        n = len(p)
        if n < 10:
            for _ in range(n):
                v = self.rand_in_range(n)
                u = self.rand_in_range(n)
                p[v], p[u] = p[u], p[v]
        else:
            for _ in range(nshuffles):
                v = self.rand_in_range(n - 3)
                u = self.rand_in_range(n - 3)
                p[v], p[u + 2] = p[u + 2], p[v]
                p[v + 1], p[u + 3] = p[u + 3], p[v + 1]
                p[v + 2], p[u] = p[u], p[v + 2]
                p[v + 3], p[u + 1] = p[u + 1], p[v + 3]
        return p

    def array_permute_fine(self, p: MutableSequence[Any]) -> MutableSequence[Any]:
        """Shuffle ``p`` in place by swapping each position with a random one."""
        n = len(p)
        for i in range(n):
            v = self.rand_in_range(n)
            p[i], p[v] = p[v], p[i]
        return p