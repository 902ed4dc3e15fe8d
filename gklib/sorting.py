"""In-place sorting of plain values and key/value pairs in either direction."""

import operator
from collections.abc import Callable, MutableSequence
from dataclasses import dataclass
from typing import Any, Optional

from gklib.quicksort import quicksort


@dataclass
class KeyValue:
    """A key paired with a value; ordering looks at the key alone."""

    key: Any
    val: Any

    def __lt__(self, other: "KeyValue") -> bool:
        if not isinstance(other, KeyValue):
            return NotImplemented
        return self.key < other.key

    def __gt__(self, other: "KeyValue") -> bool:
        if not isinstance(other, KeyValue):
            return NotImplemented
        return self.key > other.key


def _predicate(
    compare: Callable[[Any, Any], bool], key: Optional[Callable[[Any], Any]]
) -> Callable[[Any, Any], bool]:
    if key is None:
        return compare
    return lambda a, b: compare(key(a), key(b))


def sort_increasing(
    items: MutableSequence[Any], key: Optional[Callable[[Any], Any]] = None
) -> None:
    """Sort ``items`` in place in increasing order of ``key(item)`` (or the item)."""
    quicksort(items, _predicate(operator.lt, key))


def sort_decreasing(
    items: MutableSequence[Any], key: Optional[Callable[[Any], Any]] = None
) -> None:
    """Sort ``items`` in place in decreasing order of ``key(item)`` (or the item)."""
    quicksort(items, _predicate(operator.gt, key))