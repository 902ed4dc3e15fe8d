"""Max-priority queues.

``PriorityQueue`` holds integer nodes drawn from ``range(maxnodes)`` and keeps
a locator for each node, so that any node can be deleted or have its key
changed. ``BoundedHeap`` holds arbitrary values up to a fixed capacity and
supports only insertion and removal of the top item.

In both queues the item with the largest key is at the top.
"""

from typing import Any, Optional


def _before(a: Any, b: Any) -> bool:
    """Return True when key ``a`` has higher priority than key ``b``."""
    return a > b


class PriorityQueue:
    """A max-priority queue over the integer nodes ``0 .. maxnodes - 1``."""

    def __init__(self, maxnodes: int) -> None:
        if maxnodes < 0:
            raise ValueError(f"maxnodes must not be negative, got {maxnodes}")
        self.maxnodes = maxnodes
        self._heap: list[tuple[Any, int]] = []
        self._locator: list[Optional[int]] = [None] * maxnodes

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.maxnodes:
            raise ValueError(f"node {node} is outside 0..{self.maxnodes - 1}")

    def _position(self, node: int) -> int:
        self._check_node(node)
        position = self._locator[node]
        if position is None:
            raise KeyError(node)
        return position

    def _place(self, i: int, key: Any, node: int) -> None:
        self._heap[i] = (key, node)
        self._locator[node] = i

    def _sift_up(self, i: int, key: Any, node: int) -> None:
        heap, locator = self._heap, self._locator
        while i > 0:
            j = (i - 1) >> 1
            if _before(key, heap[j][0]):
                heap[i] = heap[j]
                locator[heap[i][1]] = i
                i = j
            else:
                break
        self._place(i, key, node)

    def _sift_down(self, i: int, key: Any, node: int) -> None:
        heap, locator = self._heap, self._locator
        n = len(heap)
        while (j := 2 * i + 1) < n:
            if _before(heap[j][0], key):
                if j + 1 < n and _before(heap[j + 1][0], heap[j][0]):
                    j += 1
            elif j + 1 < n and _before(heap[j + 1][0], key):
                j += 1
            else:
                break
            heap[i] = heap[j]
            locator[heap[i][1]] = i
            i = j
        self._place(i, key, node)

    def reset(self) -> None:
        """Remove every node from the queue."""
        for _, node in self._heap:
            self._locator[node] = None
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, node: object) -> bool:
        return (
            isinstance(node, int)
            and 0 <= node < self.maxnodes
            and self._locator[node] is not None
        )

    def insert(self, node: int, key: Any) -> None:
        """Add ``node`` with priority ``key``; the node must not be queued yet."""
        self._check_node(node)
        if self._locator[node] is not None:
            raise ValueError(f"node {node} is already in the queue")
        self._heap.append((key, node))
        self._sift_up(len(self._heap) - 1, key, node)

    def delete(self, node: int) -> None:
        """Remove ``node`` from the queue."""
        i = self._position(node)
        self._locator[node] = None
        last_key, last_node = self._heap.pop()
        if self._heap and last_node != node:
            old_key = self._heap[i][0]
            if _before(last_key, old_key):
                self._sift_up(i, last_key, last_node)
            else:
                self._sift_down(i, last_key, last_node)

    def update(self, node: int, newkey: Any) -> None:
        """Change the key of a queued ``node`` to ``newkey``."""
        i = self._position(node)
        oldkey = self._heap[i][0]
        if not _before(newkey, oldkey) and not _before(oldkey, newkey):
            return
        if _before(newkey, oldkey):
            self._sift_up(i, newkey, node)
        else:
            self._sift_down(i, newkey, node)

    def get_top(self) -> int:
        """Remove and return the node with the largest key."""
        if not self._heap:
            raise IndexError("get_top from an empty queue")
        _, top = self._heap[0]
        self._locator[top] = None
        last_key, last_node = self._heap.pop()
        if self._heap:
            self._sift_down(0, last_key, last_node)
        return top

    def see_top_val(self) -> Optional[int]:
        """Return the node with the largest key without removing it, or None."""
        return self._heap[0][1] if self._heap else None

    def see_top_key(self) -> Any:
        """Return the largest key without removing it, or None when empty."""
        return self._heap[0][0] if self._heap else None

    def see_key(self, node: int) -> Any:
        """Return the key of a queued ``node``."""
        return self._heap[self._position(node)][0]

    def check_heap(self) -> bool:
        """Return True when the heap order and the locators are consistent."""
        heap, locator = self._heap, self._locator
        if not heap:
            return all(position is None for position in locator)
        top_key = heap[0][0]
        for i, (key, node) in enumerate(heap):
            if locator[node] != i:
                return False
            if i > 0 and (_before(key, heap[(i - 1) // 2][0]) or _before(key, top_key)):
                return False
        queued = sum(1 for position in locator if position is not None)
        return queued == len(heap)


class BoundedHeap:
    """A max-priority queue of arbitrary values holding at most ``maxnodes`` items."""

    def __init__(self, maxnodes: int) -> None:
        if maxnodes < 0:
            raise ValueError(f"maxnodes must not be negative, got {maxnodes}")
        self.maxnodes = maxnodes
        self._heap: list[tuple[Any, Any]] = []

    def reset(self) -> None:
        """Remove every item from the heap."""
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def insert(self, val: Any, key: Any) -> bool:
        """Add ``val`` with priority ``key``; return False when the heap is full."""
        heap = self._heap
        if len(heap) == self.maxnodes:
            return False
        heap.append((key, val))
        i = len(heap) - 1
        while i > 0:
            j = (i - 1) >> 1
            if _before(key, heap[j][0]):
                heap[i] = heap[j]
                i = j
            else:
                break
        heap[i] = (key, val)
        return True

    def get_top(self) -> Any:
        """Remove and return the value with the largest key."""
        heap = self._heap
        if not heap:
            raise IndexError("get_top from an empty heap")
        top = heap[0][1]
        key, val = heap.pop()
        n = len(heap)
        if n:
            i = 0
            while (j := 2 * i + 1) < n:
                if _before(heap[j][0], key):
                    if j + 1 < n and _before(heap[j + 1][0], heap[j][0]):
                        j += 1
                elif j + 1 < n and _before(heap[j + 1][0], key):
                    j += 1
                else:
                    break
                heap[i] = heap[j]
                i = j
            heap[i] = (key, val)
        return top

    def see_top_val(self) -> Any:
        """Return the value with the largest key without removing it, or None."""
        return self._heap[0][1] if self._heap else None

    def see_top_key(self) -> Any:
        """Return the largest key without removing it, or None when empty."""
        return self._heap[0][0] if self._heap else None

    def check_heap(self) -> bool:
        """Return True when the heap order holds."""
        heap = self._heap
        if not heap:
            return True
        top_key = heap[0][0]
        return not any(
            _before(key, heap[(i - 1) // 2][0]) or _before(key, top_key)
            for i, (key, _) in enumerate(heap)
            if i > 0
        )