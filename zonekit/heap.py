"""A binary min-heap of non-negative integers supporting decrease-key."""

from __future__ import annotations

from typing import Callable


def _left(i: int) -> int:
    return i * 2 + 1


def _right(i: int) -> int:
    return (i + 1) * 2


def _parent(i: int) -> int:
    return (i - 1) >> 1


class Heap:
    """Min-heap of integer ids ordered by a caller-supplied ``less`` predicate.

    The predicate may look up mutable keys; after lowering the key of an id
    already in the heap, call :meth:`decrease`.
    """

    def __init__(self, less: Callable[[int, int], bool]) -> None:
        self._less = less
        self._heap: list[int] = []
        self._indices: list[int] = []

    def _percolate_up(self, i: int) -> None:
        heap, indices, less = self._heap, self._indices, self._less
        x = heap[i]
        while i != 0 and less(x, heap[_parent(i)]):
            heap[i] = heap[_parent(i)]
            indices[heap[i]] = i
            i = _parent(i)
        heap[i] = x
        indices[x] = i

    def _percolate_down(self, i: int) -> None:
        heap, indices, less = self._heap, self._indices, self._less
        x = heap[i]
        size = len(heap)
        while _left(i) < size:
            left, right = _left(i), _right(i)
            child = right if right < size and less(heap[right], heap[left]) else left
            if not less(heap[child], x):
                break
            heap[i] = heap[child]
            indices[heap[i]] = i
            i = child
        heap[i] = x
        indices[x] = i

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, n: object) -> bool:
        return isinstance(n, int) and 0 <= n < len(self._indices) and self._indices[n] >= 0

    def __getitem__(self, index: int) -> int:
        return self._heap[index]

    def decrease(self, n: int) -> None:
        """Restore heap order after the key of ``n`` has been lowered."""
        if n not in self:
            raise KeyError(n)
        self._percolate_up(self._indices[n])

    def insert(self, n: int) -> None:
        """Add the id ``n``, which must be non-negative and not yet present."""
        if n < 0:
            raise ValueError(f"heap ids must be non-negative, got {n}")
        if n >= len(self._indices):
            self._indices.extend([-1] * (n + 1 - len(self._indices)))
        if n in self:
            raise ValueError(f"{n} is already in the heap")
        self._indices[n] = len(self._heap)
        self._heap.append(n)
        self._percolate_up(self._indices[n])

    def remove_min(self) -> int:
        """Remove and return the smallest id."""
        if not self._heap:
            raise IndexError("remove_min from an empty heap")
        heap, indices = self._heap, self._indices
        x = heap[0]
        heap[0] = heap[-1]
        indices[heap[0]] = 0
        indices[x] = -1
        heap.pop()
        if len(heap) > 1:
            self._percolate_down(0)
        return x

    def clear(self) -> None:
        """Remove every id."""
        for i in self._heap:
            self._indices[i] = -1
        self._heap.clear()