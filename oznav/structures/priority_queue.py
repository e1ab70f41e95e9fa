"""Binary min-heap backing the shortest-path frontier.

Ordering comes from a caller-supplied ``key`` function; items whose keys
compare equal are released in whatever order the heap mechanics produce, which
is fixed for a given sequence of operations:

- ``add`` places the item in the last slot and moves it toward the root while
  its key is strictly smaller than its parent's.
- ``poll`` moves the last item to the root and sifts it down, swapping with the
  smaller child. The right child is preferred only when it is strictly smaller
  than the left one, and sifting stops as soon as the item is not strictly
  greater than that child.

There is no decrease-key. The search pushes a new entry whenever a distance
improves and tolerates stale entries left behind.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


def _identity(item: Any) -> Any:
    return item


class PriorityQueue(Generic[T]):
    """Min-heap keyed by ``key(item)``."""

    def __init__(self, key: Optional[Callable[[T], Any]] = None) -> None:
        self._key: Callable[[T], Any] = key or _identity
        self._heap: List[T] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def add(self, item: T) -> None:
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek from empty priority queue")
        return self._heap[0]

    def poll(self) -> T:
        """Remove and return the minimum item.

        Raises:
            IndexError: if the queue is empty.
        """
        if not self._heap:
            raise IndexError("poll from empty priority queue")
        result = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return result

    def _sift_up(self, idx: int) -> None:
        heap = self._heap
        item = heap[idx]
        item_key = self._key(item)
        while idx > 0:
            parent = (idx - 1) >> 1
            if not item_key < self._key(heap[parent]):
                break
            heap[idx] = heap[parent]
            idx = parent
        heap[idx] = item

    def _sift_down(self, idx: int) -> None:
        heap = self._heap
        size = len(heap)
        half = size >> 1
        item = heap[idx]
        item_key = self._key(item)
        while idx < half:
            left = 2 * idx + 1
            right = left + 1
            smallest = left
            if right < size and self._key(heap[right]) < self._key(heap[left]):
                smallest = right
            if not self._key(heap[smallest]) < item_key:
                break
            heap[idx] = heap[smallest]
            idx = smallest
        heap[idx] = item
