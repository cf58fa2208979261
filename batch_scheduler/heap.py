"""
Array-backed binary min-heap.

The heap is ordered by a caller-supplied key function and works on a
shrinking active range ``[0, valid_end]`` of its backing list. Extracted
minimums are parked just past the active range, so draining the heap leaves
the list sorted in descending order.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def _identity(item):
    return item


class MinHeap(Generic[T]):
    def __init__(self, items: Iterable[T], key: Optional[Callable[[T], object]] = None) -> None:
        self._items: List[T] = list(items)
        self._key = key or _identity
        self.valid_end = len(self._items) - 1
        self.build()

    def __len__(self) -> int:
        return self.valid_end + 1

    @property
    def items(self) -> Sequence[T]:
        return tuple(self._items)

    def peek(self) -> Optional[T]:
        return self._items[0] if self.valid_end >= 0 else None

    def build(self) -> None:
        """
        Restore heap order bottom-up, sinking every internal node from the
        last non-leaf down to the root. O(n) overall.
        """
        for i in range((self.valid_end - 1) // 2, -1, -1):
            self.sink(i, self.valid_end)

    def sink(self, index: int, valid_end: int) -> None:
        """
        Move the node at `index` down until neither child within
        ``[0, valid_end]`` is strictly smaller. Equal children favour the left.
        """
        child = 2 * index + 1
        while child <= valid_end:
            if child + 1 <= valid_end and self._less(child + 1, child):
                child += 1
            if not self._less(child, index):
                break
            self._swap(child, index)
            index = child
            child = 2 * child + 1

    def extract_min(self, valid_end: Optional[int] = None) -> T:
        """
        Swap the root with the element at `valid_end`, shrink the active range
        by one and sink the new root. Returns the former root, which now sits
        at `valid_end` and is never touched again.
        """
        if valid_end is None:
            valid_end = self.valid_end
        if valid_end < 0:
            raise IndexError("extract_min from an empty heap")

        self._swap(0, valid_end)
        self.sink(0, valid_end - 1)
        self.valid_end = valid_end - 1
        return self._items[valid_end]

    def drain(self) -> Iterator[T]:
        """Yield every remaining item in ascending key order."""
        while self.valid_end >= 0:
            yield self.extract_min()

    def _less(self, i: int, j: int) -> bool:
        return self._key(self._items[i]) < self._key(self._items[j])

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]
