"""Fixed-capacity binary heap whose items track their own buffer slot.

Items record the slot they occupy in `queue_index`, which lets the queue test
membership in O(1) and re-sort an item in O(log n) after its priority changes,
without removing and reinserting it.
"""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar


class QueueItem:
    """
    Base class for items stored in an IndexedPriorityQueue.

    Subclasses must define `__lt__` as a total order on priority.

    Attributes:
        queue_index: Buffer slot of the item while it is enqueued, -1 otherwise.
            Written only by the queue.
    """

    queue_index: int = -1

    def __lt__(self, other: QueueItem) -> bool:
        raise NotImplementedError


T = TypeVar("T", bound=QueueItem)


class IndexedPriorityQueue(Generic[T]):
    """
    A binary heap over a buffer of fixed size.

    With `ascending=True` the smallest item (by `<`) is dequeued first,
    otherwise the largest. Equal items are never swapped.

    Running out of capacity is not an error: `try_enqueue` returns False and
    leaves the queue untouched. Passing None where an item or predicate is
    expected raises ValueError.
    """

    def __init__(self, capacity: int, ascending: bool = True) -> None:
        """
        Args:
            capacity: Maximum number of items the queue can hold.
            ascending: Whether the smallest item is dequeued first.

        Raises:
            ValueError: If capacity is negative.
        """
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}.")
        self._buffer: List[Optional[T]] = [None] * capacity
        self._count: int = 0
        self._ascending = ascending

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __contains__(self, item: T) -> bool:
        return self.contains(item)

    def __repr__(self) -> str:
        items = ", ".join(repr(item) for item in self._buffer[: self._count])
        return f"IndexedPriorityQueue([{items}])"

    @property
    def capacity(self) -> int:
        """The maximum number of items the queue can hold."""
        return len(self._buffer)

    @property
    def ascending(self) -> bool:
        """Whether the smallest item is dequeued first."""
        return self._ascending

    def clear(self) -> None:
        """Remove all items and reset their slot indices."""
        for i in range(self._count):
            self._buffer[i].queue_index = -1
        for i in range(len(self._buffer)):
            self._buffer[i] = None
        self._count = 0

    def contains(self, item: T) -> bool:
        """
        Check whether `item` is currently in the queue.

        The item's recorded slot must be live and hold that very object, so
        stale indices from a previous queue do not count.

        Raises:
            ValueError: If item is None.
        """
        if item is None:
            raise ValueError("Item must not be None.")
        index = getattr(item, "queue_index", -1)
        return 0 <= index < self._count and self._buffer[index] is item

    def peek(self) -> Optional[T]:
        """Return the item that would be dequeued next without removing it."""
        return self._buffer[0] if self._count else None

    def try_enqueue(self, item: T) -> bool:
        """
        Add `item` to the queue.

        Returns:
            True if the item was added; False if it is already in the queue
            or the queue is full.

        Raises:
            ValueError: If item is None.
        """
        if self.contains(item):
            return False
        if self._count == len(self._buffer):
            return False

        self._buffer[self._count] = item
        item.queue_index = self._count
        self._count += 1
        self._sift_up(item)
        return True

    def try_dequeue(self) -> Optional[T]:
        """
        Remove and return the best item, or None if the queue is empty.
        """
        if self._count == 0:
            return None

        root = self._buffer[0]
        self._count -= 1
        last = self._buffer[self._count]
        self._buffer[self._count] = None
        if self._count > 0:
            self._buffer[0] = last
            last.queue_index = 0
            self._sift_down(last)

        root.queue_index = -1
        return root

    def update(self, item: T) -> None:
        """
        Restore heap order after the priority of an enqueued item changed.

        Raises:
            ValueError: If item is None or not in the queue.
        """
        if not self.contains(item):
            raise ValueError(f"Item {item!r} is not in the queue.")
        if not self._sift_up(item):
            self._sift_down(item)

    def find(self, pred: Callable[[T], bool]) -> Optional[T]:
        """
        Return the first item, in buffer order, that satisfies `pred`.

        This is a linear scan.

        Raises:
            ValueError: If pred is None.
        """
        if pred is None:
            raise ValueError("Predicate must not be None.")
        for i in range(self._count):
            if pred(self._buffer[i]):
                return self._buffer[i]
        return None

    def any(self, pred: Callable[[T], bool]) -> bool:
        """Check whether at least one item satisfies `pred`."""
        return self.find(pred) is not None

    def all(self, pred: Callable[[T], bool]) -> bool:
        """Check whether every item satisfies `pred` (True for an empty queue)."""
        if pred is None:
            raise ValueError("Predicate must not be None.")
        return all(pred(self._buffer[i]) for i in range(self._count))

    #
    # Heap maintenance
    #
    def _better(self, a: T, b: T) -> bool:
        """True if `a` must sit above `b` in the heap."""
        return a < b if self._ascending else b < a

    def _sift_up(self, item: T) -> bool:
        moved = False
        while item.queue_index > 0:
            parent = self._buffer[(item.queue_index - 1) // 2]
            if not self._better(item, parent):
                break
            self._swap(item, parent)
            moved = True
        return moved

    def _sift_down(self, item: T) -> None:
        while True:
            left = item.queue_index * 2 + 1
            if left >= self._count:
                return
            child = self._buffer[left]
            right = left + 1
            if right < self._count and self._better(self._buffer[right], child):
                child = self._buffer[right]
            if not self._better(child, item):
                return
            self._swap(item, child)

    def _swap(self, a: T, b: T) -> None:
        self._buffer[a.queue_index] = b
        self._buffer[b.queue_index] = a
        a.queue_index, b.queue_index = b.queue_index, a.queue_index
