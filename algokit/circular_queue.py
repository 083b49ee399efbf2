"""First-in first-out queue with a fixed capacity."""

from collections import deque


class QueueEmptyError(IndexError):
    """Raised when the front of an empty queue is requested."""

    def __init__(self):
        super().__init__("Queue is empty.")


class BoundedQueue:
    """FIFO queue that refuses new items once it holds ``capacity`` of them."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._items = deque()

    def enqueue(self, item):
        """Append ``item``; return False if the queue is full."""
        if len(self._items) == self._capacity:
            return False
        self._items.append(item)
        return True

    def dequeue(self):
        """Remove and return the front item; an empty queue gives None."""
        if not self._items:
            return None
        return self._items.popleft()

    def front(self):
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError()
        return self._items[0]

    def is_empty(self):
        """Return whether the queue holds no items."""
        return not self._items

    def __len__(self):
        return len(self._items)

    def capacity(self):
        """Return the maximum number of items the queue holds."""
        return self._capacity