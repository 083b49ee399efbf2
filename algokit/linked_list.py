"""Circular doubly linked list with self-organising moves."""


class ListNode:
    """A node that can belong to at most one :class:`LinkedList` at a time."""

    __slots__ = ("value", "_prev", "_next", "_owner")

    def __init__(self, value=None):
        self.value = value
        self._prev = None
        self._next = None
        self._owner = None

    def __repr__(self):
        return f"ListNode({self.value!r})"


class LinkedList:
    """Doubly linked list built around a sentinel head node.

    Nodes are linked in and out in constant time, and may be moved between
    lists or reordered with move-to-front and move-ahead-one.
    """

    def __init__(self):
        self._head = ListNode()
        self._head._prev = self._head
        self._head._next = self._head
        self._len = 0

    def _link(self, node, prev, nxt):
        node._prev = prev
        node._next = nxt
        prev._next = node
        nxt._prev = node
        node._owner = self
        self._len += 1

    def _unlink(self, node):
        node._prev._next = node._next
        node._next._prev = node._prev
        node._prev = None
        node._next = None
        node._owner = None
        self._len -= 1

    @staticmethod
    def _check_free(node):
        if node._owner is not None:
            raise ValueError(f"{node!r} already belongs to a list")

    def _check_member(self, node):
        if node._owner is not self:
            raise ValueError(f"{node!r} is not in this list")

    def _nodes(self):
        node = self._head._next
        while node is not self._head:
            nxt = node._next
            yield node
            node = nxt

    def add(self, node):
        """Insert ``node`` at the front of the list."""
        self._check_free(node)
        self._link(node, self._head, self._head._next)

    def add_tail(self, node):
        """Insert ``node`` at the back of the list."""
        self._check_free(node)
        self._link(node, self._head._prev, self._head)

    def remove(self, node):
        """Unlink ``node`` from this list."""
        self._check_member(node)
        self._unlink(node)

    def move(self, node, other):
        """Take ``node`` out of this list and put it at the front of ``other``."""
        self._check_member(node)
        self._unlink(node)
        other.add(node)

    def move_tail(self, node, other):
        """Take ``node`` out of this list and put it at the back of ``other``."""
        self._check_member(node)
        self._unlink(node)
        other.add_tail(node)

    def is_empty(self):
        """Return whether the list holds no nodes."""
        return self._head._next is self._head

    def splice(self, other):
        """Move every node of ``other``, in order, to the front of this list; ``other`` is left empty."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        if other.is_empty():
            return
        moved = list(other._nodes())
        first = other._head._next
        last = other._head._prev
        at = self._head._next

        first._prev = self._head
        self._head._next = first
        last._next = at
        at._prev = last

        for node in moved:
            node._owner = self
        self._len += other._len

        other._head._next = other._head
        other._head._prev = other._head
        other._len = 0

    def move_to_front(self, node):
        """Move ``node`` to the first position."""
        self._check_member(node)
        if node._prev is self._head:
            return
        self._unlink(node)
        self._link(node, self._head, self._head._next)

    def move_ahead_one(self, node):
        """Swap ``node`` with the node just before it."""
        self._check_member(node)
        prev = node._prev
        if prev is self._head:
            return
        self._unlink(node)
        self._link(node, prev._prev, prev)

    def __iter__(self):
        return (node.value for node in self._nodes())

    def __reversed__(self):
        node = self._head._prev
        while node is not self._head:
            prev = node._prev
            yield node.value
            node = prev

    def __len__(self):
        return self._len