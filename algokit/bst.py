"""Unbalanced binary search tree mapping keys to values."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, slots=True)
class _Node:
    key: Any
    value: Any
    parent: Optional["_Node"] = None
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree; equal keys are stored to the right of existing ones."""

    def __init__(self):
        self._root = None
        self._size = 0

    def _find_node(self, key):
        node = self._root
        while node is not None and key != node.key:
            node = node.left if key < node.key else node.right
        return node

    def insert(self, key, value):
        """Add ``key`` with ``value``; an existing equal key is kept alongside."""
        parent = None
        node = self._root
        while node is not None:
            parent = node
            node = node.left if key < node.key else node.right
        new = _Node(key, value, parent)
        if parent is None:
            self._root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new
        self._size += 1

    def find(self, key):
        """Return the value stored under ``key``, or None when it is absent."""
        node = self._find_node(key)
        return None if node is None else node.value

    def _transplant(self, u, v):
        if u.parent is None:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        if v is not None:
            v.parent = u.parent

    def delete(self, key):
        """Remove one node holding ``key``; return whether one was found."""
        z = self._find_node(key)
        if z is None:
            return False
        if z.left is None:
            self._transplant(z, z.right)
        elif z.right is None:
            self._transplant(z, z.left)
        else:
            y = z.right
            while y.left is not None:
                y = y.left
            if y.parent is not z:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
        self._size -= 1
        return True

    def __contains__(self, key):
        return self._find_node(key) is not None

    def __getitem__(self, key):
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def items(self):
        """Yield ``(key, value)`` pairs in ascending key order."""
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def __len__(self):
        return self._size

    def render(self):
        """Draw the tree sideways: right subtree first, one ``[key,value]`` per line, indented by depth."""
        lines = []
        stack = []
        node = self._root
        depth = 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            lines.append(" " * depth + f"[{node.key},{node.value}]")
            node = node.left
            depth += 1
        return "\n".join(lines) + "\n" if lines else ""