"""Classic in-place sorting routines and quickselect."""

import operator
import random


def bubble_sort(items, start=0, end=None):
    """Sort ``items[start..end]`` (``end`` inclusive) in place by repeated adjacent swaps."""
    if end is None:
        end = len(items) - 1
    if start >= end:
        raise ValueError(f"start ({start}) must be below end ({end})")
    swapped = True
    while swapped:
        swapped = False
        for i in range(start + 1, end + 1):
            if items[i - 1] > items[i]:
                items[i - 1], items[i] = items[i], items[i - 1]
                swapped = True


def shell_sort(items):
    """Sort ``items`` in place with Knuth's gap sequence 1, 4, 13, 40, ..."""
    n = len(items)
    h = 1
    while h < n // 3:
        h = 3 * h + 1
    while h >= 1:
        for i in range(h, n):
            current = items[i]
            j = i - h
            while j >= 0 and items[j] > current:
                items[j + h] = items[j]
                j -= h
            items[j + h] = current
        h //= 3


def _partition(items, begin, end, rng):
    pivot_idx = rng.randint(begin, end)
    pivot = items[pivot_idx]
    items[begin], items[pivot_idx] = items[pivot_idx], items[begin]
    i = begin + 1
    j = end
    while i <= j:
        while i <= end and items[i] <= pivot:
            i += 1
        while j >= begin and items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[begin], items[j] = items[j], items[begin]
    return j


def random_select(items, begin, end, k, rng=None):
    """Return the index holding the ``k``-th smallest (1-based) value of ``items[begin..end]``.

    The range is partially reordered in place.
    """
    if not 0 <= begin <= end < len(items):
        raise ValueError(f"invalid range [{begin}, {end}] for {len(items)} items")
    if not 1 <= k <= end - begin + 1:
        raise ValueError(f"k must be between 1 and {end - begin + 1}, got {k}")
    rng = rng or random
    while begin != end:
        pivot_idx = _partition(items, begin, end, rng)
        rank = pivot_idx - begin + 1
        if k < rank:
            end = pivot_idx - 1
        elif k > rank:
            begin = pivot_idx + 1
            k -= rank
        else:
            return pivot_idx
    return begin


class Sorter:
    """Sorts a list in place with a choice of algorithms.

    ``comp(a, b)`` returns True when ``a`` belongs after ``b``; the default
    is ``>``, which sorts in ascending order.
    """

    def __init__(self, items, comp=None):
        self.items = items
        self._comp = comp or operator.gt

    def _swap(self, i, j):
        items = self.items
        items[i], items[j] = items[j], items[i]

    def insertion_sort(self):
        """Sort by inserting each element into the sorted prefix."""
        items, comp = self.items, self._comp
        for i in range(1, len(items)):
            current = items[i]
            j = i - 1
            while j >= 0 and comp(items[j], current):
                items[j + 1] = items[j]
                j -= 1
            items[j + 1] = current

    def bubble_sort(self):
        """Sort by comparing each position with every later one."""
        items, comp = self.items, self._comp
        n = len(items)
        for i in range(n):
            for j in range(i + 1, n):
                if comp(items[i], items[j]):
                    self._swap(i, j)

    def quick_sort(self):
        """Sort by partitioning around the first element of each range."""
        items, comp = self.items, self._comp
        if not items:
            return
        ranges = [(0, len(items) - 1)]
        while ranges:
            start, end = ranges.pop()
            i, j = start, end
            while i < j:
                while i < j and not comp(items[i], items[j]):
                    j -= 1
                if i < j:
                    self._swap(i, j)
                while i < j and not comp(items[i], items[j]):
                    i += 1
                if i < j:
                    self._swap(i, j)
            if i - start > 1:
                ranges.append((start, i - 1))
            if end - j > 1:
                ranges.append((j + 1, end))

    def selection_sort(self):
        """Sort by selecting the least remaining element for each position."""
        items, comp = self.items, self._comp
        n = len(items)
        for i in range(n - 1):
            min_index = i
            for j in range(i + 1, n):
                if comp(items[min_index], items[j]):
                    min_index = j
            if min_index != i:
                self._swap(i, min_index)

    def merge_sort(self):
        """Sort by merging runs of doubling width, bottom up."""
        items, comp = self.items, self._comp
        n = len(items)
        width = 1
        while width <= n:
            merged = []
            for i in range(0, n, 2 * width):
                j, k = i, i + width
                max_j = min(i + width, n)
                max_k = min(i + 2 * width, n)
                while j < max_j and k < max_k:
                    if comp(items[k], items[j]):
                        merged.append(items[j])
                        j += 1
                    else:
                        merged.append(items[k])
                        k += 1
                merged.extend(items[j:max_j])
                merged.extend(items[k:max_k])
            items[:] = merged
            width *= 2

    def _adjust_heap(self, start, size):
        items, comp = self.items, self._comp
        left = 2 * start + 1
        right = 2 * start + 2
        if left < size and not comp(items[start], items[left]):
            self._swap(start, left)
            self._adjust_heap(left, size)
        if right < size and not comp(items[start], items[right]):
            self._swap(start, right)
            self._adjust_heap(right, size)

    def heap_sort(self):
        """Sort by building a heap and repeatedly moving its top to the end."""
        n = len(self.items)
        if n < 2:
            return
        for i in range((n - 1) // 2, -1, -1):
            self._adjust_heap(i, n)
        for i in range(n - 1, 0, -1):
            self._swap(0, i)
            self._adjust_heap(0, i)