"""Open hash table with chained buckets stored in flat arrays, in insertion-slot order."""

from dataclasses import dataclass
from typing import Any

from algokit.primes import is_prime

_PRIMES = (
    3, 7, 11, 17, 23, 29, 37, 47, 59, 71, 89, 107, 131, 163, 197, 239, 293, 353, 431, 521, 631, 761, 919,
    1103, 1327, 1597, 1931, 2333, 2801, 3371, 4049, 4861, 5839, 7013, 8419, 10103, 12143, 14591,
    17519, 21023, 25229, 30293, 36353, 43627, 52361, 62851, 75431, 90523, 108631, 130363, 156437,
    187751, 225307, 270371, 324449, 389357, 467237, 560689, 672827, 807403, 968897, 1162687, 1395263,
    1674319, 2009191, 2411033, 2893249, 3471899, 4166287, 4999559, 5999471, 7199369,
)
_HASH_PRIME = 101
_INT32_MAX = 2**31 - 1
_HASH_MASK = 0x7FFFFFFF


def get_next_prime(n):
    """Return the smallest table prime that is at least ``n``."""
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    for prime in _PRIMES:
        if prime >= n:
            return prime
    for candidate in range(n | 1, _INT32_MAX, 2):
        if (candidate - 1) % _HASH_PRIME != 0 and is_prime(candidate):
            return candidate
    return n


def _default_hash(key):
    """Integers hash to themselves as unsigned 32-bit values; anything else uses ``hash``."""
    if isinstance(key, int):
        return key & 0xFFFFFFFF
    return hash(key)


@dataclass(slots=True)
class _Entry:
    hash_code: int = -1
    next: int = -1
    key: Any = None
    value: Any = None

    def reset(self):
        self.hash_code = -1
        self.next = -1
        self.key = None
        self.value = None


class Dictionary:
    """Hash map whose entries live in one array, chained through bucket indices.

    Iteration visits live entries in the order of their slots, so a slot
    freed by a removal is reused by the next insertion.
    """

    def __init__(self, capacity=0, hash_func=None):
        self._hash_func = hash_func or _default_hash
        self._count = 0
        self._free_list = -1
        self._free_count = 0
        self._buckets = []
        self._entries = []
        self._init(capacity)

    def _init(self, capacity):
        size = get_next_prime(capacity)
        self._buckets = [-1] * size
        self._entries = [_Entry() for _ in range(size)]
        self._free_list = -1

    def _hash(self, key):
        return self._hash_func(key) & _HASH_MASK

    def _chain(self, bucket):
        i = self._buckets[bucket]
        while i >= 0:
            yield i
            i = self._entries[i].next

    def _find(self, key):
        if not self._buckets:
            return -1
        hash_code = self._hash(key)
        for i in self._chain(hash_code % len(self._buckets)):
            entry = self._entries[i]
            if entry.hash_code == hash_code and entry.key == key:
                return i
        return -1

    def _insert(self, key, value, add):
        if not self._buckets:
            self._init(3)
        hash_code = self._hash(key)
        target = hash_code % len(self._buckets)

        for i in self._chain(target):
            entry = self._entries[i]
            if entry.hash_code == hash_code and entry.key == key:
                if add:
                    return False
                entry.value = value
                return True

        if self._free_count > 0:
            index = self._free_list
            self._free_list = self._entries[index].next
            self._free_count -= 1
        else:
            if self._count == len(self._entries):
                self._resize(get_next_prime(self._count * 2))
                target = hash_code % len(self._buckets)
            index = self._count
            self._count += 1

        entry = self._entries[index]
        entry.hash_code = hash_code
        entry.next = self._buckets[target]
        entry.key = key
        entry.value = value
        self._buckets[target] = index
        return True

    def _resize(self, new_size):
        self._buckets = [-1] * new_size
        self._entries.extend(_Entry() for _ in range(new_size - len(self._entries)))
        for i, entry in enumerate(self._entries[:self._count]):
            if entry.hash_code >= 0:
                bucket = entry.hash_code % new_size
                entry.next = self._buckets[bucket]
                self._buckets[bucket] = i

    def __len__(self):
        return self._count - self._free_count

    def __getitem__(self, key):
        i = self._find(key)
        if i < 0:
            raise KeyError(key)
        return self._entries[i].value

    def __contains__(self, key):
        return self._find(key) >= 0

    def __iter__(self):
        return (key for key, _ in self.items())

    def items(self):
        """Yield ``(key, value)`` pairs in slot order."""
        for entry in self._entries[:self._count]:
            if entry.hash_code >= 0:
                yield entry.key, entry.value

    def get(self, key, default=None):
        """Return the value for ``key``, or ``default`` when it is absent."""
        i = self._find(key)
        return self._entries[i].value if i >= 0 else default

    def add(self, key, value):
        """Insert a new key; return False, changing nothing, if it is already present."""
        if self._find(key) >= 0:
            return False
        return self._insert(key, value, True)

    def add_or_update(self, key, value):
        """Insert ``key`` or replace its value."""
        self._insert(key, value, False)

    def contains_pair(self, key, value):
        """Return whether ``key`` is present and maps to ``value``."""
        i = self._find(key)
        return i >= 0 and self._entries[i].value == value

    def remove(self, key):
        """Remove ``key``; return whether it was present."""
        hash_code = self._hash(key)
        bucket = hash_code % len(self._buckets)
        last = -1
        for i in self._chain(bucket):
            entry = self._entries[i]
            if entry.hash_code == hash_code and entry.key == key:
                if last < 0:
                    self._buckets[bucket] = entry.next
                else:
                    self._entries[last].next = entry.next
                entry.reset()
                entry.next = self._free_list
                self._free_list = i
                self._free_count += 1
                return True
            last = i
        return False

    def clear(self):
        """Remove every entry, keeping the allocated size."""
        if self._count > 0:
            self._buckets = [-1] * len(self._buckets)
            for entry in self._entries:
                entry.reset()
            self._free_list = -1
            self._free_count = 0
            self._count = 0