"""Suffix array by prefix doubling, with longest-common-prefix queries."""


class SuffixArray:
    """Sorted starting positions of all suffixes of a string or byte string."""

    def __init__(self, text):
        self._text = text
        n = len(text)
        self._n = n
        self._suffix = list(range(n))
        self._ranks = []

        length = 1
        while n and (length >> 1) < n:
            half = length // 2
            if self._ranks:
                prev = self._ranks[-1]
                keys = [(prev[i], prev[i + half] if i + half < n else -1) for i in range(n)]
            else:
                keys = [text[i] for i in range(n)]
            self._suffix.sort(key=keys.__getitem__)

            ranks = [0] * n
            seq = 0
            for before, current in zip(self._suffix, self._suffix[1:]):
                if keys[before] != keys[current]:
                    seq += 1
                ranks[current] = seq
            self._ranks.append(ranks)
            length <<= 1

    def __getitem__(self, i):
        return self._suffix[i]

    def __len__(self):
        return self._n

    def _check(self, i):
        if not 0 <= i < self._n:
            raise IndexError(f"suffix index {i} out of range")

    def lcp_length(self, x, y):
        """Return the length of the longest common prefix of the suffixes at ``x`` and ``y``."""
        self._check(x)
        self._check(y)
        if x == y:
            return self._n - x
        result = 0
        for k in reversed(range(len(self._ranks))):
            if x >= self._n or y >= self._n:
                break
            ranks = self._ranks[k]
            if ranks[x] == ranks[y]:
                step = 1 << k
                x += step
                y += step
                result += step
        return result