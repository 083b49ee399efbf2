"""Classic algorithms and data structures: hashing, sorting, trees, caches, primes and fixed-width integers."""

__version__ = "0.1.0"