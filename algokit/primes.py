"""Primality tests: trial division and Miller-Rabin."""

import math
import random

from algokit.imath import mod_exp, trailing_zeros

_ROUNDS = 3


def test_prime(n):
    """Return whether ``n`` is prime, by trial division."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % i for i in range(3, math.isqrt(n) + 1, 2))


def miller_rabin_test(n):
    """Probabilistic primality test with three random witnesses."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    s = trailing_zeros(n - 1) if n - 1 <= 0xFFFFFFFF else ((n - 1) & -(n - 1)).bit_length() - 1
    d = (n - 1) >> s

    for _ in range(_ROUNDS):
        a = random.randrange(2, n - 2)
        x = mod_exp(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = mod_exp(x, 2, n)
            if x == 1:
                return False
            if x == n - 1:
                break
        else:
            return False
    return True


def is_prime(n):
    """Return whether ``n`` is prime: Miller-Rabin first, confirmed by trial division."""
    return miller_rabin_test(n) and test_prime(n)