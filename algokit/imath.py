"""Small integer helpers: dot products, radix digits, modular powers and bit counts."""

_U32 = 0xFFFFFFFF
_U64_MAX = (1 << 64) - 1

#: Number of digits produced by :func:`m_based`.
DIGITS = 64


def dot_product(k, a):
    """Return the dot product of two equal-length sequences, wrapped to 32 bits."""
    return sum(x * y for x, y in zip(k, a, strict=True)) & _U32


def m_based(key, m):
    """Split ``key`` into base-``m`` digits, least significant first, padded to 64."""
    if m < 2:
        raise ValueError(f"base must be at least 2, got {m}")
    if not 0 <= key <= _U64_MAX:
        raise ValueError(f"key must be an unsigned 64-bit value, got {key}")
    digits = []
    while True:
        key, digit = divmod(key, m)
        digits.append(digit)
        if key == 0:
            break
    return digits + [0] * (DIGITS - len(digits))


def mod_exp(base, exponent, modulus):
    """Return ``base ** exponent % modulus``; an exponent of zero always gives 1."""
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def trailing_zeros(v):
    """Count the trailing zero bits of a 32-bit value; zero has 32."""
    v &= _U32
    if v == 0:
        return 32
    return (v & -v).bit_length() - 1