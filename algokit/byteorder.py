"""Host byte-order detection and fixed-width byte swaps."""

import sys


def is_big_endian():
    """Return whether the running machine stores integers big-endian."""
    return sys.byteorder == "big"


def _swap(value, width):
    if not 0 <= value < 1 << (8 * width):
        raise ValueError(f"value {value} does not fit in {width} bytes")
    return int.from_bytes(value.to_bytes(width, "big"), "little")


def byte_swap2(value):
    """Reverse the bytes of an unsigned 16-bit value."""
    return _swap(value, 2)


def byte_swap4(value):
    """Reverse the bytes of an unsigned 32-bit value."""
    return _swap(value, 4)


def byte_swap8(value):
    """Reverse the bytes of an unsigned 64-bit value."""
    return _swap(value, 8)