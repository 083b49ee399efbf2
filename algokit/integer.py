"""Unsigned integers of a fixed number of 16-bit components."""

import math

_BITS = 16
_MASK = (1 << _BITS) - 1
_LOG_2_10 = 3.3219280948873623478703194294894


def _component(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not 0 <= value <= _MASK:
        raise ValueError(f"component operand must be in 0..{_MASK}, got {value}")
    return value


class Integer:
    """Unsigned integer stored in a fixed number of 16-bit components.

    Results take the widths the operations define, and values that do not
    fit are cut to that width.
    """

    __slots__ = ("_size", "_value")

    def __init__(self, components):
        if components < 0:
            raise ValueError(f"component count must not be negative, got {components}")
        self._size = components
        self._value = 0

    @classmethod
    def _of(cls, components, value):
        result = cls(components)
        result._value = value & ((1 << (_BITS * components)) - 1)
        return result

    @classmethod
    def from_string(cls, s):
        """Parse a decimal string; its width is sized to hold any number of that length."""
        if s and not (s.isascii() and s.isdigit()):
            raise ValueError(f"not a decimal number: {s!r}")
        size = math.ceil(_LOG_2_10 * len(s) / _BITS)
        return cls._of(size, int(s) if s else 0)

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return f"Integer(components={self._size}, value={self._value})"

    def __int__(self):
        return self._value

    def __len__(self):
        return self._size

    def _check_index(self, i):
        if not 0 <= i < self._size:
            raise IndexError(f"component index {i} out of range")

    def __getitem__(self, i):
        self._check_index(i)
        return (self._value >> (_BITS * i)) & _MASK

    def __setitem__(self, i, component):
        self._check_index(i)
        if not 0 <= component <= _MASK:
            raise ValueError(f"component must be in 0..{_MASK}, got {component}")
        shift = _BITS * i
        self._value = (self._value & ~(_MASK << shift)) | (component << shift)

    def __eq__(self, other):
        if not isinstance(other, Integer):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def is_zero(self):
        """Return whether every component is zero."""
        return self._value == 0

    def __add__(self, other):
        if not isinstance(other, Integer):
            return NotImplemented
        return Integer._of(max(self._size, other._size) + 1, self._value + other._value)

    def __sub__(self, other):
        if not isinstance(other, Integer):
            return NotImplemented
        modulus = 1 << (_BITS * self._size)
        return Integer._of(max(self._size, other._size), (self._value - other._value) % modulus)

    def __mul__(self, other):
        if isinstance(other, Integer):
            return Integer._of(max(self._size, other._size) * 2, self._value * other._value)
        factor = _component(other)
        if factor is None:
            return NotImplemented
        return Integer._of(self._size + 1, self._value * factor)

    def __floordiv__(self, other):
        divisor = _component(other)
        if divisor is None:
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        return Integer._of(self._size, self._value // divisor)

    def __mod__(self, other):
        if isinstance(other, Integer):
            if other.is_zero():
                raise ZeroDivisionError("modulo by zero")
            return Integer._of(other._size, self._value % other._value)
        divisor = _component(other)
        if divisor is None:
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("modulo by zero")
        return self._value % divisor

    def compare(self, other):
        """Return -1, 0 or 1 as this value is below, equal to or above ``other``."""
        return (self._value > other._value) - (self._value < other._value)