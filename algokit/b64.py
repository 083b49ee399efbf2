"""Base64 encoding and a lenient decoder."""

import base64

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def encode(data):
    """Encode bytes as a padded Base64 string."""
    return base64.b64encode(bytes(data)).decode("ascii")


def index_of_code(c):
    """Return the alphabet index of ``c``, or 0 for characters outside it."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    index = ALPHABET.find(c)
    return index if index >= 0 else 0


def decode(text):
    """Decode Base64 text in groups of four characters.

    Unknown characters (padding included) count as zero, a trailing partial
    group is ignored, and each group's bytes stop at the first zero byte.
    """
    out = bytearray()
    for start in range(0, len(text) - 3, 4):
        number = 0
        for ch in text[start:start + 4]:
            number = (number << 6) | index_of_code(ch)
        out += number.to_bytes(3, "big").split(b"\0", 1)[0]
    return bytes(out)