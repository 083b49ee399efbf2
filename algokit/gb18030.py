"""Reading and writing single GB18030 characters as packed integers."""


def read_char(data, start=0):
    """Read one GB18030 character at ``start``; return ``(word, length)``."""
    if not 0 <= start < len(data):
        raise ValueError(f"start {start} is outside the data")
    lead = data[start]
    if lead <= 0x7F:
        return lead, 1
    if not 0x81 <= lead <= 0xFE:
        raise ValueError(f"invalid GB18030 lead byte 0x{lead:02X}")
    if start + 1 >= len(data):
        raise ValueError("truncated GB18030 character")
    second = data[start + 1]
    if 0x40 <= second <= 0xFE:
        return (lead << 8) | second, 2
    if start + 4 > len(data):
        raise ValueError("truncated GB18030 character")
    return int.from_bytes(bytes(data[start:start + 4]), "big"), 4


def encode_char(word):
    """Return the bytes of a packed GB18030 character."""
    if not 0 <= word <= 0xFFFFFFFF:
        raise ValueError(f"word {word} does not fit in 32 bits")
    raw = word.to_bytes(4, "big")
    if raw[0]:
        return raw
    if raw[2]:
        return raw[2:]
    return raw[3:]