import pytest
from hypothesis import given, strategies as st

from algokit.gb18030 import encode_char, read_char

non_surrogates = (
    st.integers(0, 0x10FFFF).filter(lambda c: not 0xD800 <= c <= 0xDFFF).map(chr)
)


def test_read_ascii_in_middle():
    assert read_char(b"abc", 1) == (ord("b"), 1)


def test_encode_ascii():
    assert encode_char(ord("A")) == b"A"


def test_two_byte_character():
    raw = "中".encode("gb18030")
    word, length = read_char(raw, 0)
    assert length == 2
    assert word == int.from_bytes(raw, "big")
    assert encode_char(word) == raw


def test_four_byte_character():
    raw = "\u0080".encode("gb18030")
    word, length = read_char(raw)
    assert length == 4
    assert encode_char(word) == raw


@given(non_surrogates)
def test_round_trip_through_codec(ch):
    raw = ch.encode("gb18030")
    word, length = read_char(raw + b"tail", 0)
    assert length == len(raw)
    assert encode_char(word) == raw


@pytest.mark.parametrize("data", [b"\x80", b"\xff", b"\x81", b"\x81\x30\x81"])
def test_invalid_or_truncated(data):
    with pytest.raises(ValueError):
        read_char(data, 0)


def test_start_out_of_range():
    with pytest.raises(ValueError):
        read_char(b"a", 3)


def test_encode_rejects_large_word():
    with pytest.raises(ValueError):
        encode_char(2**32)