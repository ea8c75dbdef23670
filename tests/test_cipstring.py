import pytest

from enipscan.cipstring import CipShortString, CipString
from enipscan.types import Reader


def test_short_string_pack_prefixes_length_byte():
    assert CipShortString("abc").pack() == b"\x03abc"


def test_short_string_round_trip():
    original = CipShortString("Device Name")
    reader = Reader(original.pack() + b"tail")
    restored = CipShortString.unpack(reader)
    assert restored == original
    assert str(restored) == "Device Name"
    assert reader.read_bytes(4) == b"tail"


def test_string_uses_two_byte_length():
    text = "x" * 300
    packed = CipString(text).pack()
    assert len(packed) == len(text) + 2
    assert CipString.unpack(Reader(packed)) == CipString(text)


def test_str_and_bytes_construct_the_same_value():
    assert CipShortString("Hz") == CipShortString(b"Hz")
    assert CipShortString("Hz").length == len("Hz")


def test_empty_string_round_trip():
    empty = CipShortString()
    assert empty.length == 0
    assert CipShortString.unpack(Reader(empty.pack())) == empty


def test_short_string_too_long_raises():
    with pytest.raises(ValueError):
        CipShortString("a" * 256).pack()


def test_unpack_truncated_raises():
    packed = CipShortString("abcdef").pack()
    with pytest.raises(ValueError):
        CipShortString.unpack(Reader(packed[:-1]))


def test_non_latin1_text_raises():
    with pytest.raises(ValueError):
        CipShortString("\u20ac")