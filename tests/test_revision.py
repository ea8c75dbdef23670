import pytest

from enipscan.revision import CipRevision
from enipscan.types import Reader


def test_str_is_major_dot_minor():
    assert str(CipRevision(1, 2)) == "1.2"


def test_default_is_zero_zero():
    assert CipRevision() == CipRevision(0, 0)


def test_equality_compares_both_parts():
    assert CipRevision(3, 4) == CipRevision(3, 4)
    assert not CipRevision(3, 4) == CipRevision(3, 5)
    assert not CipRevision(3, 4) == CipRevision(2, 4)


def test_pack_is_major_then_minor():
    packed = CipRevision(7, 9).pack()
    assert packed == bytes([7, 9])


def test_round_trip_through_reader():
    revision = CipRevision(255, 0)
    reader = Reader(revision.pack() + b"\x01")
    assert CipRevision.unpack(reader) == revision
    assert reader.remaining() == 1


def test_unpack_short_data_raises():
    with pytest.raises(ValueError):
        CipRevision.unpack(Reader(b"\x01"))


@pytest.mark.parametrize("major, minor", [(256, 0), (0, -1)])
def test_out_of_range_raises(major, minor):
    with pytest.raises(ValueError):
        CipRevision(major, minor)