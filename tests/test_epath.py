import pytest

from enipscan.epath import EPath, EPathError


def test_pack_16_bit_segments():
    assert EPath(0x01, 1, 1).pack() == bytes(
        [0x21, 0x00, 0x01, 0x00, 0x25, 0x00, 0x01, 0x00, 0x31, 0x00, 0x01, 0x00]
    )


def test_pack_8_bit_segments():
    assert EPath(0x01, 1, 1).pack(True) == bytes([0x20, 0x01, 0x24, 0x01, 0x30, 0x01])


def test_str_lists_present_segments():
    assert str(EPath(1, 2, 3)) == "[classId=1 objectId=2 attributeId=3]"


def test_str_omits_absent_segments():
    assert "objectId" not in str(EPath(6))
    assert "attributeId" not in str(EPath(6, 1))


@pytest.mark.parametrize(
    "path", [EPath(), EPath(0x0F), EPath(0x0F, 2), EPath(0x0F, 2, 6), EPath(300, 1000, 7)]
)
def test_size_in_words_matches_encoding(path):
    assert path.size_in_words(False) * 2 == len(path.pack(False))
    assert path.size_in_words(True) * 2 == len(path.pack(True))


def test_size_counts_given_ids():
    assert EPath().size == 0
    assert EPath(6).size == 1
    assert EPath(6, 1).size == 2
    assert EPath(6, 1, 2).size == 3


@pytest.mark.parametrize("path", [EPath(0x0F), EPath(0x0F, 2), EPath(0x0F, 2, 6), EPath(300, 1000, 7)])
def test_round_trip_16_bit(path):
    assert EPath.from_bytes(path.pack()) == path


@pytest.mark.parametrize("path", [EPath(1), EPath(4, 151), EPath(4, 151, 3)])
def test_round_trip_8_bit(path):
    assert EPath.from_bytes(path.pack(True)) == path


def test_empty_path_packs_to_nothing_and_parses_back():
    assert EPath().pack() == b""
    assert EPath.from_bytes(b"") == EPath()


def test_8_bit_encoding_truncates_wide_ids():
    path = EPath(0x0102, 1)
    assert EPath.from_bytes(path.pack(True)) == EPath(path.class_id & 0xFF, 1)


def test_equality_includes_size():
    assert not EPath(1) == EPath(1, 0)


def test_unknown_segment_raises():
    with pytest.raises(EPathError, match="Unknown EPATH segment"):
        EPath.from_bytes(bytes([0x99, 0x01]))


def test_truncated_segment_raises():
    with pytest.raises(EPathError, match="Wrong EPATH format"):
        EPath.from_bytes(EPath(1, 2).pack()[:-1])


def test_epath_error_is_value_error():
    with pytest.raises(ValueError):
        EPath.from_bytes(bytes([0x21, 0x00]))


def test_instance_without_class_raises():
    with pytest.raises(ValueError):
        EPath(None, 1)


def test_attribute_without_instance_raises():
    with pytest.raises(ValueError):
        EPath(1, None, 2)


def test_id_out_of_range_raises():
    with pytest.raises(ValueError):
        EPath(0x10000)