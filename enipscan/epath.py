"""Logical EPATH of class, instance and attribute segments."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from .types import Reader


class EPathError(ValueError):
    """Raised when an encoded EPATH cannot be parsed."""


class _Segment(IntEnum):
    CLASS_8_BITS = 0x20
    CLASS_16_BITS = 0x21
    INSTANCE_8_BITS = 0x24
    INSTANCE_16_BITS = 0x25
    ATTRIBUTE_8_BITS = 0x30
    ATTRIBUTE_16_BITS = 0x31


_FIELDS = ("class_id", "object_id", "attribute_id")
_SEGMENTS_8 = (_Segment.CLASS_8_BITS, _Segment.INSTANCE_8_BITS, _Segment.ATTRIBUTE_8_BITS)
_SEGMENTS_16 = (_Segment.CLASS_16_BITS, _Segment.INSTANCE_16_BITS, _Segment.ATTRIBUTE_16_BITS)
_FIELD_OF_SEGMENT = {
    _Segment.CLASS_8_BITS: ("class_id", False),
    _Segment.CLASS_16_BITS: ("class_id", True),
    _Segment.INSTANCE_8_BITS: ("object_id", False),
    _Segment.INSTANCE_16_BITS: ("object_id", True),
    _Segment.ATTRIBUTE_8_BITS: ("attribute_id", False),
    _Segment.ATTRIBUTE_16_BITS: ("attribute_id", True),
}


@dataclass(frozen=True, init=False)
class EPath:
    """A path to a class, an instance or an attribute.

    ``size`` is the number of segments the path holds (0 to 3).
    """

    class_id: int
    object_id: int
    attribute_id: int
    size: int

    def __init__(
        self,
        class_id: int | None = None,
        object_id: int | None = None,
        attribute_id: int | None = None,
    ) -> None:
        if object_id is not None and class_id is None:
            raise ValueError("an instance needs a class")
        if attribute_id is not None and object_id is None:
            raise ValueError("an attribute needs an instance")
        given = (class_id, object_id, attribute_id)
        size = sum(value is not None for value in given)
        values = [0 if value is None else value for value in given]
        for name, value in zip(_FIELDS, values):
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} out of range 0..65535: {value}")
        self._assign(*values, size)

    def _assign(self, class_id: int, object_id: int, attribute_id: int, size: int) -> None:
        object.__setattr__(self, "class_id", class_id)
        object.__setattr__(self, "object_id", object_id)
        object.__setattr__(self, "attribute_id", attribute_id)
        object.__setattr__(self, "size", size)

    def _ids(self) -> tuple[int, ...]:
        return (self.class_id, self.object_id, self.attribute_id)[: self.size]

    def pack(self, use_8_bit_path_segments: bool = False) -> bytes:
        """Encode as padded path segments, 8-bit or 16-bit logical."""
        if use_8_bit_path_segments:
            return b"".join(
                bytes((segment, value & 0xFF))
                for segment, value in zip(_SEGMENTS_8, self._ids())
            )
        return b"".join(
            struct.pack("<HH", segment, value)
            for segment, value in zip(_SEGMENTS_16, self._ids())
        )

    def size_in_words(self, use_8_bit_path_segments: bool = False) -> int:
        """Length of the encoded path in 16-bit words."""
        return self.size if use_8_bit_path_segments else self.size * 2

    def __str__(self) -> str:
        parts = [f"classId={self.class_id}"]
        if self.size > 1:
            parts.append(f"objectId={self.object_id}")
            if self.size > 2:
                parts.append(f"attributeId={self.attribute_id}")
        return "[" + " ".join(parts) + "]"

    @classmethod
    def from_bytes(cls, data: bytes) -> EPath:
        """Parse padded path segments."""
        reader = Reader(data)
        ids = dict.fromkeys(_FIELDS, 0)
        try:
            while reader.remaining():
                code = reader.read("B")
                try:
                    name, wide = _FIELD_OF_SEGMENT[_Segment(code)]
                except ValueError:
                    raise EPathError(f"Unknown EPATH segment ={code}") from None
                if wide:
                    reader.read_bytes(1)
                    ids[name] = reader.read("H")
                else:
                    ids[name] = reader.read("B")
        except EPathError:
            raise
        except ValueError:
            raise EPathError("Wrong EPATH format") from None

        size = 0
        if ids["class_id"] > 0:
            size = 1
            if ids["object_id"] > 0:
                size = 2
                if ids["attribute_id"] > 0:
                    size = 3

        path = cls.__new__(cls)
        path._assign(ids["class_id"], ids["object_id"], ids["attribute_id"], size)
        return path