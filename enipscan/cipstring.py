"""CIP character strings with a length prefix."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .types import Reader

_ENCODING = "latin-1"


@dataclass(frozen=True)
class _CipBaseString:
    data: bytes = b""

    def __post_init__(self) -> None:
        value = self.data
        if isinstance(value, str):
            value = value.encode(_ENCODING)
        object.__setattr__(self, "data", bytes(value))

    def __str__(self) -> str:
        return self.data.decode(_ENCODING)

    @property
    def length(self) -> int:
        """Number of characters in the string."""
        return len(self.data)


def _pack_prefixed(string: _CipBaseString, length_format: str) -> bytes:
    try:
        prefix = struct.pack("<" + length_format, len(string.data))
    except struct.error:
        raise ValueError(
            f"string of {len(string.data)} characters is too long for "
            f"{type(string).__name__}"
        ) from None
    return prefix + string.data


def _read_prefixed(reader: Reader, length_format: str) -> bytes:
    length = reader.read(length_format)
    return reader.read_bytes(length)


class CipShortString(_CipBaseString):
    """SHORT_STRING: one-byte length followed by the characters."""

    def pack(self) -> bytes:
        """Encode as a one-byte length followed by the characters."""
        return _pack_prefixed(self, "B")

    @classmethod
    def unpack(cls, reader: Reader) -> CipShortString:
        """Read a SHORT_STRING from a reader."""
        return cls(_read_prefixed(reader, "B"))


class CipString(_CipBaseString):
    """STRING: two-byte length followed by the characters."""

    def pack(self) -> bytes:
        """Encode as a two-byte length followed by the characters."""
        return _pack_prefixed(self, "H")

    @classmethod
    def unpack(cls, reader: Reader) -> CipString:
        """Read a STRING from a reader."""
        return cls(_read_prefixed(reader, "H"))