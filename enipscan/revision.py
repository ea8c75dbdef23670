"""The CIP revision pair (major.minor)."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Reader


@dataclass(frozen=True)
class CipRevision:
    """A major/minor revision, each one USINT."""

    major: int = 0
    minor: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} revision out of range 0..255: {value}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    def pack(self) -> bytes:
        """Encode as two bytes: major then minor."""
        return bytes((self.major, self.minor))

    @classmethod
    def unpack(cls, reader: Reader) -> CipRevision:
        """Read a revision from a reader."""
        major, minor = reader.read("BB")
        return cls(major, minor)