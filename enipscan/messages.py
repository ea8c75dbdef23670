"""Message Router request and response of explicit CIP messaging."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from typing import Any

from .epath import EPath
from .types import GeneralStatusCodes, Reader, ServiceCodes

_log = logging.getLogger(__name__)

_HEADER_SIZE = 4


def _as_service(code: int) -> int:
    try:
        return ServiceCodes(code)
    except ValueError:
        return code


def _as_status(code: int) -> int:
    try:
        return GeneralStatusCodes(code)
    except ValueError:
        return code


@dataclass(frozen=True)
class MessageRouterRequest:
    """A service call addressed to an object by an EPATH."""

    service_code: int
    path: EPath
    data: bytes = b""
    use_8_bit_path_segments: bool = False

    def pack(self) -> bytes:
        """Encode as service code, path size in words, path and data."""
        wide = self.use_8_bit_path_segments
        header = bytes((int(self.service_code), self.path.size_in_words(wide)))
        return header + self.path.pack(wide) + bytes(self.data)


@dataclass
class MessageRouterResponse:
    """The reply of the Message Router to a service call."""

    service_code: int = ServiceCodes.GET_ATTRIBUTE_ALL
    general_status_code: int = GeneralStatusCodes.SUCCESS
    additional_status: tuple[int, ...] = ()
    data: bytes = b""
    additional_packet_items: list[Any] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> MessageRouterResponse:
        """Parse a response from its encoded form."""
        data = bytes(data)
        if len(data) < _HEADER_SIZE:
            raise ValueError("Message Router response must have at least 4 bytes")

        reader = Reader(data)
        service, _reserved, status, additional_size = reader.read("BBBB")
        if additional_size * 2 > len(data) - _HEADER_SIZE:
            raise ValueError("Additional status has wrong size")

        raw_status = reader.read_bytes(additional_size * 2)
        additional = tuple(word for (word,) in struct.iter_unpack("<H", raw_status))
        payload = reader.read_bytes(reader.remaining())

        return cls(
            service_code=_as_service(service),
            general_status_code=_as_status(status),
            additional_status=additional,
            data=payload,
        )


def format_status(response: MessageRouterResponse) -> str:
    """Describe the general and additional status of a response."""
    statuses = "".join(f"[0x{status:x}]" for status in response.additional_status)
    return (
        f"Message Router error=0x{int(response.general_status_code):x}"
        f" additional statuses {statuses}"
    )


def log_general_and_additional_status(response: MessageRouterResponse) -> None:
    """Log the status of a failed response as an error."""
    _log.error("%s", format_status(response))