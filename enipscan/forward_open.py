"""Forward Open and Forward Close services of the Connection Manager."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .connection_parameters import ConnectionParameters
from .types import Reader

_FORWARD_OPEN = struct.Struct("<BBIIHHIB3xIHIHBB")
_LARGE_FORWARD_OPEN = struct.Struct("<BBIIHHIB3xIIIIBB")
_FORWARD_CLOSE = struct.Struct("<BBHHIBB")

assert _FORWARD_OPEN.size == 36
assert _LARGE_FORWARD_OPEN.size == 40


def _pack_open(codec: struct.Struct, params: ConnectionParameters, o2t: int, t2o: int) -> bytes:
    try:
        header = codec.pack(
            params.priority_time_tick,
            params.timeout_ticks,
            params.o2t_network_connection_id,
            params.t2o_network_connection_id,
            params.connection_serial_number,
            params.originator_vendor_id,
            params.originator_serial_number,
            params.connection_timeout_multiplier,
            params.o2t_rpi,
            o2t,
            params.t2o_rpi,
            t2o,
            params.transport_type_trigger,
            params.connection_path_size,
        )
    except struct.error as exc:
        raise ValueError(f"connection parameter out of range: {exc}") from None
    return header + bytes(params.connection_path)


@dataclass(frozen=True)
class ForwardOpenRequest:
    """Forward Open request with 16-bit network connection parameters."""

    parameters: ConnectionParameters

    def pack(self) -> bytes:
        p = self.parameters
        return _pack_open(
            _FORWARD_OPEN,
            p,
            p.o2t_network_connection_params & 0xFFFF,
            p.t2o_network_connection_params & 0xFFFF,
        )


@dataclass(frozen=True)
class LargeForwardOpenRequest:
    """Large Forward Open request with 32-bit network connection parameters."""

    parameters: ConnectionParameters

    def pack(self) -> bytes:
        p = self.parameters
        return _pack_open(
            _LARGE_FORWARD_OPEN,
            p,
            p.o2t_network_connection_params,
            p.t2o_network_connection_params,
        )


@dataclass(frozen=True)
class ForwardOpenResponse:
    """Successful reply to a Forward Open request."""

    o2t_network_connection_id: int = 0
    t2o_network_connection_id: int = 0
    connection_serial_number: int = 0
    originator_vendor_id: int = 0
    originator_serial_number: int = 0
    o2t_api: int = 0
    t2o_api: int = 0
    application_reply_size: int = 0
    application_reply: bytes = b""

    @classmethod
    def from_bytes(cls, data: bytes) -> ForwardOpenResponse:
        """Parse the reply; the application reply size counts 16-bit words."""
        reader = Reader(data)
        (
            o2t_id,
            t2o_id,
            serial,
            vendor,
            originator_serial,
            o2t_api,
            t2o_api,
            reply_size,
            _reserved,
        ) = reader.read("IIHHIIIBB")
        reply = reader.read_bytes(reply_size * 2)
        return cls(
            o2t_network_connection_id=o2t_id,
            t2o_network_connection_id=t2o_id,
            connection_serial_number=serial,
            originator_vendor_id=vendor,
            originator_serial_number=originator_serial,
            o2t_api=o2t_api,
            t2o_api=t2o_api,
            application_reply_size=reply_size,
            application_reply=reply,
        )


@dataclass
class ForwardCloseRequest:
    """Forward Close request for an open connection."""

    connection_serial_number: int = 0
    originator_vendor_id: int = 0
    originator_serial_number: int = 0
    connection_path: bytes = b""

    def pack(self) -> bytes:
        path = bytes(self.connection_path)
        try:
            header = _FORWARD_CLOSE.pack(
                0,
                0,
                self.connection_serial_number,
                self.originator_vendor_id,
                self.originator_serial_number,
                (len(path) // 2) & 0xFF,
                0,
            )
        except struct.error as exc:
            raise ValueError(f"forward close field out of range: {exc}") from None
        return header + path