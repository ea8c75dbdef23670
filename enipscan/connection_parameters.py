"""Parameters of a connection opened through the Connection Manager."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_UINT32_MASK = 0xFFFFFFFF
_LARGE_SHIFT = 16
_SIZE_MASK = 0x000001FF
_LARGE_SIZE_MASK = 0x0000FFFF


@dataclass
class ConnectionParameters:
    """Settings of a Forward Open request."""

    priority_time_tick: int = 0
    timeout_ticks: int = 0
    o2t_network_connection_id: int = 0
    t2o_network_connection_id: int = 0
    connection_serial_number: int = 0
    originator_vendor_id: int = 0
    originator_serial_number: int = 0
    connection_timeout_multiplier: int = 0
    o2t_rpi: int = 0
    o2t_network_connection_params: int = 0
    t2o_rpi: int = 0
    t2o_network_connection_params: int = 0
    transport_type_trigger: int = 0
    connection_path_size: int = 0
    o2t_real_time_format: bool = False
    t2o_real_time_format: bool = False
    connection_path: bytes = b""


class NetworkConnectionParams(IntEnum):
    """Bits of the 16-bit network connection parameters and the transport trigger."""

    # Redundant owner
    REDUNDANT = 1 << 15
    OWNED = 0
    TYPE0 = 0

    # Connection type
    MULTICAST = 1 << 13
    P2P = 2 << 13

    # Priorities
    LOW_PRIORITY = 0
    HIGH_PRIORITY = 1 << 10
    SCHEDULED_PRIORITY = 2 << 10
    URGENT = 3 << 10

    # Type of size
    FIXED = 0
    VARIABLE = 1 << 9

    # Type of trigger
    TRIG_CYCLIC = 0
    TRIG_CHANGE = 1 << 4
    TRIG_APP = 2 << 4

    CLASS0 = 0
    CLASS1 = 1
    CLASS2 = 2
    CLASS3 = 3
    TRANSP_SERVER = 0x80


class RedundantOwner(IntEnum):
    EXCLUSIVE = 0
    REDUNDANT = 1


class ConnectionType(IntEnum):
    NULL_TYPE = 0
    MULTICAST = 1
    P2P = 2
    RESERVED = 3


class Priority(IntEnum):
    LOW_PRIORITY = 0
    HIGH_PRIORITY = 1
    SCHEDULED = 2
    URGENT = 3


class SizeType(IntEnum):
    FIXED = 0
    VARIABLE = 1


class NetworkConnectionParametersBuilder:
    """Builds and inspects network connection parameters.

    With ``lfo`` set the value uses the 32-bit layout of Large Forward Open.
    """

    def __init__(self, value: int = 0, lfo: bool = False) -> None:
        self._value = int(value) & _UINT32_MASK
        self._lfo = bool(lfo)

    @property
    def lfo(self) -> bool:
        """True when the 32-bit Large Forward Open layout is used."""
        return self._lfo

    def _shift(self, bit: int) -> int:
        return bit + _LARGE_SHIFT if self._lfo else bit

    def _set(self, value: int, bit: int) -> NetworkConnectionParametersBuilder:
        self._value = (self._value | (int(value) << self._shift(bit))) & _UINT32_MASK
        return self

    def _get(self, bit: int, mask: int) -> int:
        return (self._value >> self._shift(bit)) & mask

    @property
    def _size_mask(self) -> int:
        return _LARGE_SIZE_MASK if self._lfo else _SIZE_MASK

    def set_redundant_owner(self, value: RedundantOwner) -> NetworkConnectionParametersBuilder:
        return self._set(value, 15)

    def set_connection_type(self, value: ConnectionType) -> NetworkConnectionParametersBuilder:
        return self._set(value, 13)

    def set_priority(self, value: Priority) -> NetworkConnectionParametersBuilder:
        return self._set(value, 10)

    def set_type(self, value: SizeType) -> NetworkConnectionParametersBuilder:
        return self._set(value, 9)

    def set_connection_size(self, value: int) -> NetworkConnectionParametersBuilder:
        self._value |= int(value) & self._size_mask
        return self

    def build(self) -> int:
        """Return the encoded parameters."""
        return self._value

    @property
    def redundant_owner(self) -> RedundantOwner:
        return RedundantOwner(self._get(15, 1))

    @property
    def connection_type(self) -> ConnectionType:
        return ConnectionType(self._get(13, 3))

    @property
    def priority(self) -> Priority:
        return Priority(self._get(10, 3))

    @property
    def size_type(self) -> SizeType:
        return SizeType(self._get(9, 1))

    @property
    def connection_size(self) -> int:
        return self._value & self._size_mask