"""Interface to the Parameter Object (class 0x0F)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar

from .base_object import BaseObject, RequestSender
from .cipstring import CipShortString
from .epath import EPath
from .messages import MessageRouterResponse, log_general_and_additional_status
from .types import (
    CipDataTypes,
    GeneralStatusCodes,
    Reader,
    ServiceCodes,
    decode_value,
    encode_value,
)

_log = logging.getLogger(__name__)

_FLOAT_TYPES = frozenset({CipDataTypes.REAL, CipDataTypes.LREAL})
_SCALING_BLOCK_SIZE = 16


class _Attribute(IntEnum):
    VALUE = 1
    LINK_PATH_SIZE = 2
    DESCRIPTOR = 4
    DATA_TYPE = 5
    DATA_SIZE = 6
    NAME_STRING = 7
    UNIT_STRING = 8
    HELP_STRING = 9
    MIN_VALUE = 10
    MAX_VALUE = 11
    DEFAULT_VALUE = 12
    SCALING_MULTIPLIER = 13
    SCALING_DIVISOR = 14
    SCALING_BASE = 15
    SCALING_OFFSET = 16


_SUPPORTS_SCALING = 1 << 2
_READ_ONLY = 1 << 4


def _as_data_type(code: int) -> int:
    try:
        return CipDataTypes(code)
    except ValueError:
        return code


def _cast(data_type: CipDataTypes | int, value: float) -> Any:
    """Convert a real number to the Python value of a CIP type, truncating integers."""
    data_type = CipDataTypes(data_type)
    if data_type in _FLOAT_TYPES:
        return float(value)
    if data_type is CipDataTypes.BOOL:
        return bool(value)
    return int(value)


def _check(response: MessageRouterResponse, message: str) -> None:
    if response.general_status_code != GeneralStatusCodes.SUCCESS:
        log_general_and_additional_status(response)
        raise RuntimeError(message)


@dataclass
class ParameterObject(BaseObject):
    """A device parameter: its raw value, limits, texts and scaling.

    Values are kept as raw little-endian bytes and decoded on request
    with the CIP data type the caller names.
    """

    CLASS_ID: ClassVar[int] = 0x0F

    class_id: int = field(default=0x0F, init=False)
    instance_id: int = 0
    has_full_attributes: bool = False
    is_scalable: bool = False
    is_read_only: bool = False
    parameter: int = 0
    value_data: bytes = b""
    data_type: int = CipDataTypes.ANY
    name: str = ""
    units: str = ""
    help_text: str = ""
    min_data: bytes = b""
    max_data: bytes = b""
    default_data: bytes = b""
    scaling_multiplier: int = 1
    scaling_divisor: int = 1
    scaling_base: int = 1
    scaling_offset: int = 0
    precision: int = 0
    message_router: RequestSender | None = field(
        default=None, compare=False, repr=False
    )

    @classmethod
    def read(
        cls,
        instance_id: int,
        full_attributes: bool,
        session: object,
        message_router: RequestSender,
    ) -> ParameterObject:
        """Read the parameter's attributes from a device."""
        _log.debug("Read data from parameter ID=%d", instance_id)

        response = message_router.send_request(
            session,
            ServiceCodes.GET_ATTRIBUTE_SINGLE,
            EPath(cls.CLASS_ID, instance_id, _Attribute.DATA_SIZE),
            b"",
        )
        _check(response, "Failed to read data size of the parameter")
        try:
            data_size = Reader(response.data).read("B")
        except ValueError:
            raise ValueError("Not enough data in the response") from None

        response = message_router.send_request(
            session, ServiceCodes.GET_ATTRIBUTE_ALL, EPath(cls.CLASS_ID, instance_id), b""
        )
        _check(response, "Failed to read all attributes")

        obj = cls(
            instance_id=instance_id,
            has_full_attributes=bool(full_attributes),
            value_data=bytes(data_size),
            min_data=bytes(data_size),
            max_data=bytes(data_size),
            default_data=bytes(data_size),
            message_router=message_router,
        )

        reader = Reader(response.data)
        try:
            obj.value_data = reader.read_bytes(data_size)
            link_path_size = reader.read("B")
            reader.read_bytes(link_path_size)
            descriptor, type_code = reader.read("HB")

            obj.parameter = instance_id
            obj.data_type = _as_data_type(type_code)
            obj.is_scalable = bool(descriptor & _SUPPORTS_SCALING)
            obj.is_read_only = bool(descriptor & _READ_ONLY)
            _log.debug(
                "Parameter object ID=%d has descriptor=0x%x scalable=%s readonly=%s",
                instance_id,
                descriptor,
                obj.is_scalable,
                obj.is_read_only,
            )

            if obj.has_full_attributes:
                reader.read_bytes(1)
                obj.name = str(CipShortString.unpack(reader))
                obj.units = str(CipShortString.unpack(reader))
                obj.help_text = str(CipShortString.unpack(reader))
                obj.min_data = reader.read_bytes(data_size)
                obj.max_data = reader.read_bytes(data_size)
                obj.default_data = reader.read_bytes(data_size)

                if obj.is_scalable:
                    # The scaling attributes are read one by one below.
                    reader.read_bytes(_SCALING_BLOCK_SIZE)
                    obj.precision = reader.read("B")
                    obj._read_scaling(session, message_router)
        except ValueError:
            raise ValueError("Not enough data in the response") from None

        _log.debug(
            "Read Parameter Object ID=%d ValueSize=%d ValueType=0x%x Name=%s",
            instance_id,
            len(obj.value_data),
            int(obj.data_type),
            obj.name,
        )
        return obj

    def _read_scaling(self, session: object, message_router: RequestSender) -> None:
        chunks = []
        for attribute in range(_Attribute.SCALING_MULTIPLIER, _Attribute.SCALING_OFFSET + 1):
            response = message_router.send_request(
                session,
                ServiceCodes.GET_ATTRIBUTE_SINGLE,
                EPath(self.CLASS_ID, self.instance_id, attribute),
                b"",
            )
            _check(response, f"Failed to read value of attribute={attribute}")
            chunks.append(response.data)

        (
            self.scaling_multiplier,
            self.scaling_divisor,
            self.scaling_base,
            self.scaling_offset,
        ) = Reader(b"".join(chunks)).read("HHHh")

    def update_value(self, session: object) -> None:
        """Read the current value of the parameter from the device."""
        if self.message_router is None:
            raise RuntimeError("No message router to read the value with")
        response = self.message_router.send_request(
            session,
            ServiceCodes.GET_ATTRIBUTE_SINGLE,
            EPath(self.CLASS_ID, self.instance_id, _Attribute.VALUE),
            b"",
        )
        _check(response, "Failed to read value")
        try:
            self.value_data = Reader(response.data).read_bytes(len(self.value_data))
        except ValueError:
            raise ValueError("Not enough data in the response") from None

    def actual_to_eng_value(self, actual_value: float) -> float:
        """Scale an actual value to engineering units."""
        if not self.is_scalable:
            return actual_value
        return ((actual_value + self.scaling_offset) * self.scaling_multiplier * self.scaling_base) / (
            self.scaling_divisor * 10.0 ** self.precision
        )

    def eng_to_actual_value(self, eng_value: float) -> float:
        """Convert a value in engineering units back to an actual value."""
        if not self.is_scalable:
            return eng_value
        return (eng_value * self.scaling_divisor * 10.0 ** self.precision) / (
            self.scaling_multiplier * self.scaling_base
        ) - self.scaling_offset

    def _eng(self, data_type: CipDataTypes | int, data: bytes) -> float:
        return self.actual_to_eng_value(float(decode_value(data_type, data)))

    def _from_eng(self, data_type: CipDataTypes | int, value: float) -> bytes:
        return encode_value(data_type, _cast(data_type, self.eng_to_actual_value(value)))

    def actual_value(self, data_type: CipDataTypes | int) -> Any:
        """The value as read from the device, decoded as ``data_type``."""
        return decode_value(data_type, self.value_data)

    def eng_value(self, data_type: CipDataTypes | int) -> float:
        """The value in engineering units."""
        return self._eng(data_type, self.value_data)

    def min_value(self, data_type: CipDataTypes | int) -> Any:
        """The minimal value, decoded as ``data_type``."""
        return decode_value(data_type, self.min_data)

    def eng_min_value(self, data_type: CipDataTypes | int) -> float:
        """The minimal value in engineering units."""
        return self._eng(data_type, self.min_data)

    def set_eng_min_value(self, data_type: CipDataTypes | int, value: float) -> None:
        """Set the minimal value from engineering units."""
        self.min_data = self._from_eng(data_type, value)

    def max_value(self, data_type: CipDataTypes | int) -> Any:
        """The maximal value, decoded as ``data_type``."""
        return decode_value(data_type, self.max_data)

    def eng_max_value(self, data_type: CipDataTypes | int) -> float:
        """The maximal value in engineering units."""
        return self._eng(data_type, self.max_data)

    def set_eng_max_value(self, data_type: CipDataTypes | int, value: float) -> None:
        """Set the maximal value from engineering units."""
        self.max_data = self._from_eng(data_type, value)

    def default_value(self, data_type: CipDataTypes | int) -> Any:
        """The default value, decoded as ``data_type``."""
        return decode_value(data_type, self.default_data)

    def eng_default_value(self, data_type: CipDataTypes | int) -> float:
        """The default value in engineering units."""
        return self._eng(data_type, self.default_data)

    def set_eng_default_value(self, data_type: CipDataTypes | int, value: float) -> None:
        """Set the default value from engineering units."""
        self.default_data = self._from_eng(data_type, value)