"""Interface to the Identity Object (class 0x01)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base_object import BaseObject, RequestSender
from .cipstring import CipShortString
from .epath import EPath
from .messages import log_general_and_additional_status
from .revision import CipRevision
from .types import GeneralStatusCodes, Reader, ServiceCodes


@dataclass
class IdentityObject(BaseObject):
    """Identity of a device: vendor, type, product, revision, status, serial and name."""

    CLASS_ID: ClassVar[int] = 0x01

    class_id: int = field(default=0x01, init=False)
    instance_id: int = 0
    vendor_id: int = 0
    device_type: int = 0
    product_code: int = 0
    revision: CipRevision = field(default_factory=CipRevision)
    status: int = 0
    serial_number: int = 0
    product_name: str = ""

    @classmethod
    def from_bytes(cls, instance_id: int, data: bytes) -> IdentityObject:
        """Decode the reply of Get_Attribute_All of the Identity Object."""
        reader = Reader(data)
        try:
            vendor_id, device_type, product_code = reader.read("HHH")
            revision = CipRevision.unpack(reader)
            status, serial_number = reader.read("HI")
            product_name = CipShortString.unpack(reader)
        except ValueError:
            raise ValueError("Not enough data in the response") from None
        return cls(
            instance_id=instance_id,
            vendor_id=vendor_id,
            device_type=device_type,
            product_code=product_code,
            revision=revision,
            status=status,
            serial_number=serial_number,
            product_name=str(product_name),
        )

    @classmethod
    def read(
        cls, instance_id: int, session: object, message_router: RequestSender
    ) -> IdentityObject:
        """Read all attributes of the Identity Object from a device."""
        response = message_router.send_request(
            session, ServiceCodes.GET_ATTRIBUTE_ALL, EPath(cls.CLASS_ID, 1), b""
        )
        if response.general_status_code != GeneralStatusCodes.SUCCESS:
            log_general_and_additional_status(response)
            raise RuntimeError("Failed to read all attributes")
        return cls.from_bytes(instance_id, response.data)