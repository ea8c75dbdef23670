"""Common base of the CIP object interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .epath import EPath
from .messages import MessageRouterResponse

_UINT_MAX = 0xFFFF


@runtime_checkable
class RequestSender(Protocol):
    """Anything that sends an explicit request and returns the router's reply."""

    def send_request(
        self, session: object, service: int, path: EPath, data: bytes = b""
    ) -> MessageRouterResponse:
        """Call ``service`` on the object at ``path`` over ``session``."""
        ...


@dataclass
class BaseObject:
    """A CIP object instance identified by its class ID and instance ID."""

    class_id: int
    instance_id: int

    def __post_init__(self) -> None:
        for name in ("class_id", "instance_id"):
            value = getattr(self, name)
            if not 0 <= value <= _UINT_MAX:
                raise ValueError(f"{name} out of range 0..{_UINT_MAX}: {value}")