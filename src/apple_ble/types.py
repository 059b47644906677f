"""Type annotation helpers for mapping record fields to wire types."""

from __future__ import annotations

import ipaddress
import struct
from typing import Any, get_args


class WireType:
    """Marker for explicit wire type annotation.

    Every wire type is big-endian (network order) and packed, no alignment.
    """

    def __init__(self, size: int) -> None:
        self.size = size

    def pack(self, value: Any) -> bytes:
        raise NotImplementedError

    def unpack(self, data: bytes | bytearray, offset: int) -> Any:
        raise NotImplementedError


class Scalar(WireType):
    def __init__(self, fmt: str, size: int) -> None:
        super().__init__(size)
        self.fmt = fmt

    def pack(self, value: int) -> bytes:
        return struct.pack(self.fmt, value)

    def unpack(self, data: bytes | bytearray, offset: int) -> int:
        (value,) = struct.unpack_from(self.fmt, data, offset)
        return value


class FixedBytes(WireType):
    """Opaque byte string of a fixed length."""

    def pack(self, value: bytes) -> bytes:
        if len(value) != self.size:
            raise ValueError(f"Expected {self.size} bytes, got {len(value)}")
        return bytes(value)

    def unpack(self, data: bytes | bytearray, offset: int) -> bytes:
        return bytes(data[offset : offset + self.size])


class IPAddress(WireType):
    def __init__(self, address_type: type, size: int) -> None:
        super().__init__(size)
        self.address_type = address_type

    def pack(self, value: Any) -> bytes:
        return self.address_type(value).packed

    def unpack(self, data: bytes | bytearray, offset: int) -> Any:
        return self.address_type(bytes(data[offset : offset + self.size]))


UInt8 = Scalar(">B", 1)
UInt16 = Scalar(">H", 2)
Token = FixedBytes(2)
IPv4 = IPAddress(ipaddress.IPv4Address, 4)
IPv6 = IPAddress(ipaddress.IPv6Address, 16)


def get_wire_type(annotation: Any) -> WireType | None:
    """Extract WireType from Annotated[int, UInt16] style annotations."""
    if isinstance(annotation, WireType):
        return annotation
    for arg in get_args(annotation):
        if isinstance(arg, WireType):
            return arg
    return None
