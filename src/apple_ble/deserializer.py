"""Deserializer: continuity wire bytes → message record."""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from apple_ble.address import AddressLike
from apple_ble.errors import TruncatedInputError
from apple_ble.messages import HEADER_SIZE, Message
from apple_ble.types import WireType

T = TypeVar("T", bound=Message)


class Deserializer:
    """Reads values from a byte buffer at fixed offsets.

    The message type and length bytes are skipped, not checked: any value
    is accepted at those positions.
    """

    def __init__(self, data: bytes | bytearray) -> None:
        self.data = data
        self.pos = 0

    def _require(self, size: int) -> None:
        if len(self.data) < self.pos + size:
            raise TruncatedInputError(self.pos + size, len(self.data))

    def skip(self, size: int) -> None:
        self._require(size)
        self.pos += size

    def read(self, wire_type: WireType) -> Any:
        self._require(wire_type.size)
        value = wire_type.unpack(self.data, self.pos)
        self.pos += wire_type.size
        return value

    def deserialize_message(self, model_type: Type[T], address: Optional[AddressLike] = None) -> T:
        needed = model_type.min_decode_size()
        if len(self.data) - self.pos < needed:
            raise TruncatedInputError(needed, len(self.data) - self.pos, model_type.kind.value)
        if needed == 0:
            return model_type()
        self.skip(HEADER_SIZE + len(model_type.prefix))
        return model_type(**model_type.read_fields(self, address))
