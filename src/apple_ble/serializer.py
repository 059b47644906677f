"""Serializer: message record → continuity wire bytes."""

from __future__ import annotations

from typing import Any

from apple_ble.messages import Message
from apple_ble.types import WireType


class Serializer:
    """Writes values into a bytearray, packed and big-endian."""

    def __init__(self) -> None:
        self.buf = bytearray()

    def finalize(self) -> bytearray:
        return self.buf

    def _write_raw(self, data: bytes) -> None:
        self.buf.extend(data)

    def write_header(self, tag: int, length: int) -> None:
        self._write_raw(bytes([tag & 0xFF, length & 0xFF]))

    def write(self, value: Any, wire_type: WireType) -> None:
        self._write_raw(wire_type.pack(value))

    def serialize_message(self, message: Message) -> None:
        self.write_header(message.tag, message.length)
        self._write_raw(message.prefix)
        for value, wire_type in message.wire_values():
            self.write(value, wire_type)
