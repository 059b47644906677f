"""Continuity message records, one frozen pydantic model per message kind.

Each record declares its wire layout as class variables:

    tag      message type byte (offset 0)
    length   value of the length byte (offset 1), fixed per kind
    prefix   constant bytes written right after the two header bytes

followed by the annotated fields in declaration order. Records that
deviate from that (AirDrop's duplicated email token, FindMy's split
public key) override ``wire_values`` / ``read_fields``.
"""

from __future__ import annotations

from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from apple_ble.address import AddressLike, parse_address
from apple_ble.constants import DEVICE_ADDRESS_SIZE, PUBLIC_KEY_SIZE, TOKEN_SIZE, MessageType
from apple_ble.errors import ValidationRejectedError
from apple_ble.tokens import identifier_token
from apple_ble.types import IPv4, IPv6, FixedBytes, Token, UInt8, UInt16, WireType, get_wire_type

if TYPE_CHECKING:
    from apple_ble.deserializer import Deserializer

HEADER_SIZE = 2  # message type + length


class MessageKind(str, Enum):
    AIRDROP = "airdrop"
    AIRPLAY_SOURCE = "airplay_source"
    AIRPLAY_TARGET = "airplay_target"
    AIRPRINT = "airprint"
    FINDMY = "findmy"


TokenBytes = Annotated[bytes, Token, Field(min_length=TOKEN_SIZE, max_length=TOKEN_SIZE)]


class Message(BaseModel):
    """Base class for all continuity message records."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[MessageKind]
    tag: ClassVar[MessageType]
    length: ClassVar[int]
    prefix: ClassVar[bytes] = b""
    wire_size: ClassVar[int]

    def validate_record(self) -> None:
        """Reject this record before encoding. Accepts everything by default."""

    def wire_values(self) -> Iterator[tuple[Any, WireType]]:
        """Yield (value, wire type) pairs in wire order, after header and prefix."""
        for name, field_info in type(self).model_fields.items():
            yield getattr(self, name), _field_wire_type(field_info)

    @classmethod
    def min_decode_size(cls) -> int:
        return HEADER_SIZE + len(cls.prefix) + sum(
            _field_wire_type(fi).size for fi in cls.model_fields.values()
        )

    @classmethod
    def read_fields(cls, de: Deserializer, address: Optional[AddressLike] = None) -> dict[str, Any]:
        return {
            name: de.read(_field_wire_type(field_info))
            for name, field_info in cls.model_fields.items()
        }


class AirDropMessage(Message):
    """AirDrop message: truncated SHA-256 tokens of the sender's identifiers."""

    kind: ClassVar[MessageKind] = MessageKind.AIRDROP
    tag: ClassVar[MessageType] = MessageType.AIRDROP
    length: ClassVar[int] = 0x12
    prefix: ClassVar[bytes] = bytes(8) + b"\x01"  # zero padding, AirDrop version
    wire_size: ClassVar[int] = 19

    apple_id: TokenBytes
    phone: TokenBytes
    email: TokenBytes

    @classmethod
    def from_identifiers(
        cls,
        apple_id: Optional[str] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
    ) -> AirDropMessage:
        return cls(
            apple_id=identifier_token(apple_id),
            phone=identifier_token(phone),
            email=identifier_token(email),
        )

    def wire_values(self) -> Iterator[tuple[Any, WireType]]:
        yield from super().wire_values()
        # The email token fills the second email slot as well.
        yield self.email, Token


class AirPlaySourceMessage(Message):
    """AirPlay source message. Carries no dynamic data."""

    kind: ClassVar[MessageKind] = MessageKind.AIRPLAY_SOURCE
    tag: ClassVar[MessageType] = MessageType.AIRPLAY_SOURCE
    length: ClassVar[int] = 0x01
    prefix: ClassVar[bytes] = b"\x00"
    wire_size: ClassVar[int] = 3

    @classmethod
    def min_decode_size(cls) -> int:
        return 0


class AirPlayTargetMessage(Message):
    kind: ClassVar[MessageKind] = MessageKind.AIRPLAY_TARGET
    tag: ClassVar[MessageType] = MessageType.AIRPLAY_TARGET
    length: ClassVar[int] = 0x06
    prefix: ClassVar[bytes] = b"\x03\x07"  # address type, config seed
    wire_size: ClassVar[int] = 8

    ip_address: Annotated[IPv4Address, IPv4]


class AirPrintMessage(Message):
    kind: ClassVar[MessageKind] = MessageKind.AIRPRINT
    tag: ClassVar[MessageType] = MessageType.AIRPRINT
    length: ClassVar[int] = 0x16
    prefix: ClassVar[bytes] = b"\x74\x07\x6f"  # address type, resource path, security type
    wire_size: ClassVar[int] = 24

    port: Annotated[int, UInt16, Field(ge=0, le=0xFFFF)]
    ip_address: Annotated[IPv6Address, IPv6]
    power: Annotated[int, UInt8, Field(ge=0, le=0xFF)]


class FindMyMessage(Message):
    """FindMy (offline finding) message.

    Only the low 22 bytes of the public key travel in the payload. The
    leading 6 bytes become the transmitter's device address, so decoding
    needs that address supplied out-of-band.
    """

    kind: ClassVar[MessageKind] = MessageKind.FINDMY
    tag: ClassVar[MessageType] = MessageType.FINDMY
    length: ClassVar[int] = 0x19
    prefix: ClassVar[bytes] = b"\x00"  # status
    wire_size: ClassVar[int] = 26

    public_key: Annotated[
        bytes,
        FixedBytes(PUBLIC_KEY_SIZE),
        Field(min_length=PUBLIC_KEY_SIZE, max_length=PUBLIC_KEY_SIZE),
    ]

    @property
    def device_address(self) -> bytes:
        return self.public_key[:DEVICE_ADDRESS_SIZE]

    def wire_values(self) -> Iterator[tuple[Any, WireType]]:
        yield self.public_key[DEVICE_ADDRESS_SIZE:], _KEY_TAIL
        yield self.public_key[0] >> 6, UInt8

    @classmethod
    def min_decode_size(cls) -> int:
        return HEADER_SIZE + len(cls.prefix) + _KEY_TAIL.size

    @classmethod
    def read_fields(cls, de: Deserializer, address: Optional[AddressLike] = None) -> dict[str, Any]:
        if address is None:
            raise ValidationRejectedError("FindMy decode requires the transmitter's device address")
        try:
            device_address = parse_address(address)
        except ValueError as e:
            raise ValidationRejectedError(str(e)) from e
        return {"public_key": device_address + de.read(_KEY_TAIL)}


_KEY_TAIL = FixedBytes(PUBLIC_KEY_SIZE - DEVICE_ADDRESS_SIZE)

MESSAGE_TYPES: dict[MessageKind, type[Message]] = {
    cls.kind: cls
    for cls in (AirDropMessage, AirPlaySourceMessage, AirPlayTargetMessage, AirPrintMessage, FindMyMessage)
}

MESSAGE_TAGS: dict[int, type[Message]] = {cls.tag: cls for cls in MESSAGE_TYPES.values()}


def _field_wire_type(field_info: Any) -> WireType:
    for m in field_info.metadata:
        wt = get_wire_type(m)
        if wt is not None:
            return wt
    raise TypeError(f"No wire type declared for {field_info.annotation}")
