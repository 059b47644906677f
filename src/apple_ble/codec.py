"""Top-level encode/decode functions for continuity messages."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Type, Union

from apple_ble.address import AddressLike
from apple_ble.constants import APPLE_COMPANY_ID
from apple_ble.deserializer import Deserializer
from apple_ble.errors import AppleBleError, ValidationRejectedError
from apple_ble.messages import MESSAGE_TAGS, MESSAGE_TYPES, Message, MessageKind
from apple_ble.serializer import Serializer

logger = logging.getLogger(__name__)

KindLike = Union[MessageKind, str, Type[Message]]


def message_type_for(kind: KindLike) -> Type[Message]:
    """Resolve a MessageKind (or its value, or a record class) to its record class."""
    if isinstance(kind, type) and issubclass(kind, Message):
        return kind
    try:
        return MESSAGE_TYPES[MessageKind(kind)]
    except ValueError as e:
        raise ValidationRejectedError(f"Unknown message kind: {kind!r}") from e


def encode(message: Message) -> bytes:
    """Encode a message record to its wire bytes (type and length header included)."""
    message.validate_record()
    ser = Serializer()
    ser.serialize_message(message)
    data = bytes(ser.finalize())
    logger.debug("Encoded %s message: %s", message.kind.value, data.hex())
    return data


def decode(
    data: bytes | bytearray,
    kind: KindLike,
    address: Optional[AddressLike] = None,
) -> Message:
    """Decode wire bytes into the record for ``kind``.

    ``address`` is the transmitter's device address, required for FindMy
    messages and ignored otherwise.
    """
    de = Deserializer(data)
    return de.deserialize_message(message_type_for(kind), address)


def parse_manufacturer_data(
    manufacturer_data: Mapping[int, bytes | bytearray],
    address: Optional[AddressLike] = None,
) -> Optional[Message]:
    """Interpret an observed advertisement's manufacturer data.

    Picks the Apple entry and dispatches on its message type byte. Returns
    None when there is no Apple entry, the message type is unknown, or the
    payload cannot be decoded.
    """
    payload = manufacturer_data.get(APPLE_COMPANY_ID)
    if not payload:
        return None
    model_type = MESSAGE_TAGS.get(payload[0])
    if model_type is None:
        logger.debug("Ignoring unknown message type 0x%02X", payload[0])
        return None
    try:
        return decode(payload, model_type, address)
    except AppleBleError as e:
        logger.debug("Could not decode %s message: %s", model_type.kind.value, e)
        return None
